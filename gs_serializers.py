"""
Groth-Sahai 웹 데이터 변환 헬퍼
================================

JSON 요청 값을 라이브러리 객체로 바꾸고, 라이브러리 객체를 TinyDB 에
저장 가능한 형태(hex 문자열, 10진 문자열)로 바꾼다.

**입력 규칙**:
  군 원소 (G1, G2, GT): 정수 k 이면 k·생성원, 문자열이면 표준 인코딩의 hex
  스칼라: 정수 또는 10진 문자열
"""

from groth_sahai.errors import DeserializationError
from groth_sahai.field import FR, G1, G2, ec_mul, gt_generator, gt_mul_scalar
from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.prover.commit import Commit1, Commit2
from groth_sahai.statement import EquProof, PPE, MSMEG1, MSMEG2, QuadEqu
from groth_sahai.crs import CRS
from groth_sahai.serialization import (
    serialize, deserialize,
    serialize_g1, deserialize_g1,
    serialize_g2, deserialize_g2,
    deserialize_gt,
    deserialize_commit1, deserialize_commit2,
)


# ─── hex ───

def to_hex(data):
    return data.hex()


def from_hex(s):
    """hex 문자열 → bytes. 잘못된 hex 는 DeserializationError."""
    if not isinstance(s, str):
        raise DeserializationError(f"hex 문자열이 아닙니다: {s!r}")
    try:
        return bytes.fromhex(s[2:] if s.startswith("0x") else s)
    except ValueError as exc:
        raise DeserializationError(f"잘못된 hex 입니다: {s!r}") from exc


# ─── 입력 값 파싱 ───

def parse_scalar(value):
    """int 또는 10진 문자열 → FR"""
    if isinstance(value, bool):
        raise ValueError(f"스칼라가 아닙니다: {value!r}")
    return FR(int(value))


def parse_g1(value, compress=True):
    if isinstance(value, int) and not isinstance(value, bool):
        return ec_mul(G1, value)
    return deserialize_g1(from_hex(value), compress)


def parse_g2(value, compress=True):
    if isinstance(value, int) and not isinstance(value, bool):
        return ec_mul(G2, value)
    return deserialize_g2(from_hex(value), compress)


def parse_gt(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return gt_mul_scalar(gt_generator(), value)
    return deserialize_gt(from_hex(value))


# 커밋 종류별 (witness 파서, witness 직렬화, 커밋먼트 클래스)
COMMIT_KINDS = {
    "G1": (parse_g1, lambda x, c: to_hex(serialize_g1(x, c)), Commit1),
    "G2": (parse_g2, lambda y, c: to_hex(serialize_g2(y, c)), Commit2),
    "scalar_B1": (lambda v, c: parse_scalar(v), lambda x, c: str(int(x)), Commit1),
    "scalar_B2": (lambda v, c: parse_scalar(v), lambda y, c: str(int(y)), Commit2),
}

# 커밋 종류별 랜덤니스 열 수
RAND_COLS = {"G1": 2, "G2": 2, "scalar_B1": 1, "scalar_B2": 1}


def parse_witnesses(kind, values, compress=True):
    if kind not in COMMIT_KINDS:
        raise ValueError(f"알 수 없는 커밋 종류입니다: {kind!r}")
    parse, _, _ = COMMIT_KINDS[kind]
    return [parse(v, compress) for v in values]


def serialize_witnesses(kind, values, compress=True):
    _, dump, _ = COMMIT_KINDS[kind]
    return [dump(v, compress) for v in values]


# ─── 방정식 ───

# 방정식 이름 → (클래스, a 파서, b 파서, target 파서, X 커밋 종류, Y 커밋 종류)
EQUATIONS = {
    "PPE": (PPE, parse_g1, parse_g2, lambda t, c: parse_gt(t), "G1", "G2"),
    "MSMEG1": (MSMEG1, parse_g1, lambda v, c: parse_scalar(v), parse_g1, "G1", "scalar_B2"),
    "MSMEG2": (MSMEG2, lambda v, c: parse_scalar(v), parse_g2, parse_g2, "scalar_B1", "G2"),
    "QuadEqu": (QuadEqu, lambda v, c: parse_scalar(v), lambda v, c: parse_scalar(v),
                lambda t, c: parse_scalar(t), "scalar_B1", "scalar_B2"),
}


def parse_equation(data, compress=True):
    """{"type", "a_consts", "b_consts", "gamma", "target"} → 방정식 객체

    Returns:
        (equ, x_kind, y_kind)
    """
    equ_name = data["type"]
    if equ_name not in EQUATIONS:
        raise ValueError(f"알 수 없는 방정식 종류입니다: {equ_name!r}")
    cls, parse_a, parse_b, parse_t, x_kind, y_kind = EQUATIONS[equ_name]
    equ = cls(
        [parse_a(a, compress) for a in data.get("a_consts", [])],
        [parse_b(b, compress) for b in data.get("b_consts", [])],
        [[parse_scalar(g) for g in row] for row in data.get("gamma", [])],
        parse_t(data["target"], compress),
    )
    return equ, x_kind, y_kind


# ─── 저장용 변환 ───

def serialize_crs(crs, compress=True):
    return to_hex(serialize(crs, compress))


def deserialize_crs(s, compress=True):
    return deserialize(CRS, from_hex(s), compress)


def serialize_commit(commit, compress=True):
    return to_hex(serialize(commit, compress))


def deserialize_commit(kind, s, compress=True):
    decode = deserialize_commit1 if COMMIT_KINDS[kind][2] is Commit1 else deserialize_commit2
    return decode(from_hex(s), compress, rand_cols=RAND_COLS[kind])


def serialize_proof(proof, compress=True):
    return to_hex(serialize(proof, compress))


def deserialize_proof(s, compress=True):
    return deserialize(EquProof, from_hex(s), compress)


def serialize_coms(coms, compress=True):
    """공개 커밋먼트 리스트 → hex 리스트"""
    return [to_hex(serialize(c, compress)) for c in coms]


def deserialize_coms(kind, data, compress=True):
    com_cls = Com1 if COMMIT_KINDS[kind][2] is Commit1 else Com2
    return [deserialize(com_cls, from_hex(s), compress) for s in data]


# ─── 표시용 ───

def _shorten(s, keep=4):
    if len(s) <= 2 * keep:
        return s
    return s[:keep] + "..." + s[-keep:]


def g1_short(point):
    """G1 point → 축약 hex 문자열 (표시용)"""
    return _shorten(to_hex(serialize_g1(point)), 6)


def g2_short(point):
    """G2 point → 축약 hex 문자열 (표시용)"""
    return _shorten(to_hex(serialize_g2(point)), 6)

