"""
Groth-Sahai 바이트 직렬화
==========================

모든 구조체를 필드 선언 순서대로 이어붙인 표준(canonical) 바이트열로 바꾼다.
같은 값은 항상 같은 바이트열이 되므로, 다른 구현과 바이트 단위로 비교할 수 있다.

**기본 원소**:
  FR  : 32 바이트 little-endian (값 < r)
  길이: u64 little-endian
  G1  : 압축 48 / 비압축 96 바이트
  G2  : 압축 96 / 비압축 192 바이트
  GT  : FQ12 계수 12 개 × 48 바이트 big-endian (두 모드 공통)

  G1/G2 는 ZCash 형식이다 (big-endian, 첫 바이트 상위 3비트가 플래그):
    0x80  압축 여부 (c_flag)
    0x40  무한원점 (b_flag)
    0x20  압축 시 y 의 부호 (a_flag)
  G2 좌표 순서는 x_c1, x_c0 (, y_c1, y_c0) 이다.

**복합 구조**:
  Com1 / Com2 : 점 두 개
  ComT        : GT 네 개 (행 우선)
  Matrix      : 행 수, 그리고 각 행마다 (길이, 원소들)
  Commit1/2   : coms 벡터, rand 행렬
  EquProof    : pi 행렬, theta 행렬, EquType 1 바이트
  CRS         : u 벡터, v 벡터, g1_gen, g2_gen

**디코딩**:
  잘린 입력, 남는 바이트, 범위를 벗어난 좌표, 곡선/부분군 밖의 점은 모두
  DeserializationError 로 거부한다. 부분적으로 만들어진 객체는 돌려주지 않는다.

사용 예시:
    >>> data = serialize(proof)
    >>> deserialize(EquProof, data) == proof   # True
"""

from py_ecc.bls.point_compression import (
    compress_G1,
    compress_G2,
    decompress_G1,
    decompress_G2,
)
from py_ecc.optimized_bls12_381 import field_modulus

from groth_sahai.errors import DeserializationError
from groth_sahai.field import (
    FR, FQ, FQ2, FQ12, Z1, Z2, CURVE_ORDER,
    is_zero_point, is_on_g1, is_on_g2, in_subgroup, to_affine,
)
from groth_sahai.algebra.matrix import Matrix
from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.algebra.com_t import ComT
from groth_sahai.prover.commit import Commit1, Commit2
from groth_sahai.statement import EquProof, EquType
from groth_sahai.crs import CRS

FR_SIZE = 32
FQ_SIZE = 48
LEN_SIZE = 8

C_FLAG = 0x80
B_FLAG = 0x40
A_FLAG = 0x20
FLAG_MASK = C_FLAG | B_FLAG | A_FLAG


# ─────────────────────────────────────────────────────────────────────
# 읽기 커서
# ─────────────────────────────────────────────────────────────────────

class _Reader:
    """바이트열 위의 읽기 커서. 모자란 입력은 DeserializationError."""

    def __init__(self, data, compress):
        self.data = bytes(data)
        self.pos = 0
        self.compress = compress

    def take(self, n):
        end = self.pos + n
        if end > len(self.data):
            raise DeserializationError(
                f"입력이 잘렸습니다: {n} 바이트가 필요하지만 {len(self.data) - self.pos} 바이트 남음"
            )
        chunk = self.data[self.pos:end]
        self.pos = end
        return chunk

    def finish(self):
        if self.pos != len(self.data):
            raise DeserializationError(
                f"남는 바이트가 있습니다: {len(self.data) - self.pos} 바이트"
            )


def _fq_bytes(value):
    return int(value).to_bytes(FQ_SIZE, "big")


def _read_fq_int(chunk):
    n = int.from_bytes(chunk, "big")
    if n >= field_modulus:
        raise DeserializationError("좌표가 기저 필드 범위를 벗어났습니다")
    return n


# ─────────────────────────────────────────────────────────────────────
# 기본 원소
# ─────────────────────────────────────────────────────────────────────

def _write_len(out, n):
    out += n.to_bytes(LEN_SIZE, "little")


def _read_len(r):
    n = int.from_bytes(r.take(LEN_SIZE), "little")
    # 남은 입력보다 긴 길이는 바로 거부한다
    if n > len(r.data) - r.pos:
        raise DeserializationError(f"길이 {n} 이 남은 입력보다 깁니다")
    return n


def _write_fr(out, x, compress=True):
    out += int(x).to_bytes(FR_SIZE, "little")


def _read_fr(r):
    n = int.from_bytes(r.take(FR_SIZE), "little")
    if n >= CURVE_ORDER:
        raise DeserializationError("스칼라가 FR 범위를 벗어났습니다")
    return FR(n)


def _write_g1(out, pt, compress=True):
    if compress:
        out += compress_G1(pt).to_bytes(FQ_SIZE, "big")
        return
    if is_zero_point(pt):
        out += bytes([B_FLAG]) + bytes(2 * FQ_SIZE - 1)
        return
    x, y, _ = to_affine(pt)
    out += _fq_bytes(x) + _fq_bytes(y)


def _read_g1(r):
    if r.compress:
        try:
            pt = decompress_G1(int.from_bytes(r.take(FQ_SIZE), "big"))
        except ValueError as exc:
            raise DeserializationError(f"G1 점 압축 해제 실패: {exc}") from exc
        return _checked_point(pt, is_on_g1, "G1")

    raw = r.take(2 * FQ_SIZE)
    flags = raw[0] & FLAG_MASK
    if flags & (C_FLAG | A_FLAG):
        raise DeserializationError("비압축 G1 에 압축 플래그가 있습니다")
    body = bytes([raw[0] & ~FLAG_MASK & 0xFF]) + raw[1:]
    if flags & B_FLAG:
        if any(body):
            raise DeserializationError("무한원점 인코딩이 0 이 아닙니다")
        return Z1
    x = _read_fq_int(body[:FQ_SIZE])
    y = _read_fq_int(body[FQ_SIZE:])
    return _checked_point((FQ(x), FQ(y), FQ.one()), is_on_g1, "G1")


def _write_g2(out, pt, compress=True):
    if compress:
        z1, z2 = compress_G2(pt)
        out += z1.to_bytes(FQ_SIZE, "big") + z2.to_bytes(FQ_SIZE, "big")
        return
    if is_zero_point(pt):
        out += bytes([B_FLAG]) + bytes(4 * FQ_SIZE - 1)
        return
    x, y, _ = to_affine(pt)
    x_c0, x_c1 = x.coeffs
    y_c0, y_c1 = y.coeffs
    out += _fq_bytes(x_c1) + _fq_bytes(x_c0) + _fq_bytes(y_c1) + _fq_bytes(y_c0)


def _read_g2(r):
    if r.compress:
        raw = r.take(2 * FQ_SIZE)
        z1 = int.from_bytes(raw[:FQ_SIZE], "big")
        z2 = int.from_bytes(raw[FQ_SIZE:], "big")
        try:
            pt = decompress_G2((z1, z2))
        except ValueError as exc:
            raise DeserializationError(f"G2 점 압축 해제 실패: {exc}") from exc
        return _checked_point(pt, is_on_g2, "G2")

    raw = r.take(4 * FQ_SIZE)
    flags = raw[0] & FLAG_MASK
    if flags & (C_FLAG | A_FLAG):
        raise DeserializationError("비압축 G2 에 압축 플래그가 있습니다")
    body = bytes([raw[0] & ~FLAG_MASK & 0xFF]) + raw[1:]
    if flags & B_FLAG:
        if any(body):
            raise DeserializationError("무한원점 인코딩이 0 이 아닙니다")
        return Z2
    x_c1, x_c0, y_c1, y_c0 = (
        _read_fq_int(body[i * FQ_SIZE:(i + 1) * FQ_SIZE]) for i in range(4)
    )
    pt = (FQ2([x_c0, x_c1]), FQ2([y_c0, y_c1]), FQ2.one())
    return _checked_point(pt, is_on_g2, "G2")


def _checked_point(pt, on_curve, name):
    if is_zero_point(pt):
        return Z2 if name == "G2" else Z1
    if not on_curve(pt):
        raise DeserializationError(f"{name} 점이 곡선 위에 있지 않습니다")
    if not in_subgroup(pt):
        raise DeserializationError(f"{name} 점이 위수 r 부분군에 속하지 않습니다")
    return to_affine(pt)


def _write_gt(out, z, compress=True):
    for c in z.coeffs:
        out += _fq_bytes(c)


def _read_gt(r):
    z = FQ12([_read_fq_int(r.take(FQ_SIZE)) for _ in range(12)])
    if z == FQ12.zero():
        raise DeserializationError("GT 원소가 0 입니다")
    return z


# ─────────────────────────────────────────────────────────────────────
# 커밋먼트 군 원소
# ─────────────────────────────────────────────────────────────────────

def _write_com1(out, com, compress=True):
    _write_g1(out, com.p0, compress)
    _write_g1(out, com.p1, compress)


def _read_com1(r):
    return Com1(_read_g1(r), _read_g1(r))


def _write_com2(out, com, compress=True):
    _write_g2(out, com.p0, compress)
    _write_g2(out, com.p1, compress)


def _read_com2(r):
    return Com2(_read_g2(r), _read_g2(r))


def _write_comt(out, ct, compress=True):
    for cell in ct.cells:
        _write_gt(out, cell)


def _read_comt(r):
    return ComT(*(_read_gt(r) for _ in range(4)))


_ELEMENTS = {
    FR: (_write_fr, _read_fr),
    Com1: (_write_com1, _read_com1),
    Com2: (_write_com2, _read_com2),
    ComT: (_write_comt, _read_comt),
}


def _codec(kind):
    try:
        return _ELEMENTS[kind]
    except KeyError:
        raise TypeError(f"직렬화할 수 없는 원소 타입입니다: {kind!r}") from None


# ─────────────────────────────────────────────────────────────────────
# 벡터, 행렬
# ─────────────────────────────────────────────────────────────────────

def _write_vec(out, items, kind, compress):
    write, _ = _codec(kind)
    _write_len(out, len(items))
    for item in items:
        write(out, item, compress)


def _read_vec(r, kind):
    _, read = _codec(kind)
    return [read(r) for _ in range(_read_len(r))]


def _write_matrix(out, mat, kind, compress):
    _write_len(out, len(mat))
    for row in mat.rows:
        _write_vec(out, row, kind, compress)


def _read_matrix(r, kind, cols=None):
    """행렬을 읽는다. 행이 없으면 바이트열에 열 수가 없으므로 cols 를 쓴다."""
    rows = [_read_vec(r, kind) for _ in range(_read_len(r))]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise DeserializationError("행렬의 행 길이가 서로 다릅니다")
    if not rows:
        return Matrix([], zero=kind.zero, cols=cols)
    return Matrix(rows, zero=kind.zero)


# ─────────────────────────────────────────────────────────────────────
# 공개 API
# ─────────────────────────────────────────────────────────────────────

def serialize_fr(x):
    out = bytearray()
    _write_fr(out, x)
    return bytes(out)


def serialize_g1(pt, compress=True):
    out = bytearray()
    _write_g1(out, pt, compress)
    return bytes(out)


def serialize_g2(pt, compress=True):
    out = bytearray()
    _write_g2(out, pt, compress)
    return bytes(out)


def serialize_gt(z):
    out = bytearray()
    _write_gt(out, z)
    return bytes(out)


def serialize_matrix(mat, kind, compress=True):
    """Matrix 를 직렬화한다. kind 는 원소 타입 (FR, Com1, Com2, ComT)."""
    out = bytearray()
    _write_matrix(out, mat, kind, compress)
    return bytes(out)


def serialize_commit(commit, compress=True):
    kind = Com1 if isinstance(commit, Commit1) else Com2
    out = bytearray()
    _write_vec(out, commit.coms, kind, compress)
    _write_matrix(out, commit.rand, FR, compress)
    return bytes(out)


def serialize_proof(proof, compress=True):
    out = bytearray()
    _write_matrix(out, proof.pi, Com2, compress)
    _write_matrix(out, proof.theta, Com1, compress)
    out.append(proof.equ_type.value)
    return bytes(out)


def serialize_crs(crs, compress=True):
    out = bytearray()
    _write_vec(out, crs.u, Com1, compress)
    _write_vec(out, crs.v, Com2, compress)
    _write_g1(out, crs.g1_gen, compress)
    _write_g2(out, crs.g2_gen, compress)
    return bytes(out)


def serialize(obj, compress=True):
    """타입에 따라 알맞은 직렬화 함수를 고른다.

    Matrix 는 원소 타입이 필요하므로 serialize_matrix 를 쓴다.
    """
    if isinstance(obj, (Commit1, Commit2)):
        return serialize_commit(obj, compress)
    if isinstance(obj, EquProof):
        return serialize_proof(obj, compress)
    if isinstance(obj, CRS):
        return serialize_crs(obj, compress)
    if isinstance(obj, FR):
        return serialize_fr(obj)
    for kind in (Com1, Com2, ComT):
        if isinstance(obj, kind):
            out = bytearray()
            _codec(kind)[0](out, obj, compress)
            return bytes(out)
    raise TypeError(f"직렬화할 수 없는 타입입니다: {type(obj).__name__}")


def _read_all(data, compress, read):
    r = _Reader(data, compress)
    obj = read(r)
    r.finish()
    return obj


def deserialize_fr(data):
    return _read_all(data, True, _read_fr)


def deserialize_g1(data, compress=True):
    return _read_all(data, compress, _read_g1)


def deserialize_g2(data, compress=True):
    return _read_all(data, compress, _read_g2)


def deserialize_gt(data):
    return _read_all(data, True, _read_gt)


def deserialize_matrix(data, kind, compress=True):
    return _read_all(data, compress, lambda r: _read_matrix(r, kind))


def deserialize_commit1(data, compress=True, rand_cols=None):
    """Commit1 을 읽는다.

    rand_cols 는 커밋 종류가 정하는 랜덤니스 열 수 (군 원소 2, 스칼라 1) 이다.
    coms 가 비어 있을 때 rand 를 (0, rand_cols) 모양으로 되살리는 데만 쓰인다.
    """
    return _read_all(
        data, compress,
        lambda r: Commit1(_read_vec(r, Com1), _read_matrix(r, FR, rand_cols)),
    )


def deserialize_commit2(data, compress=True, rand_cols=None):
    return _read_all(
        data, compress,
        lambda r: Commit2(_read_vec(r, Com2), _read_matrix(r, FR, rand_cols)),
    )


def _read_proof(r):
    pi = _read_matrix(r, Com2)
    theta = _read_matrix(r, Com1)
    tag = r.take(1)[0]
    try:
        equ_type = EquType(tag)
    except ValueError as exc:
        raise DeserializationError(f"알 수 없는 방정식 종류 태그: {tag}") from exc
    return EquProof(pi, theta, equ_type)


def deserialize_proof(data, compress=True):
    return _read_all(data, compress, _read_proof)


def _read_crs(r):
    u = _read_vec(r, Com1)
    v = _read_vec(r, Com2)
    if len(u) != 2 or len(v) != 2:
        raise DeserializationError(f"CRS 기저는 2 개씩이어야 합니다: {len(u)}, {len(v)}")
    return CRS(u, v, _read_g1(r), _read_g2(r))


def deserialize_crs(data, compress=True):
    return _read_all(data, compress, _read_crs)


_DESERIALIZERS = {
    FR: lambda data, compress: deserialize_fr(data),
    Com1: lambda data, compress: _read_all(data, compress, _read_com1),
    Com2: lambda data, compress: _read_all(data, compress, _read_com2),
    ComT: lambda data, compress: _read_all(data, compress, _read_comt),
    Commit1: deserialize_commit1,
    Commit2: deserialize_commit2,
    EquProof: deserialize_proof,
    CRS: deserialize_crs,
}


def deserialize(kind, data, compress=True):
    """kind 타입으로 data 를 디코딩한다.

    Raises:
        DeserializationError: 입력이 올바른 인코딩이 아닐 때
    """
    try:
        decoder = _DESERIALIZERS[kind]
    except KeyError:
        raise TypeError(f"역직렬화할 수 없는 타입입니다: {kind!r}") from None
    return decoder(data, compress)
