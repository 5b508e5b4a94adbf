"""
Groth-Sahai Flask Blueprint: JSON 엔드포인트
==============================================

CRS → 커밋 → 증명 → 검증 흐름을 단계별로 호출한다.
상태(CRS, 커밋먼트와 witness, 마지막 증명)는 TinyDB 에 저장한다.

  GET  /gs/health
  POST /gs/crs        CRS 생성
  GET  /gs/crs        저장된 CRS 조회
  POST /gs/commit     witness 커밋 (이름으로 저장)
  POST /gs/prove      저장된 커밋으로 방정식 증명
  POST /gs/verify     증명 검증
  POST /gs/clear      저장된 데이터 삭제

잘못된 요청은 400 과 {"error": ...} 를 돌려준다.
"""

from flask import Blueprint, current_app, jsonify, request
from tinydb import Query

from groth_sahai.errors import GrothSahaiError
from groth_sahai.field import make_rng
from groth_sahai.crs import CRS
from groth_sahai.prover import (
    batch_commit_G1,
    batch_commit_G2,
    batch_commit_scalar_to_B1,
    batch_commit_scalar_to_B2,
    prove,
)
from groth_sahai.verifier import verify

from gs_config import config
from gs_serializers import (
    parse_witnesses, serialize_witnesses, parse_equation,
    serialize_crs, deserialize_crs,
    serialize_commit, deserialize_commit,
    serialize_proof, deserialize_proof,
    serialize_coms, deserialize_coms,
    g1_short, g2_short,
)

gs_bp = Blueprint("gs", __name__, url_prefix="/gs")

DATA = Query()

# DB는 app.py에서 주입
DB = None

COMMITTERS = {
    "G1": batch_commit_G1,
    "G2": batch_commit_G2,
    "scalar_B1": batch_commit_scalar_to_B1,
    "scalar_B2": batch_commit_scalar_to_B2,
}


class RequestError(GrothSahaiError):
    """요청 내용이 처리할 수 없는 상태일 때 (CRS 없음, 이름 없음 등)."""


def init_gs_bp(db):
    """app.py에서 DB를 주입받는다."""
    global DB
    DB = db


# ─── DB 헬퍼 ───

def db_get(key):
    """DB에서 키로 데이터를 조회한다."""
    result = DB.search(DATA.type == key)
    if not result:
        return None
    return result[0].get("data")


def db_set(key, data):
    """DB에 키로 데이터를 저장한다."""
    DB.upsert({"type": key, "data": data}, DATA.type == key)


def db_remove_prefix(prefix):
    """prefix로 시작하는 모든 키를 삭제한다."""
    DB.remove(DATA.type.test(lambda t: t.startswith(prefix)))


def _load_crs():
    data = db_get("gs.crs")
    if data is None:
        raise RequestError("CRS가 없습니다. 먼저 POST /gs/crs 를 호출하세요")
    return deserialize_crs(data, config.compress)


def _load_commit(name):
    record = db_get(f"gs.commit.{name}")
    if record is None:
        raise RequestError(f"커밋 '{name}' 이 없습니다")
    return record


def _json_body():
    return request.get_json(silent=True) or {}


# ─── 오류 처리 ───

@gs_bp.errorhandler(GrothSahaiError)
@gs_bp.errorhandler(ValueError)
@gs_bp.errorhandler(KeyError)
@gs_bp.errorhandler(TypeError)
def bad_request(exc):
    current_app.logger.info("잘못된 요청: %s", exc)
    message = f"필수 필드가 없습니다: {exc}" if isinstance(exc, KeyError) else str(exc)
    return jsonify({"error": message}), 400


# ──────────────────────────────────────────────────────────────
# 상태
# ──────────────────────────────────────────────────────────────

@gs_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "crs": db_get("gs.crs") is not None})


# ──────────────────────────────────────────────────────────────
# CRS
# ──────────────────────────────────────────────────────────────

@gs_bp.route("/crs", methods=["POST"])
def crs_generate():
    """CRS를 생성하고 저장한다. seed 가 있으면 결정론적으로 만든다."""
    seed = _json_body().get("seed", config.crs_seed)
    crs = CRS.generate_crs(make_rng(seed))
    data = serialize_crs(crs, config.compress)
    db_set("gs.crs", data)
    current_app.logger.info("CRS 생성 (seed=%s)", "고정" if seed is not None else "없음")
    return jsonify({"crs": data})


@gs_bp.route("/crs", methods=["GET"])
def crs_get():
    crs = _load_crs()
    return jsonify({
        "crs": db_get("gs.crs"),
        "g1_gen": g1_short(crs.g1_gen),
        "g2_gen": g2_short(crs.g2_gen),
    })


# ──────────────────────────────────────────────────────────────
# 커밋
# ──────────────────────────────────────────────────────────────

@gs_bp.route("/commit", methods=["POST"])
def commit():
    """witness 를 커밋한다.

    요청: {"name": str, "kind": "G1"|"G2"|"scalar_B1"|"scalar_B2", "values": [...]}
    응답: 공개 커밋먼트 (랜덤니스는 돌려주지 않는다)
    """
    body = _json_body()
    name = body["name"]
    kind = body["kind"]
    values = parse_witnesses(kind, body["values"], config.compress)

    crs = _load_crs()
    commitment = COMMITTERS[kind](values, crs, make_rng())
    db_set(f"gs.commit.{name}", {
        "kind": kind,
        "values": serialize_witnesses(kind, values, config.compress),
        "commit": serialize_commit(commitment, config.compress),
    })
    current_app.logger.info("커밋 '%s' 저장 (%s, %d 개)", name, kind, len(values))
    return jsonify({
        "name": name,
        "kind": kind,
        "coms": serialize_coms(commitment.coms, config.compress),
    })


# ──────────────────────────────────────────────────────────────
# 증명 / 검증
# ──────────────────────────────────────────────────────────────

def _check_kind(record, expected, side):
    if record["kind"] != expected:
        raise RequestError(
            f"{side} 커밋 종류가 {record['kind']} 이지만 이 방정식에는 {expected} 가 필요합니다"
        )


@gs_bp.route("/prove", methods=["POST"])
def prove_equation():
    """저장된 커밋 두 개로 방정식을 증명한다.

    요청: {"equation": {...}, "x": 커밋 이름, "y": 커밋 이름}
    """
    body = _json_body()
    equ, x_kind, y_kind = parse_equation(body["equation"], config.compress)
    x_record = _load_commit(body["x"])
    y_record = _load_commit(body["y"])
    _check_kind(x_record, x_kind, "x")
    _check_kind(y_record, y_kind, "y")

    crs = _load_crs()
    xvars = parse_witnesses(x_kind, x_record["values"], config.compress)
    yvars = parse_witnesses(y_kind, y_record["values"], config.compress)
    xcoms = deserialize_commit(x_kind, x_record["commit"], config.compress)
    ycoms = deserialize_commit(y_kind, y_record["commit"], config.compress)

    proof = prove(equ, xvars, yvars, xcoms, ycoms, crs, make_rng())
    data = serialize_proof(proof, config.compress)
    db_set("gs.proof", data)
    current_app.logger.info("%s 증명 생성", body["equation"]["type"])
    return jsonify({"proof": data, "equ_type": proof.equ_type.name})


@gs_bp.route("/verify", methods=["POST"])
def verify_equation():
    """증명을 검증한다.

    요청: {"equation": {...}, "proof": hex (없으면 마지막 증명),
           "x": 커밋 이름 또는 "xcoms": [hex], "y" / "ycoms" 도 같다}
    """
    body = _json_body()
    equ, x_kind, y_kind = parse_equation(body["equation"], config.compress)
    crs = _load_crs()

    proof_hex = body.get("proof") or db_get("gs.proof")
    if proof_hex is None:
        raise RequestError("검증할 증명이 없습니다")
    proof = deserialize_proof(proof_hex, config.compress)

    xcoms = _public_coms(body, "x", x_kind)
    ycoms = _public_coms(body, "y", y_kind)

    valid = verify(equ, proof, xcoms, ycoms, crs)
    current_app.logger.info("%s 검증 결과: %s", body["equation"]["type"], valid)
    return jsonify({"valid": valid})


def _public_coms(body, side, kind):
    if f"{side}coms" in body:
        return deserialize_coms(kind, body[f"{side}coms"], config.compress)
    record = _load_commit(body[side])
    _check_kind(record, kind, side)
    return deserialize_commit(kind, record["commit"], config.compress).coms


@gs_bp.route("/clear", methods=["POST"])
def clear():
    db_remove_prefix("gs.")
    return jsonify({"status": "cleared"})
