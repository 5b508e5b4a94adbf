"""
Flask 웹 서비스 테스트 (/gs 블루프린트)
========================================

MemoryStorage TinyDB 위에서 CRS → 커밋 → 증명 → 검증 흐름과 오류 응답을 확인한다.
"""

import pytest

from app import create_app


QUAD = {"type": "QuadEqu", "a_consts": [5], "b_consts": [0, 6], "gamma": [[7], [0]], "target": 94}


@pytest.fixture
def client():
    app = create_app(":memory:")
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def committed(client):
    """CRS 와 QuadEqu 용 커밋 두 개가 준비된 클라이언트."""
    client.post("/gs/crs", json={"seed": 1})
    x = client.post("/gs/commit", json={"name": "x", "kind": "scalar_B1", "values": [2, 3]})
    y = client.post("/gs/commit", json={"name": "y", "kind": "scalar_B2", "values": [4]})
    return client, x.get_json(), y.get_json()


class TestHealthAndCRS:
    """상태와 CRS 엔드포인트."""

    def test_health_without_crs(self, client):
        resp = client.get("/gs/health")
        assert resp.status_code == 200
        assert resp.get_json() == {"status": "ok", "crs": False}

    def test_generate_crs(self, client):
        resp = client.post("/gs/crs", json={"seed": 42})
        assert resp.status_code == 200
        assert client.get("/gs/health").get_json()["crs"] is True

    def test_seeded_crs_is_deterministic(self, client):
        a = client.post("/gs/crs", json={"seed": 42}).get_json()["crs"]
        b = client.post("/gs/crs", json={"seed": 42}).get_json()["crs"]
        assert a == b

    def test_get_crs(self, client):
        created = client.post("/gs/crs", json={"seed": 3}).get_json()["crs"]
        resp = client.get("/gs/crs")
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["crs"] == created
        assert "..." in body["g1_gen"]

    def test_get_crs_missing(self, client):
        resp = client.get("/gs/crs")
        assert resp.status_code == 400
        assert "error" in resp.get_json()


class TestCommit:
    """커밋 엔드포인트."""

    def test_commit_returns_public_coms(self, committed):
        _, x, y = committed
        assert x["kind"] == "scalar_B1"
        assert len(x["coms"]) == 2
        assert len(y["coms"]) == 1

    def test_commit_group_elements(self, client):
        client.post("/gs/crs", json={"seed": 1})
        resp = client.post("/gs/commit", json={"name": "X", "kind": "G1", "values": [2, 3]})
        assert resp.status_code == 200
        assert len(resp.get_json()["coms"]) == 2

    def test_commit_without_crs(self, client):
        resp = client.post("/gs/commit", json={"name": "x", "kind": "G1", "values": [1]})
        assert resp.status_code == 400

    def test_commit_unknown_kind(self, client):
        client.post("/gs/crs", json={"seed": 1})
        resp = client.post("/gs/commit", json={"name": "x", "kind": "G3", "values": [1]})
        assert resp.status_code == 400

    def test_commit_bad_hex(self, client):
        client.post("/gs/crs", json={"seed": 1})
        resp = client.post("/gs/commit", json={"name": "x", "kind": "G1", "values": ["zz"]})
        assert resp.status_code == 400

    def test_commit_missing_field(self, client):
        client.post("/gs/crs", json={"seed": 1})
        resp = client.post("/gs/commit", json={"kind": "G1", "values": [1]})
        assert resp.status_code == 400
        assert "name" in resp.get_json()["error"]


class TestProveVerify:
    """증명 / 검증 엔드포인트."""

    def test_round_trip(self, committed):
        client, x, y = committed
        resp = client.post("/gs/prove", json={"equation": QUAD, "x": "x", "y": "y"})
        assert resp.status_code == 200
        proof = resp.get_json()
        assert proof["equ_type"] == "Quadratic"

        resp = client.post("/gs/verify", json={
            "equation": QUAD, "proof": proof["proof"],
            "xcoms": x["coms"], "ycoms": y["coms"],
        })
        assert resp.status_code == 200
        assert resp.get_json() == {"valid": True}

    def test_wrong_target_is_invalid(self, committed):
        client, _, _ = committed
        client.post("/gs/prove", json={"equation": QUAD, "x": "x", "y": "y"})
        wrong = dict(QUAD, target=93)
        resp = client.post("/gs/verify", json={"equation": wrong, "x": "x", "y": "y"})
        assert resp.status_code == 200
        assert resp.get_json() == {"valid": False}

    def test_prove_with_wrong_commit_kind(self, committed):
        client, _, _ = committed
        ppe_like = dict(QUAD, type="MSMEG1", a_consts=[5])
        resp = client.post("/gs/prove", json={"equation": ppe_like, "x": "x", "y": "y"})
        assert resp.status_code == 400

    def test_prove_unknown_commit(self, committed):
        client, _, _ = committed
        resp = client.post("/gs/prove", json={"equation": QUAD, "x": "nope", "y": "y"})
        assert resp.status_code == 400

    def test_prove_gamma_mismatch(self, committed):
        client, _, _ = committed
        bad = dict(QUAD, gamma=[[7, 1], [0, 0]])
        resp = client.post("/gs/prove", json={"equation": bad, "x": "x", "y": "y"})
        assert resp.status_code == 400

    def test_verify_without_proof(self, committed):
        client, _, _ = committed
        resp = client.post("/gs/verify", json={"equation": QUAD, "x": "x", "y": "y"})
        assert resp.status_code == 400

    def test_empty_x_witnesses(self, committed):
        client, _, y = committed
        resp = client.post("/gs/commit", json={"name": "none", "kind": "scalar_B1", "values": []})
        assert resp.status_code == 200
        assert resp.get_json()["coms"] == []

        equ = {"type": "QuadEqu", "a_consts": [5], "b_consts": [], "gamma": [], "target": 20}
        resp = client.post("/gs/prove", json={"equation": equ, "x": "none", "y": "y"})
        assert resp.status_code == 200
        resp = client.post("/gs/verify", json={"equation": equ, "x": "none", "y": "y"})
        assert resp.get_json() == {"valid": True}

    def test_unknown_equation_type(self, committed):
        client, _, _ = committed
        resp = client.post("/gs/prove", json={"equation": dict(QUAD, type="Cubic"), "x": "x", "y": "y"})
        assert resp.status_code == 400


def test_clear(committed):
    client, _, _ = committed
    assert client.post("/gs/clear").status_code == 200
    assert client.get("/gs/health").get_json()["crs"] is False
    resp = client.post("/gs/prove", json={"equation": QUAD, "x": "x", "y": "y"})
    assert resp.status_code == 400
