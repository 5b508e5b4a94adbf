"""
Tests for the CRS generator and the commitment scheme.

Covers:
- CRS structure (binding setting: u1 = t1·u0, v1 = t2·v0) and determinism
- single vs batch commit shapes and randomness dimensions
- commitment equals ι(x) + R·u recomputed from the returned randomness
- scalar commitments use u1.scalar_linear_map(x, g1) + r·u0
- fresh randomness gives different commitments to the same witness
"""

import pytest

from groth_sahai.field import (
    FR, G1, G2, Z1, Z2, CURVE_ORDER, ec_mul, is_zero_point, make_rng,
)
from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.crs import CRS, generate_crs
from groth_sahai.prover.commit import (
    Commit1,
    Commit2,
    commit_G1,
    commit_G2,
    batch_commit_G1,
    batch_commit_G2,
    commit_scalar_to_B1,
    commit_scalar_to_B2,
    batch_commit_scalar_to_B1,
    batch_commit_scalar_to_B2,
)


# ─────────────────────────────────────────────────────────────────────
# CRS
# ─────────────────────────────────────────────────────────────────────

class TestCRS:
    """CRS.generate_crs 테스트."""

    def test_lengths(self, crs):
        assert len(crs.u) == 2
        assert len(crs.v) == 2

    def test_generators_not_infinity(self, crs):
        assert not is_zero_point(crs.g1_gen)
        assert not is_zero_point(crs.g2_gen)

    def test_u0_first_component_is_generator(self, crs):
        assert crs.u[0].p0 == crs.g1_gen
        assert crs.v[0].p0 == crs.g2_gen

    def test_deterministic_with_same_seed(self):
        assert CRS.generate_crs(make_rng(3)) == generate_crs(make_rng(3))

    def test_different_seeds_differ(self):
        assert CRS.generate_crs(make_rng(3)) != CRS.generate_crs(make_rng(4))

    def test_binding_setting(self):
        # 같은 시드로 생성원 스칼라 두 개, a1, a2, t1, t2 를 다시 뽑는다
        crs = CRS.generate_crs(make_rng(99))
        replay = make_rng(99)
        s1, s2, a1, a2, t1, t2 = (FR(replay.randrange(CURVE_ORDER)) for _ in range(6))
        assert crs.g1_gen == ec_mul(G1, s1)
        assert crs.g2_gen == ec_mul(G2, s2)
        assert crs.u[0] == Com1(crs.g1_gen, ec_mul(crs.g1_gen, a1))
        assert crs.v[0] == Com2(crs.g2_gen, ec_mul(crs.g2_gen, a2))
        assert crs.u[1] == crs.u[0] * t1
        assert crs.v[1] == crs.v[0] * t2
        assert crs.u[0].p1 != Z1
        assert crs.v[0].p1 != Z2


# ─────────────────────────────────────────────────────────────────────
# G1 / G2 커밋
# ─────────────────────────────────────────────────────────────────────

class TestGroupCommit:
    """군 원소 커밋."""

    def test_commit_G1_shape(self, crs, rng):
        com = commit_G1(ec_mul(G1, 5), crs, rng)
        assert isinstance(com, Commit1)
        assert len(com.coms) == 1
        assert com.rand.dim() == (1, 2)

    def test_commit_G2_shape(self, crs, rng):
        com = commit_G2(ec_mul(G2, 5), crs, rng)
        assert isinstance(com, Commit2)
        assert len(com.coms) == 1
        assert com.rand.dim() == (1, 2)

    def test_batch_commit_G1_shape(self, crs, rng):
        xs = [ec_mul(G1, k) for k in (2, 3, 4)]
        com = batch_commit_G1(xs, crs, rng)
        assert len(com.coms) == 3
        assert com.rand.dim() == (3, 2)

    def test_batch_commit_G1_opens(self, crs, rng):
        xs = [ec_mul(G1, 2), ec_mul(G1, 3)]
        com = batch_commit_G1(xs, crs, rng)
        for i, x in enumerate(xs):
            r1, r2 = com.rand[i]
            expected = Com1.linear_map(x) + crs.u[0] * r1 + crs.u[1] * r2
            assert com.coms[i] == expected

    def test_batch_commit_G2_opens(self, crs, rng):
        ys = [ec_mul(G2, 4)]
        com = batch_commit_G2(ys, crs, rng)
        r1, r2 = com.rand[0]
        assert com.coms[0] == Com2.linear_map(ys[0]) + crs.v[0] * r1 + crs.v[1] * r2

    def test_commit_hides_with_fresh_randomness(self, crs):
        x = ec_mul(G1, 7)
        a = commit_G1(x, crs, make_rng(1))
        b = commit_G1(x, crs, make_rng(2))
        assert a.coms != b.coms

    def test_same_rng_state_same_commitment(self, crs):
        x = ec_mul(G1, 7)
        assert commit_G1(x, crs, make_rng(1)) == commit_G1(x, crs, make_rng(1))

    def test_batch_empty(self, crs, rng):
        com = batch_commit_G1([], crs, rng)
        assert com.coms == []
        assert com.rand.dim() == (0, 2)


# ─────────────────────────────────────────────────────────────────────
# 스칼라 커밋
# ─────────────────────────────────────────────────────────────────────

class TestScalarCommit:
    """스칼라를 B1 / B2 로 커밋."""

    def test_commit_scalar_to_B1_shape(self, crs, rng):
        com = commit_scalar_to_B1(FR(3), crs, rng)
        assert isinstance(com, Commit1)
        assert com.rand.dim() == (1, 1)

    def test_commit_scalar_to_B2_shape(self, crs, rng):
        com = commit_scalar_to_B2(FR(3), crs, rng)
        assert isinstance(com, Commit2)
        assert com.rand.dim() == (1, 1)

    def test_batch_commit_scalar_to_B1_opens(self, crs, rng):
        xs = [FR(2), FR(9)]
        com = batch_commit_scalar_to_B1(xs, crs, rng)
        assert com.rand.dim() == (2, 1)
        for i, x in enumerate(xs):
            expected = crs.u[1].scalar_linear_map(x, crs.g1_gen) + crs.u[0] * com.rand[i, 0]
            assert com.coms[i] == expected

    def test_batch_commit_scalar_to_B2_opens(self, crs, rng):
        ys = [FR(6)]
        com = batch_commit_scalar_to_B2(ys, crs, rng)
        expected = crs.v[1].scalar_linear_map(ys[0], crs.g2_gen) + crs.v[0] * com.rand[0, 0]
        assert com.coms[0] == expected

    @pytest.mark.parametrize("commit_fn", [commit_scalar_to_B1, commit_scalar_to_B2])
    def test_fresh_randomness_differs(self, crs, commit_fn):
        a = commit_fn(FR(1), crs, make_rng(10))
        b = commit_fn(FR(1), crs, make_rng(11))
        assert a.coms != b.coms
