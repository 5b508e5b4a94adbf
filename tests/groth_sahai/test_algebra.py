"""
Tests for the commitment-group algebra: Com1 (B1), Com2 (B2), ComT (BT).

Covers:
- group laws: zero, add, neg, sub, scalar_mul
- linear_map / scalar_linear_map definitions
- matrix conversions (as_col_vec / from_col_vec, as_matrix / from_matrix)
- pairing cell layout, bilinearity, zero convention, pairing_sum
- per-equation ComT linear maps

페어링은 순수 파이썬에서 느리므로 GT 연산 테스트는 e(G1, G2) 의 거듭제곱으로 한다.
"""

import pytest

from py_ecc.optimized_bls12_381 import multiply

from groth_sahai.errors import DimensionMismatch
from groth_sahai.field import (
    FR, G1, G2, Z1, Z2, ec_mul, ec_add, ec_pairing, gt_generator, gt_zero, make_rng,
)
from groth_sahai.algebra.matrix import Matrix
from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.algebra.com_t import ComT


@pytest.fixture(scope="module")
def gt():
    return gt_generator()


@pytest.fixture(scope="module")
def comt_pair(gt):
    a = ComT(gt ** 2, gt ** 3, gt ** 5, gt ** 7)
    b = ComT(gt ** 11, gt ** 13, gt ** 17, gt ** 19)
    return a, b


# ─────────────────────────────────────────────────────────────────────
# B1, B2
# ─────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("com_cls,gen,zero_pt", [(Com1, G1, Z1), (Com2, G2, Z2)])
class TestComPair:
    """Com1 / Com2 군 연산."""

    def test_zero(self, com_cls, gen, zero_pt):
        assert com_cls.zero() == com_cls(zero_pt, zero_pt)

    def test_add_zero(self, com_cls, gen, zero_pt):
        c = com_cls.rand(make_rng(1))
        assert c + com_cls.zero() == c
        assert com_cls.zero() + c == c

    def test_add(self, com_cls, gen, zero_pt):
        a = com_cls(ec_mul(gen, 1), ec_mul(gen, 2))
        b = com_cls(ec_mul(gen, 3), ec_mul(gen, 4))
        assert a + b == com_cls(ec_mul(gen, 4), ec_mul(gen, 6))

    def test_add_commutative(self, com_cls, gen, zero_pt):
        rng = make_rng(2)
        a, b = com_cls.rand(rng), com_cls.rand(rng)
        assert a + b == b + a

    def test_neg(self, com_cls, gen, zero_pt):
        c = com_cls.rand(make_rng(3))
        assert c + (-c) == com_cls.zero()

    def test_sub(self, com_cls, gen, zero_pt):
        a = com_cls(ec_mul(gen, 5), ec_mul(gen, 9))
        b = com_cls(ec_mul(gen, 2), ec_mul(gen, 4))
        assert a - b == com_cls(ec_mul(gen, 3), ec_mul(gen, 5))

    def test_scalar_mul(self, com_cls, gen, zero_pt):
        c = com_cls(ec_mul(gen, 2), ec_mul(gen, 3))
        assert c * FR(4) == com_cls(ec_mul(gen, 8), ec_mul(gen, 12))
        assert c.scalar_mul(FR(4)) == c * FR(4)

    def test_scalar_mul_by_zero(self, com_cls, gen, zero_pt):
        c = com_cls.rand(make_rng(4))
        assert c * FR(0) == com_cls.zero()

    def test_is_zero(self, com_cls, gen, zero_pt):
        assert com_cls.zero().is_zero()
        assert not com_cls.linear_map(gen).is_zero()
        c = com_cls.rand(make_rng(8))
        assert (c - c).is_zero()

    def test_sum(self, com_cls, gen, zero_pt):
        items = [com_cls.linear_map(ec_mul(gen, k)) for k in (1, 2, 3)]
        assert com_cls.sum(items) == com_cls.linear_map(ec_mul(gen, 6))
        assert com_cls.sum([]) == com_cls.zero()

    def test_projective_point_is_normalized(self, com_cls, gen, zero_pt):
        projective = multiply(gen, 5)
        c = com_cls.linear_map(projective)
        assert c == com_cls.linear_map(ec_mul(gen, 5))
        assert c.p1[2] == c.p1[2].__class__.one()

    def test_linear_map(self, com_cls, gen, zero_pt):
        x = ec_mul(gen, 6)
        assert com_cls.linear_map(x) == com_cls(zero_pt, x)

    def test_batch_linear_map(self, com_cls, gen, zero_pt):
        xs = [ec_mul(gen, 1), ec_mul(gen, 2)]
        assert com_cls.batch_linear_map(xs) == [com_cls.linear_map(x) for x in xs]

    def test_scalar_linear_map(self, com_cls, gen, zero_pt):
        base = com_cls.rand(make_rng(5))
        p = ec_mul(gen, 7)
        expected = com_cls(base.p0, ec_add(base.p1, p)) * FR(3)
        assert base.scalar_linear_map(FR(3), p) == expected

    def test_batch_scalar_linear_map(self, com_cls, gen, zero_pt):
        base = com_cls.rand(make_rng(6))
        xs = [FR(1), FR(2)]
        assert base.batch_scalar_linear_map(xs, gen) == [
            base.scalar_linear_map(x, gen) for x in xs
        ]

    def test_col_vec_round_trip(self, com_cls, gen, zero_pt):
        c = com_cls.rand(make_rng(7))
        mat = c.as_col_vec()
        assert mat.dim() == (2, 1)
        assert com_cls.from_col_vec(mat) == c
        assert c.as_vec() == [c.p0, c.p1]

    def test_from_col_vec_rejects_wrong_shape(self, com_cls, gen, zero_pt):
        with pytest.raises(DimensionMismatch):
            com_cls.from_col_vec(Matrix([[gen, gen]]))


class TestComTypes:
    """Com1 과 Com2 는 서로 다른 타입이다."""

    def test_not_equal_across_groups(self):
        assert Com1.zero() != Com2.zero()

    def test_add_across_groups_fails(self):
        with pytest.raises(TypeError):
            Com1.zero() + Com2.zero()


# ─────────────────────────────────────────────────────────────────────
# BT
# ─────────────────────────────────────────────────────────────────────

class TestComT:
    """ComT 군 연산과 행렬 변환."""

    def test_zero(self):
        assert ComT.zero() == ComT(gt_zero(), gt_zero(), gt_zero(), gt_zero())

    def test_add_zero(self, comt_pair):
        a, _ = comt_pair
        assert a + ComT.zero() == a

    def test_add(self, gt, comt_pair):
        a, b = comt_pair
        assert a + b == ComT(gt ** 13, gt ** 16, gt ** 22, gt ** 26)

    def test_neg(self, comt_pair):
        a, _ = comt_pair
        assert a + (-a) == ComT.zero()

    def test_is_zero(self, comt_pair):
        a, _ = comt_pair
        assert ComT.zero().is_zero()
        assert not a.is_zero()
        assert (a - a).is_zero()

    def test_sum(self, gt, comt_pair):
        a, b = comt_pair
        assert ComT.sum([a, b]) == a + b
        assert ComT.sum([]) == ComT.zero()

    def test_sub(self, gt, comt_pair):
        a, b = comt_pair
        assert b - a == ComT(gt ** 9, gt ** 10, gt ** 12, gt ** 12)

    def test_scalar_mul(self, gt, comt_pair):
        a, _ = comt_pair
        assert a * FR(2) == ComT(gt ** 4, gt ** 6, gt ** 10, gt ** 14)

    def test_as_matrix(self, gt, comt_pair):
        a, _ = comt_pair
        mat = a.as_matrix()
        assert mat.dim() == (2, 2)
        assert mat[0, 1] == gt ** 3
        assert mat[1, 0] == gt ** 5

    def test_from_matrix(self, comt_pair):
        a, _ = comt_pair
        assert ComT.from_matrix(a.as_matrix()) == a

    def test_indexing(self, gt, comt_pair):
        a, _ = comt_pair
        assert a[1, 1] == gt ** 7
        assert a[2] == gt ** 5


class TestPairing:
    """B1 × B2 → BT 페어링."""

    def test_cell_layout(self, gt):
        ct = ComT.pairing(Com1(G1, Z1), Com2(Z2, G2))
        assert ct[0, 0] == gt_zero()
        assert ct[0, 1] == gt
        assert ct[1, 0] == gt_zero()
        assert ct[1, 1] == gt_zero()

    def test_bilinear(self, gt):
        ct = ComT.pairing(
            Com1.linear_map(ec_mul(G1, 3)), Com2.linear_map(ec_mul(G2, 5))
        )
        assert ct == ComT.linear_map_PPE(gt ** 15)

    def test_matches_ec_pairing(self):
        p, q = ec_mul(G1, 2), ec_mul(G2, 9)
        ct = ComT.pairing(Com1.linear_map(p), Com2.linear_map(q))
        assert ct[1, 1] == ec_pairing(p, q)

    def test_zero_com1_gives_zero(self):
        assert ComT.pairing(Com1.zero(), Com2.rand(make_rng(8))) == ComT.zero()

    def test_zero_com2_gives_zero(self):
        assert ComT.pairing(Com1.rand(make_rng(9)), Com2.zero()) == ComT.zero()

    def test_pairing_sum(self, gt):
        xs = [Com1.linear_map(ec_mul(G1, 2)), Com1.linear_map(ec_mul(G1, 3))]
        ys = [Com2.linear_map(ec_mul(G2, 4)), Com2.linear_map(ec_mul(G2, 5))]
        # 2·4 + 3·5 = 23
        assert ComT.pairing_sum(xs, ys) == ComT.linear_map_PPE(gt ** 23)

    def test_pairing_sum_empty(self):
        assert ComT.pairing_sum([], []) == ComT.zero()

    def test_pairing_sum_length_mismatch(self):
        with pytest.raises(DimensionMismatch):
            ComT.pairing_sum([Com1.zero()], [])


class TestLinearMaps:
    """방정식별 ComT 선형 사상."""

    def test_linear_map_ppe(self, gt):
        ct = ComT.linear_map_PPE(gt)
        assert ct == ComT(gt_zero(), gt_zero(), gt_zero(), gt)

    def test_linear_map_msmeg1_first_row_zero(self, crs):
        ct = ComT.linear_map_MSMEG1(ec_mul(G1, 3), crs.v[1], crs.g2_gen)
        assert ct[0, 0] == gt_zero()
        assert ct[0, 1] == gt_zero()
        assert ct[1, 1] != gt_zero()

    def test_linear_map_msmeg2_first_column_zero(self, crs):
        ct = ComT.linear_map_MSMEG2(ec_mul(G2, 3), crs.u[1], crs.g1_gen)
        assert ct[0, 0] == gt_zero()
        assert ct[1, 0] == gt_zero()
        assert ct[1, 1] != gt_zero()

    def test_linear_map_msmeg1_is_linear(self, crs):
        one = ComT.linear_map_MSMEG1(G1, crs.v[1], crs.g2_gen)
        three = ComT.linear_map_MSMEG1(ec_mul(G1, 3), crs.v[1], crs.g2_gen)
        assert three == one * FR(3)

    def test_linear_map_quad_is_linear(self, crs):
        args = (crs.u[1], crs.g1_gen, crs.v[1], crs.g2_gen)
        one = ComT.linear_map_quad(FR(1), *args)
        two = ComT.linear_map_quad(FR(2), *args)
        assert two == one * FR(2)
