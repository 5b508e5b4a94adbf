"""
커밋먼트 군 B1, B2 (SXDH 인스턴스)
====================================

**B1 = G1 × G1, B2 = G2 × G2**:
  커밋먼트는 점 두 개의 순서쌍이고 군 연산은 성분별로 한다.
    (a0, a1) + (b0, b1) = (a0 + b0, a1 + b1)
    (a0, a1) * s        = (s·a0, s·a1)
  영원은 (O, O) 이다.

**선형 사상 (linear map)**:
  공개 값이나 witness 를 커밋먼트 군으로 보내는 고정된 임베딩.
  - 군 원소:   ι1(x) = (O, x)
  - 스칼라:    ι1'(x) = (u1 + (O, P)) * x
    (u1 은 CRS 의 두 번째 기저, P 는 CRS 의 생성원)
  스칼라 임베딩은 "P 를 더한 뒤 x 배" 순서를 지켜야 witness 를 가릴 수 있다.

사용 예시:
    >>> c = Com1.linear_map(ec_mul(G1, 3))     # (O, 3·G1)
    >>> w = crs.u[1].scalar_linear_map(FR(7), crs.g1_gen)
"""

from groth_sahai.field import (
    Z1, Z2, ec_add, ec_neg, ec_mul, is_zero_point, random_g1, random_g2, to_affine,
)
from groth_sahai.algebra.matrix import Matrix
from groth_sahai.errors import DimensionMismatch


class _ComPair:
    """Com1 / Com2 공통 구현. 하위 클래스는 _ZERO_POINT, _random_point 를 정한다."""

    _ZERO_POINT = None

    def __init__(self, p0, p1):
        # 사영 좌표로 들어온 점도 z = 1 아핀 형태로 저장한다
        self.p0 = to_affine(p0)
        self.p1 = to_affine(p1)

    @classmethod
    def zero(cls):
        return cls(cls._ZERO_POINT, cls._ZERO_POINT)

    def is_zero(self):
        return is_zero_point(self.p0) and is_zero_point(self.p1)

    @classmethod
    def sum(cls, items):
        """items 의 합. 비어 있으면 영원."""
        total = cls.zero()
        for item in items:
            total = total + item
        return total

    @classmethod
    def rand(cls, rng):
        return cls(cls._random_point(rng), cls._random_point(rng))

    # ─── 군 연산 ───

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(ec_add(self.p0, other.p0), ec_add(self.p1, other.p1))

    def __neg__(self):
        return type(self)(ec_neg(self.p0), ec_neg(self.p1))

    def __sub__(self, other):
        return self + (-other)

    def __mul__(self, scalar):
        return type(self)(ec_mul(self.p0, scalar), ec_mul(self.p1, scalar))

    def scalar_mul(self, scalar):
        return self * scalar

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.p0 == other.p0 and self.p1 == other.p1

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((type(self).__name__, repr(self.p0), repr(self.p1)))

    def __repr__(self):
        return f"{type(self).__name__}({self.p0!r}, {self.p1!r})"

    # ─── 선형 사상 ───

    @classmethod
    def linear_map(cls, x):
        """군 원소 x → (O, x)."""
        return cls(cls._ZERO_POINT, x)

    @classmethod
    def batch_linear_map(cls, xs):
        return [cls.linear_map(x) for x in xs]

    def scalar_linear_map(self, x, p):
        """스칼라 x → (self + (O, p)) * x."""
        return (self + self.linear_map(p)) * x

    def batch_scalar_linear_map(self, xs, p):
        return [self.scalar_linear_map(x, p) for x in xs]

    # ─── 행렬 변환 ───

    def as_vec(self):
        return [self.p0, self.p1]

    def as_col_vec(self):
        """2×1 점 행렬 [[p0], [p1]]."""
        return Matrix([[self.p0], [self.p1]], cols=1)

    @classmethod
    def from_vec(cls, vec):
        if len(vec) != 2:
            raise DimensionMismatch(f"{cls.__name__} 는 점 2개가 필요합니다: {len(vec)}")
        return cls(vec[0], vec[1])

    @classmethod
    def from_col_vec(cls, mat):
        if mat.dim() != (2, 1):
            raise DimensionMismatch(f"{cls.__name__} 는 2×1 행렬이 필요합니다: {mat.dim()}")
        return cls(mat[0, 0], mat[1, 0])


class Com1(_ComPair):
    """B1 원소: G1 점 두 개의 순서쌍."""

    _ZERO_POINT = Z1

    @staticmethod
    def _random_point(rng):
        return random_g1(rng)


class Com2(_ComPair):
    """B2 원소: G2 점 두 개의 순서쌍."""

    _ZERO_POINT = Z2

    @staticmethod
    def _random_point(rng):
        return random_g2(rng)
