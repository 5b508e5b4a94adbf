"""
페어링 타깃 커밋먼트 군 BT
===========================

**BT = GT⁴**:
  논리적으로 GT 원소의 2×2 행렬이며 군 연산은 성분별이다.
  GT 는 덧셈 표기로 쓴다 (field.py 참고: + 는 FQ12 곱셈, 영원은 FQ12.one()).

**페어링 F: B1 × B2 → BT**:
    F((x0, x1), (y0, y1)) = | e(x0,y0)  e(x0,y1) |
                            | e(x1,y0)  e(x1,y1) |

  pairing_sum(xs, ys) = Σ F(xs[i], ys[i]) 는 칸마다 멀티 페어링 한 번으로 계산한다.

**방정식별 선형 사상 ι_T**:
  공개 타깃 t 를 BT 로 보내 검증 항등식의 우변에 더한다.
  - PPE:    (0, 0, 0, t)
  - MSMEG1: F(ι1(t), ι2'(1))
  - MSMEG2: F(ι1'(1), ι2(t))
  - Quad:   F(ι1'(1), ι2'(1) * t)
"""

from groth_sahai.field import (
    FR, gt_zero, gt_add, gt_neg, gt_mul_scalar, multi_pairing, random_gt,
)
from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.algebra.matrix import Matrix
from groth_sahai.errors import DimensionMismatch


class ComT:
    """BT 원소: 행 우선 순서의 GT 네 개 (t00, t01, t10, t11)."""

    def __init__(self, t00, t01, t10, t11):
        self.cells = (t00, t01, t10, t11)

    @classmethod
    def zero(cls):
        return cls(gt_zero(), gt_zero(), gt_zero(), gt_zero())

    def is_zero(self):
        return all(a == gt_zero() for a in self.cells)

    @classmethod
    def sum(cls, items):
        """items 의 합. 비어 있으면 영원."""
        total = cls.zero()
        for item in items:
            total = total + item
        return total

    @classmethod
    def rand(cls, rng):
        return cls(random_gt(rng), random_gt(rng), random_gt(rng), random_gt(rng))

    def __add__(self, other):
        if not isinstance(other, ComT):
            return NotImplemented
        return ComT(*(gt_add(a, b) for a, b in zip(self.cells, other.cells)))

    def __neg__(self):
        return ComT(*(gt_neg(a) for a in self.cells))

    def __sub__(self, other):
        return self + (-other)

    def __mul__(self, scalar):
        return ComT(*(gt_mul_scalar(a, scalar) for a in self.cells))

    def scalar_mul(self, scalar):
        return self * scalar

    def __eq__(self, other):
        if not isinstance(other, ComT):
            return NotImplemented
        return all(a == b for a, b in zip(self.cells, other.cells))

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(tuple(tuple(int(c) for c in a.coeffs) for a in self.cells))

    def __repr__(self):
        return f"ComT{self.cells!r}"

    def __getitem__(self, idx):
        """ct[i, j] 또는 ct[k] (행 우선 인덱스)."""
        if isinstance(idx, tuple):
            i, j = idx
            return self.cells[2 * i + j]
        return self.cells[idx]

    # ─── 행렬 변환 ───

    def as_matrix(self):
        t00, t01, t10, t11 = self.cells
        return Matrix([[t00, t01], [t10, t11]], cols=2)

    @classmethod
    def from_matrix(cls, mat):
        if mat.dim() != (2, 2):
            raise DimensionMismatch(f"ComT 는 2×2 행렬이 필요합니다: {mat.dim()}")
        return cls(mat[0, 0], mat[0, 1], mat[1, 0], mat[1, 1])

    # ─── 페어링 ───

    @classmethod
    def pairing(cls, x, y):
        """F(x, y): Com1 과 Com2 의 2×2 교차 페어링."""
        return cls.pairing_sum([x], [y])

    @classmethod
    def pairing_sum(cls, xs, ys):
        """Σ F(xs[i], ys[i]).

        Raises:
            DimensionMismatch: xs, ys 길이가 다를 때
        """
        if len(xs) != len(ys):
            raise DimensionMismatch(
                f"pairing_sum 입력 길이가 다릅니다: {len(xs)} != {len(ys)}"
            )
        x0 = [x.p0 for x in xs]
        x1 = [x.p1 for x in xs]
        y0 = [y.p0 for y in ys]
        y1 = [y.p1 for y in ys]
        return cls(
            multi_pairing(x0, y0),
            multi_pairing(x0, y1),
            multi_pairing(x1, y0),
            multi_pairing(x1, y1),
        )

    # ─── 방정식별 선형 사상 ───

    @classmethod
    def linear_map_PPE(cls, z):
        """GT 타깃 z → (0, 0, 0, z)."""
        return cls(gt_zero(), gt_zero(), gt_zero(), z)

    @classmethod
    def linear_map_MSMEG1(cls, z, com2, p2):
        """G1 타깃 z → F(ι1(z), com2.scalar_linear_map(1, p2))."""
        return cls.pairing(Com1.linear_map(z), com2.scalar_linear_map(FR(1), p2))

    @classmethod
    def linear_map_MSMEG2(cls, z, com1, p1):
        """G2 타깃 z → F(com1.scalar_linear_map(1, p1), ι2(z))."""
        return cls.pairing(com1.scalar_linear_map(FR(1), p1), Com2.linear_map(z))

    @classmethod
    def linear_map_quad(cls, z, com1, p1, com2, p2):
        """스칼라 타깃 z → F(ι1'(1), ι2'(1) * z)."""
        return cls.pairing(
            com1.scalar_linear_map(FR(1), p1),
            com2.scalar_linear_map(FR(1), p2) * z,
        )
