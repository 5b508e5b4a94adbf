"""
Groth-Sahai 방정식 (statement)
===============================

증명할 방정식을 상수, 계수 행렬 Γ, 타깃으로 표현한다.
방정식은 순수 데이터이며 witness 를 갖지 않는다.

**표기**:
  X = [X_1 .. X_m]  : 첫 번째 도메인 witness (B1 으로 커밋)
  Y = [Y_1 .. Y_n]  : 두 번째 도메인 witness (B2 로 커밋)
  a_consts (길이 n) : Y_j 와 짝을 이루는 상수
  b_consts (길이 m) : X_i 와 짝을 이루는 상수
  Γ (m×n)           : X_i 와 Y_j 교차항의 계수

**네 가지 방정식**:

  ┌─────────┬──────┬──────┬──────────────────────────────────────────────┐
  │ 종류    │  X   │  Y   │ 항등식                                        │
  ├─────────┼──────┼──────┼──────────────────────────────────────────────┤
  │ PPE     │ G1   │ G2   │ Σe(A_j,Y_j) + Σe(X_i,B_i) + ΣΣγ_ij e(X_i,Y_j) = t_T │
  │ MSMEG1  │ G1   │ FR   │ Σ y_j·A_j + Σ b_i·X_i + ΣΣγ_ij y_j·X_i = t_1   │
  │ MSMEG2  │ FR   │ G2   │ Σ a_j·Y_j + Σ x_i·B_i + ΣΣγ_ij x_i·Y_j = t_2   │
  │ Quad    │ FR   │ FR   │ Σ a_j y_j + Σ b_i x_i + ΣΣγ_ij x_i y_j = t     │
  └─────────┴──────┴──────┴──────────────────────────────────────────────┘

  GT 는 덧셈 표기 (실제로는 FQ12 곱) 로 쓴다.

사용 예시:
    >>> equ = PPE([c1], [Z1_2, c2], [[5], [0]], target)
    >>> equ.dims()      # (2, 1)
"""

import enum

from groth_sahai.errors import DimensionMismatch
from groth_sahai.field import FR
from groth_sahai.algebra.matrix import Matrix


class EquType(enum.Enum):
    """방정식 종류. 값은 직렬화 태그 바이트로도 쓰인다."""

    PairingProduct = 0
    MultiScalarG1 = 1
    MultiScalarG2 = 2
    Quadratic = 3


def public_coms(commit):
    """Commit1/Commit2 면 coms 를, 이미 리스트면 그대로 돌려준다."""
    if hasattr(commit, "coms"):
        return commit.coms
    return list(commit)


def _randomness(commit, rows, cols):
    """커밋 랜덤니스 행렬. 행이 없으면 (0, cols) 모양으로 다시 만든다."""
    rand = commit.rand
    if rows == 0 and len(rand) == 0:
        return Matrix.zeros_column(cols, zero=FR.zero)
    return rand


def _to_scalar_matrix(gamma, cols):
    if isinstance(gamma, Matrix):
        return gamma
    rows = [[FR(x) for x in row] for row in gamma]
    return Matrix(rows, zero=FR.zero, cols=cols if not rows else None)


class Equation:
    """방정식 공통 부분: 상수, Γ, 타깃과 차원 검사."""

    equ_type = None

    def __init__(self, a_consts, b_consts, gamma, target):
        self.a_consts = list(a_consts)
        self.b_consts = list(b_consts)
        self.gamma = _to_scalar_matrix(gamma, len(self.a_consts))
        self.target = target
        expected = (len(self.b_consts), len(self.a_consts))
        if self.gamma.dim() != expected:
            raise DimensionMismatch(
                f"Γ 의 차원 {self.gamma.dim()} 이 (|b_consts|, |a_consts|) = {expected} 와 다릅니다"
            )

    def dims(self):
        """(m, n): X 와 Y witness 의 개수."""
        return (len(self.b_consts), len(self.a_consts))

    def check_commitments(self, xcoms, ycoms):
        """커밋먼트 개수를 검사하고 공개 커밋먼트 리스트 두 개를 돌려준다.

        Commit1/Commit2 객체와 Com1/Com2 리스트를 모두 받는다.

        Raises:
            DimensionMismatch: 개수가 (m, n) 과 다를 때
        """
        m, n = self.dims()
        xs, ys = public_coms(xcoms), public_coms(ycoms)
        if len(xs) != m or len(ys) != n:
            raise DimensionMismatch(
                f"{type(self).__name__}: 커밋먼트 개수 ({len(xs)}, {len(ys)}) 가 ({m}, {n}) 와 다릅니다"
            )
        return xs, ys

    def check_witnesses(self, xvars, yvars, xcoms, ycoms, k1, k2):
        """witness 와 랜덤니스 차원을 검사하고 (R, S) 를 돌려준다.

        R 은 m×k1, S 는 n×k2 여야 한다.
        """
        m, n = self.dims()
        if len(xvars) != m or len(yvars) != n:
            raise DimensionMismatch(
                f"{type(self).__name__}: witness 개수 ({len(xvars)}, {len(yvars)}) 가 ({m}, {n}) 와 다릅니다"
            )
        self.check_commitments(xcoms, ycoms)
        R = _randomness(xcoms, m, k1)
        S = _randomness(ycoms, n, k2)
        if R.dim() != (m, k1) or S.dim() != (n, k2):
            raise DimensionMismatch(
                f"{type(self).__name__}: 랜덤니스 차원 {R.dim()}, {S.dim()} "
                f"이 ({m}, {k1}), ({n}, {k2}) 와 다릅니다"
            )
        return R, S

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return (
            self.a_consts == other.a_consts
            and self.b_consts == other.b_consts
            and self.gamma == other.gamma
            and self.target == other.target
        )

    def __repr__(self):
        m, n = self.dims()
        return f"{type(self).__name__}(m={m}, n={n})"


class PPE(Equation):
    """페어링 곱 방정식. a_consts ⊂ G1, b_consts ⊂ G2, target ∈ GT."""

    equ_type = EquType.PairingProduct


class MSMEG1(Equation):
    """G1 다중 스칼라 곱 방정식. a_consts ⊂ G1, b_consts ⊂ FR, target ∈ G1."""

    equ_type = EquType.MultiScalarG1

    def __init__(self, a_consts, b_consts, gamma, target):
        super().__init__(a_consts, [FR(b) for b in b_consts], gamma, target)


class MSMEG2(Equation):
    """G2 다중 스칼라 곱 방정식. a_consts ⊂ FR, b_consts ⊂ G2, target ∈ G2."""

    equ_type = EquType.MultiScalarG2

    def __init__(self, a_consts, b_consts, gamma, target):
        super().__init__([FR(a) for a in a_consts], b_consts, gamma, target)


class QuadEqu(Equation):
    """스칼라 이차 방정식. 상수와 타깃 모두 FR."""

    equ_type = EquType.Quadratic

    def __init__(self, a_consts, b_consts, gamma, target):
        super().__init__(
            [FR(a) for a in a_consts], [FR(b) for b in b_consts], gamma, FR(target),
        )


EQUATION_CLASSES = {
    EquType.PairingProduct: PPE,
    EquType.MultiScalarG1: MSMEG1,
    EquType.MultiScalarG2: MSMEG2,
    EquType.Quadratic: QuadEqu,
}


class EquProof:
    """방정식 하나에 대한 Groth-Sahai 증명.

    속성:
        pi: k1×1 Com2 행렬
        theta: k2×1 Com1 행렬
        equ_type: 이 증명을 만든 방정식의 종류 (EquType)

    k1 = 2 (X 가 군 원소) 또는 1 (X 가 스칼라), k2 도 Y 에 대해 같다.
    """

    def __init__(self, pi, theta, equ_type):
        self.pi = pi
        self.theta = theta
        self.equ_type = equ_type

    def __eq__(self, other):
        if not isinstance(other, EquProof):
            return NotImplemented
        return (
            self.equ_type == other.equ_type
            and self.pi == other.pi
            and self.theta == other.theta
        )

    def __repr__(self):
        return f"EquProof({self.equ_type.name}, pi={self.pi.dim()}, theta={self.theta.dim()})"
