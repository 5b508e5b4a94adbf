"""
PPE 증명: 페어링 곱 방정식
===========================

  Σ e(A_j, Y_j) + Σ e(X_i, B_i) + ΣΣ γ_ij e(X_i, Y_j) = t_T

  X ∈ G1^m 은 B1 으로, Y ∈ G2^n 은 B2 로 커밋되어 있다.
  랜덤니스: R (m×2), S (n×2). 증명용으로 T (2×2) 를 새로 뽑는다.

**증명**:
  π = Rᵀ ι2(B) + Rᵀ Γ ι2(Y) + (Rᵀ Γ S − Tᵀ) v        (2×1, B2)
  θ = Sᵀ ι1(A) + Sᵀ Γᵀ ι1(X) + T u                  (2×1, B1)

  T 는 두 증명 성분 사이에 나눠 들어가는 항을 가린다.
  검증 항등식에서 −Tᵀ v 와 T u 가 서로 상쇄된다.
"""

import logging

from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.algebra.matrix import Matrix, vec_to_col_vec
from groth_sahai.statement import EquProof, EquType

logger = logging.getLogger(__name__)


def prove_ppe(equ, xvars, yvars, xcoms, ycoms, crs, rng):
    """PPE 에 대한 증명을 만든다.

    Args:
        equ: PPE
        xvars: G1 witness 리스트 (길이 m)
        yvars: G2 witness 리스트 (길이 n)
        xcoms: batch_commit_G1 결과 (Commit1, rand m×2)
        ycoms: batch_commit_G2 결과 (Commit2, rand n×2)
        crs: CRS
        rng: 랜덤 소스

    Returns:
        EquProof: pi 2×1, theta 2×1

    Raises:
        DimensionMismatch: witness, 커밋먼트, Γ 차원이 맞지 않을 때
    """
    R, S = equ.check_witnesses(xvars, yvars, xcoms, ycoms, 2, 2)
    T = Matrix.rand(rng, 2, 2)
    gamma = equ.gamma
    Rt = R.transpose()
    St = S.transpose()

    a_emb = vec_to_col_vec(Com1.batch_linear_map(equ.a_consts), zero=Com1.zero)
    b_emb = vec_to_col_vec(Com2.batch_linear_map(equ.b_consts), zero=Com2.zero)
    x_emb = vec_to_col_vec(Com1.batch_linear_map(xvars), zero=Com1.zero)
    y_emb = vec_to_col_vec(Com2.batch_linear_map(yvars), zero=Com2.zero)
    u = vec_to_col_vec(crs.u, zero=Com1.zero)
    v = vec_to_col_vec(crs.v, zero=Com2.zero)

    Rt_gamma = Rt.right_mul(gamma)

    pi = (
        b_emb.left_mul(Rt)
        + y_emb.left_mul(Rt_gamma)
        + v.left_mul(Rt_gamma.right_mul(S) - T.transpose())
    )
    theta = (
        a_emb.left_mul(St)
        + x_emb.left_mul(St.right_mul(gamma.transpose()))
        + u.left_mul(T)
    )

    logger.debug("PPE 증명 생성: m=%d, n=%d", *equ.dims())
    return EquProof(pi, theta, EquType.PairingProduct)
