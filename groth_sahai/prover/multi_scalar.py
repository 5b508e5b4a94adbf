"""
MSMEG1 / MSMEG2 증명: 다중 스칼라 곱 방정식
=============================================

**MSMEG1** (G1 에서):
  Σ y_j·A_j + Σ b_i·X_i + ΣΣ γ_ij y_j·X_i = t_1
  X ∈ G1^m (B1, R: m×2),  y ∈ FR^n (B2 스칼라 커밋, S: n×1)

**MSMEG2** (G2 에서):
  Σ a_j·Y_j + Σ x_i·B_i + ΣΣ γ_ij x_i·Y_j = t_2
  x ∈ FR^m (B1 스칼라 커밋, R: m×1),  Y ∈ G2^n (B2, S: n×2)

스칼라는 ι1'(x) = u1.scalar_linear_map(x, g1_gen), ι2'(y) = v1.scalar_linear_map(y, g2_gen)
으로 임베딩하고, 스칼라 쪽 기저는 첫 번째 기저 하나만 쓴다.

  π = Rᵀ ι2(B) + Rᵀ Γ ι2(Y) + (Rᵀ Γ S − Tᵀ) V
  θ = Sᵀ ι1(A) + Sᵀ Γᵀ ι1(X) + T U

  MSMEG1: U = (u0, u1), V = (v0), T 1×2 → π 2×1, θ 1×1
  MSMEG2: U = (u0),     V = (v0, v1), T 2×1 → π 1×1, θ 2×1
"""

import logging

from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.algebra.matrix import Matrix, vec_to_col_vec
from groth_sahai.statement import EquProof, EquType

logger = logging.getLogger(__name__)


def prove_msmeg1(equ, xvars, yvars, xcoms, ycoms, crs, rng):
    """MSMEG1 에 대한 증명을 만든다.

    Args:
        equ: MSMEG1
        xvars: G1 witness 리스트 (길이 m)
        yvars: 스칼라 witness 리스트 (길이 n)
        xcoms: batch_commit_G1 결과
        ycoms: batch_commit_scalar_to_B2 결과
        crs: CRS
        rng: 랜덤 소스

    Returns:
        EquProof: pi 2×1, theta 1×1
    """
    R, S = equ.check_witnesses(xvars, yvars, xcoms, ycoms, 2, 1)
    T = Matrix.rand(rng, 1, 2)
    gamma = equ.gamma
    Rt = R.transpose()
    St = S.transpose()

    v1, g2 = crs.v[1], crs.g2_gen
    a_emb = vec_to_col_vec(Com1.batch_linear_map(equ.a_consts), zero=Com1.zero)
    b_emb = vec_to_col_vec(v1.batch_scalar_linear_map(equ.b_consts, g2), zero=Com2.zero)
    x_emb = vec_to_col_vec(Com1.batch_linear_map(xvars), zero=Com1.zero)
    y_emb = vec_to_col_vec(v1.batch_scalar_linear_map(yvars, g2), zero=Com2.zero)
    u = vec_to_col_vec(crs.u, zero=Com1.zero)
    v = vec_to_col_vec(crs.v[:1], zero=Com2.zero)

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

    logger.debug("MSMEG1 증명 생성: m=%d, n=%d", *equ.dims())
    return EquProof(pi, theta, EquType.MultiScalarG1)


def prove_msmeg2(equ, xvars, yvars, xcoms, ycoms, crs, rng):
    """MSMEG2 에 대한 증명을 만든다.

    xvars 는 스칼라 (batch_commit_scalar_to_B1), yvars 는 G2 점 (batch_commit_G2).

    Returns:
        EquProof: pi 1×1, theta 2×1
    """
    R, S = equ.check_witnesses(xvars, yvars, xcoms, ycoms, 1, 2)
    T = Matrix.rand(rng, 2, 1)
    gamma = equ.gamma
    Rt = R.transpose()
    St = S.transpose()

    u1, g1 = crs.u[1], crs.g1_gen
    a_emb = vec_to_col_vec(u1.batch_scalar_linear_map(equ.a_consts, g1), zero=Com1.zero)
    b_emb = vec_to_col_vec(Com2.batch_linear_map(equ.b_consts), zero=Com2.zero)
    x_emb = vec_to_col_vec(u1.batch_scalar_linear_map(xvars, g1), zero=Com1.zero)
    y_emb = vec_to_col_vec(Com2.batch_linear_map(yvars), zero=Com2.zero)
    u = vec_to_col_vec(crs.u[:1], zero=Com1.zero)
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

    logger.debug("MSMEG2 증명 생성: m=%d, n=%d", *equ.dims())
    return EquProof(pi, theta, EquType.MultiScalarG2)
