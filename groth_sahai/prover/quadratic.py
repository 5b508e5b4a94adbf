"""
QuadEqu 증명: 스칼라 이차 방정식
=================================

  Σ a_j y_j + Σ b_i x_i + ΣΣ γ_ij x_i y_j = t

  x ∈ FR^m 은 B1 (R: m×1), y ∈ FR^n 은 B2 (S: n×1) 에 스칼라로 커밋된다.
  양쪽 모두 스칼라 임베딩 ι1', ι2' 를 쓰고 기저는 u0, v0 하나씩이다.

  π = Rᵀ ι2'(b) + Rᵀ Γ ι2'(y) + (Rᵀ Γ S − t) v0       (1×1, B2)
  θ = Sᵀ ι1'(a) + Sᵀ Γᵀ ι1'(x) + t u0                 (1×1, B1)

  여기서 t (T) 는 새로 뽑은 1×1 랜덤 스칼라이다.
"""

import logging

from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.algebra.matrix import Matrix, vec_to_col_vec
from groth_sahai.statement import EquProof, EquType

logger = logging.getLogger(__name__)


def prove_quad(equ, xvars, yvars, xcoms, ycoms, crs, rng):
    """QuadEqu 에 대한 증명을 만든다.

    Args:
        equ: QuadEqu
        xvars: 스칼라 witness (길이 m), batch_commit_scalar_to_B1 로 커밋됨
        yvars: 스칼라 witness (길이 n), batch_commit_scalar_to_B2 로 커밋됨

    Returns:
        EquProof: pi 1×1, theta 1×1
    """
    R, S = equ.check_witnesses(xvars, yvars, xcoms, ycoms, 1, 1)
    T = Matrix.rand(rng, 1, 1)
    gamma = equ.gamma
    Rt = R.transpose()
    St = S.transpose()

    u1, g1 = crs.u[1], crs.g1_gen
    v1, g2 = crs.v[1], crs.g2_gen
    a_emb = vec_to_col_vec(u1.batch_scalar_linear_map(equ.a_consts, g1), zero=Com1.zero)
    b_emb = vec_to_col_vec(v1.batch_scalar_linear_map(equ.b_consts, g2), zero=Com2.zero)
    x_emb = vec_to_col_vec(u1.batch_scalar_linear_map(xvars, g1), zero=Com1.zero)
    y_emb = vec_to_col_vec(v1.batch_scalar_linear_map(yvars, g2), zero=Com2.zero)
    u = vec_to_col_vec(crs.u[:1], zero=Com1.zero)
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

    logger.debug("QuadEqu 증명 생성: m=%d, n=%d", *equ.dims())
    return EquProof(pi, theta, EquType.Quadratic)
