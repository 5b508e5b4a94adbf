"""
Groth-Sahai Verifier
=====================

공개 커밋먼트 c (B1), d (B2), 방정식, 증명 (π, θ) 만으로 검증한다.
랜덤니스와 witness 는 필요 없다.

**검증 항등식** (• 는 ComT.pairing_sum):

  ι1(A)•d + c•ι2(B) + c•(Γ d)  ==  ι_T(t) + U•π + θ•V

  좌변은 커밋된 witness 로 방정식의 왼쪽을 계산한 것이고, 커밋먼트의 랜덤
  부분이 섞여 있다. 우변의 U•π + θ•V 가 정확히 그 랜덤 부분을 상쇄한다.

**방정식별 차이**:

  ┌────────┬───────────┬───────────┬────────────┬────────┐
  │ 종류   │ A 임베딩  │ B 임베딩  │ U / V      │ ι_T    │
  ├────────┼───────────┼───────────┼────────────┼────────┤
  │ PPE    │ ι1        │ ι2        │ u0,u1/v0,v1│ PPE    │
  │ MSMEG1 │ ι1        │ ι2'       │ u0,u1/v0   │ MSMEG1 │
  │ MSMEG2 │ ι1'       │ ι2        │ u0/v0,v1   │ MSMEG2 │
  │ Quad   │ ι1'       │ ι2'       │ u0/v0      │ quad   │
  └────────┴───────────┴───────────┴────────────┴────────┘

**실패 의미**:
  - 커밋먼트 개수나 Γ 가 방정식과 맞지 않으면 DimensionMismatch (호출자 버그).
  - 증명이 다른 방정식 종류용이거나 π, θ 모양이 틀리면 False.
  - 항등식이 성립하지 않으면 False.

사용 예시:
    >>> from groth_sahai.verifier import verify
    >>> verify(equ, proof, xcoms, ycoms, crs)   # True / False
"""

import logging

from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.algebra.com_t import ComT
from groth_sahai.algebra.matrix import vec_to_col_vec, col_vec_to_vec
from groth_sahai.statement import EquType

logger = logging.getLogger(__name__)


def _proof_shape_ok(equ, proof, k1, k2):
    if proof.equ_type != equ.equ_type:
        logger.debug(
            "증명 종류 불일치: proof=%s, equ=%s", proof.equ_type, equ.equ_type
        )
        return False
    if proof.pi.dim() != (k1, 1) or proof.theta.dim() != (k2, 1):
        logger.debug(
            "증명 모양 불일치: pi=%s, theta=%s, 기대값=(%d,1),(%d,1)",
            proof.pi.dim(), proof.theta.dim(), k1, k2,
        )
        return False
    return True


def _gamma_d(equ, d):
    # Γ · d  (m×1, B2)
    return col_vec_to_vec(vec_to_col_vec(d, zero=Com2.zero).left_mul(equ.gamma))


def verify_ppe(equ, proof, xcoms, ycoms, crs):
    """PPE 증명을 검증한다.

    Args:
        equ: PPE
        proof: EquProof
        xcoms, ycoms: Commit1 / Commit2 또는 Com1 / Com2 리스트
        crs: CRS

    Returns:
        bool
    """
    c, d = equ.check_commitments(xcoms, ycoms)
    if not _proof_shape_ok(equ, proof, 2, 2):
        return False

    a_emb = Com1.batch_linear_map(equ.a_consts)
    b_emb = Com2.batch_linear_map(equ.b_consts)

    lhs = ComT.pairing_sum(a_emb + c + c, d + b_emb + _gamma_d(equ, d))
    rhs = ComT.linear_map_PPE(equ.target) + ComT.pairing_sum(
        crs.u + col_vec_to_vec(proof.theta),
        col_vec_to_vec(proof.pi) + crs.v,
    )
    return _accept(lhs, rhs, equ)


def verify_msmeg1(equ, proof, xcoms, ycoms, crs):
    """MSMEG1 증명을 검증한다. d 는 스칼라 커밋 (B2)."""
    c, d = equ.check_commitments(xcoms, ycoms)
    if not _proof_shape_ok(equ, proof, 2, 1):
        return False

    v1, g2 = crs.v[1], crs.g2_gen
    a_emb = Com1.batch_linear_map(equ.a_consts)
    b_emb = v1.batch_scalar_linear_map(equ.b_consts, g2)

    lhs = ComT.pairing_sum(a_emb + c + c, d + b_emb + _gamma_d(equ, d))
    rhs = ComT.linear_map_MSMEG1(equ.target, v1, g2) + ComT.pairing_sum(
        crs.u + col_vec_to_vec(proof.theta),
        col_vec_to_vec(proof.pi) + crs.v[:1],
    )
    return _accept(lhs, rhs, equ)


def verify_msmeg2(equ, proof, xcoms, ycoms, crs):
    """MSMEG2 증명을 검증한다. c 는 스칼라 커밋 (B1)."""
    c, d = equ.check_commitments(xcoms, ycoms)
    if not _proof_shape_ok(equ, proof, 1, 2):
        return False

    u1, g1 = crs.u[1], crs.g1_gen
    a_emb = u1.batch_scalar_linear_map(equ.a_consts, g1)
    b_emb = Com2.batch_linear_map(equ.b_consts)

    lhs = ComT.pairing_sum(a_emb + c + c, d + b_emb + _gamma_d(equ, d))
    rhs = ComT.linear_map_MSMEG2(equ.target, u1, g1) + ComT.pairing_sum(
        crs.u[:1] + col_vec_to_vec(proof.theta),
        col_vec_to_vec(proof.pi) + crs.v,
    )
    return _accept(lhs, rhs, equ)


def verify_quad(equ, proof, xcoms, ycoms, crs):
    """QuadEqu 증명을 검증한다. c, d 모두 스칼라 커밋."""
    c, d = equ.check_commitments(xcoms, ycoms)
    if not _proof_shape_ok(equ, proof, 1, 1):
        return False

    u1, g1 = crs.u[1], crs.g1_gen
    v1, g2 = crs.v[1], crs.g2_gen
    a_emb = u1.batch_scalar_linear_map(equ.a_consts, g1)
    b_emb = v1.batch_scalar_linear_map(equ.b_consts, g2)

    lhs = ComT.pairing_sum(a_emb + c + c, d + b_emb + _gamma_d(equ, d))
    rhs = ComT.linear_map_quad(equ.target, u1, g1, v1, g2) + ComT.pairing_sum(
        crs.u[:1] + col_vec_to_vec(proof.theta),
        col_vec_to_vec(proof.pi) + crs.v[:1],
    )
    return _accept(lhs, rhs, equ)


def _accept(lhs, rhs, equ):
    ok = lhs == rhs
    if not ok:
        logger.debug("%s 검증 실패: 항등식 불성립", type(equ).__name__)
    return ok


_VERIFIERS = {
    EquType.PairingProduct: verify_ppe,
    EquType.MultiScalarG1: verify_msmeg1,
    EquType.MultiScalarG2: verify_msmeg2,
    EquType.Quadratic: verify_quad,
}


def verify(equ, proof, xcoms, ycoms, crs):
    """방정식 종류에 맞는 검증 함수를 호출한다.

    Returns:
        bool: 증명이 유효하면 True
    """
    return _VERIFIERS[equ.equ_type](equ, proof, xcoms, ycoms, crs)
