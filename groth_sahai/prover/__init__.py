"""
Groth-Sahai Prover: 커밋먼트와 방정식별 증명
=============================================

증명 생성의 전체 흐름:

  ┌─────────────────────────────────────────────────────┐
  │  1. CRS 준비 (crs.generate_crs)                      │
  ├─────────────────────────────────────────────────────┤
  │  2. witness 커밋 (commit.batch_commit_*)             │
  │     Prover → Verifier: xcoms.coms, ycoms.coms        │
  │     랜덤니스 xcoms.rand, ycoms.rand 는 Prover 만 보관 │
  ├─────────────────────────────────────────────────────┤
  │  3. 방정식별 증명 (prove_ppe / msmeg1 / msmeg2 / quad) │
  │     Prover → Verifier: EquProof(π, θ)                │
  └─────────────────────────────────────────────────────┘

방정식 종류마다 커밋 방식이 정해져 있다:

  PPE    : X → batch_commit_G1,            Y → batch_commit_G2
  MSMEG1 : X → batch_commit_G1,            Y → batch_commit_scalar_to_B2
  MSMEG2 : X → batch_commit_scalar_to_B1,  Y → batch_commit_G2
  Quad   : X → batch_commit_scalar_to_B1,  Y → batch_commit_scalar_to_B2

사용 예시:
    >>> from groth_sahai.prover import prove
    >>> proof = prove(equ, xvars, yvars, xcoms, ycoms, crs, rng)
"""

from groth_sahai.statement import EquProof, EquType
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
from groth_sahai.prover.pairing_product import prove_ppe
from groth_sahai.prover.multi_scalar import prove_msmeg1, prove_msmeg2
from groth_sahai.prover.quadratic import prove_quad


_PROVERS = {
    EquType.PairingProduct: prove_ppe,
    EquType.MultiScalarG1: prove_msmeg1,
    EquType.MultiScalarG2: prove_msmeg2,
    EquType.Quadratic: prove_quad,
}


def prove(equ, xvars, yvars, xcoms, ycoms, crs, rng):
    """방정식 종류에 맞는 증명 함수를 호출한다.

    Args:
        equ: PPE / MSMEG1 / MSMEG2 / QuadEqu
        xvars, yvars: witness 리스트
        xcoms, ycoms: 해당 witness 의 Commit1 / Commit2 (랜덤니스 포함)
        crs: CRS
        rng: 랜덤 소스

    Returns:
        EquProof
    """
    return _PROVERS[equ.equ_type](equ, xvars, yvars, xcoms, ycoms, crs, rng)


__all__ = [
    "EquProof", "prove", "prove_ppe", "prove_msmeg1", "prove_msmeg2", "prove_quad",
    "Commit1", "Commit2",
    "commit_G1", "commit_G2", "batch_commit_G1", "batch_commit_G2",
    "commit_scalar_to_B1", "commit_scalar_to_B2",
    "batch_commit_scalar_to_B1", "batch_commit_scalar_to_B2",
]
