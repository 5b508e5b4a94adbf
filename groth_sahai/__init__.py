"""
groth_sahai: SXDH 인스턴스의 Groth-Sahai 증명 시스템 (BLS12-381, py_ecc)

사용 예시:
    >>> from groth_sahai import *
    >>> rng = make_rng(42)
    >>> crs = CRS.generate_crs(rng)
    >>> xcoms = batch_commit_G1(xvars, crs, rng)
    >>> ycoms = batch_commit_G2(yvars, crs, rng)
    >>> proof = prove(equ, xvars, yvars, xcoms, ycoms, crs, rng)
    >>> verify(equ, proof, xcoms, ycoms, crs)
    True
"""

from groth_sahai.errors import GrothSahaiError, DimensionMismatch, DeserializationError
from groth_sahai.field import FR, G1, G2, Z1, Z2, CURVE_ORDER, make_rng
from groth_sahai.algebra import Matrix, vec_to_col_vec, col_vec_to_vec, Com1, Com2, ComT
from groth_sahai.crs import CRS, generate_crs
from groth_sahai.statement import (
    EquType, EquProof, PPE, MSMEG1, MSMEG2, QuadEqu,
)
from groth_sahai.prover import (
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
    prove,
    prove_ppe,
    prove_msmeg1,
    prove_msmeg2,
    prove_quad,
)
from groth_sahai.verifier import (
    verify, verify_ppe, verify_msmeg1, verify_msmeg2, verify_quad,
)
from groth_sahai.serialization import serialize, deserialize

__version__ = "0.1.0"

__all__ = [
    "GrothSahaiError", "DimensionMismatch", "DeserializationError",
    "FR", "G1", "G2", "Z1", "Z2", "CURVE_ORDER", "make_rng",
    "Matrix", "vec_to_col_vec", "col_vec_to_vec", "Com1", "Com2", "ComT",
    "CRS", "generate_crs",
    "EquType", "EquProof", "PPE", "MSMEG1", "MSMEG2", "QuadEqu",
    "Commit1", "Commit2",
    "commit_G1", "commit_G2", "batch_commit_G1", "batch_commit_G2",
    "commit_scalar_to_B1", "commit_scalar_to_B2",
    "batch_commit_scalar_to_B1", "batch_commit_scalar_to_B2",
    "prove", "prove_ppe", "prove_msmeg1", "prove_msmeg2", "prove_quad",
    "verify", "verify_ppe", "verify_msmeg1", "verify_msmeg2", "verify_quad",
    "serialize", "deserialize",
]
