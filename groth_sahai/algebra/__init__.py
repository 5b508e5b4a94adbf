from groth_sahai.algebra.matrix import Matrix, vec_to_col_vec, col_vec_to_vec
from groth_sahai.algebra.com import Com1, Com2
from groth_sahai.algebra.com_t import ComT

__all__ = ["Matrix", "vec_to_col_vec", "col_vec_to_vec", "Com1", "Com2", "ComT"]
