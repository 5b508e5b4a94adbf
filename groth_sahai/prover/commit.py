"""
Groth-Sahai 커밋먼트 스킴
==========================

witness 를 CRS 기저로 가린 B1 / B2 원소로 커밋한다.

**군 원소 커밋 (G1 → B1)**:
  c = ι1(x) + r1·u0 + r2·u1
  batch 버전은 m×2 랜덤 행렬 R 로 한 번에:  c = ι1(X) + R · u

**스칼라 커밋 (FR → B1)**:
  c = ι1'(x) + r·u0,   ι1'(x) = u1.scalar_linear_map(x, g1_gen)
  스칼라 witness 는 한 축으로만 가리면 되므로 랜덤 스칼라가 하나이다 (R 은 m×1).

G2 / B2 쪽은 v 와 g2_gen 으로 대칭적으로 정의한다.

**랜덤니스**:
  Commit1.rand / Commit2.rand 는 증명을 만들 때 다시 쓰인다.
  커밋한 쪽만 가지고 있어야 하며 검증자에게 보내면 안 된다.

사용 예시:
    >>> xcoms = batch_commit_G1([ec_mul(G1, 2), ec_mul(G1, 3)], crs, rng)
    >>> len(xcoms.coms), xcoms.rand.dim()     # 2, (2, 2)
"""

import logging

from groth_sahai.algebra.matrix import Matrix, vec_to_col_vec, col_vec_to_vec
from groth_sahai.algebra.com import Com1, Com2

logger = logging.getLogger(__name__)


class Commit1:
    """B1 커밋먼트 묶음.

    속성:
        coms: 공개 커밋먼트 리스트 (Com1)
        rand: 비밀 랜덤니스 행렬 (m×2 또는 m×1 FR)
    """

    def __init__(self, coms, rand):
        self.coms = list(coms)
        self.rand = rand

    def __eq__(self, other):
        if not isinstance(other, Commit1):
            return NotImplemented
        return self.coms == other.coms and self.rand == other.rand

    def __repr__(self):
        return f"Commit1(coms={self.coms!r})"


class Commit2:
    """B2 커밋먼트 묶음. 구조는 Commit1 과 같다."""

    def __init__(self, coms, rand):
        self.coms = list(coms)
        self.rand = rand

    def __eq__(self, other):
        if not isinstance(other, Commit2):
            return NotImplemented
        return self.coms == other.coms and self.rand == other.rand

    def __repr__(self):
        return f"Commit2(coms={self.coms!r})"


# ─────────────────────────────────────────────────────────────────────
# 군 원소 커밋
# ─────────────────────────────────────────────────────────────────────

def _batch_commit_group(xs, bases, com_cls, rng):
    # c = ι(X) + R · bases
    rand = Matrix.rand(rng, len(xs), 2)
    masks = col_vec_to_vec(vec_to_col_vec(bases, zero=com_cls.zero).left_mul(rand))
    coms = [lin + mask for lin, mask in zip(com_cls.batch_linear_map(xs), masks)]
    return coms, rand


def commit_G1(x, crs, rng):
    """G1 원소 하나를 커밋한다.

    Returns:
        Commit1: coms 길이 1, rand 1×2
    """
    return batch_commit_G1([x], crs, rng)


def batch_commit_G1(xs, crs, rng):
    """G1 원소 m 개를 커밋한다.

    Args:
        xs: G1 점 리스트
        crs: CRS
        rng: 랜덤 소스

    Returns:
        Commit1: coms 길이 m, rand m×2
    """
    coms, rand = _batch_commit_group(xs, crs.u, Com1, rng)
    logger.debug("G1 원소 %d 개 커밋", len(xs))
    return Commit1(coms, rand)


def commit_G2(y, crs, rng):
    return batch_commit_G2([y], crs, rng)


def batch_commit_G2(ys, crs, rng):
    coms, rand = _batch_commit_group(ys, crs.v, Com2, rng)
    logger.debug("G2 원소 %d 개 커밋", len(ys))
    return Commit2(coms, rand)


# ─────────────────────────────────────────────────────────────────────
# 스칼라 커밋
# ─────────────────────────────────────────────────────────────────────

def _batch_commit_scalar(xs, bases, gen, com_cls, rng):
    # c = bases[1].scalar_linear_map(x, gen) + r · bases[0]
    rand = Matrix.rand(rng, len(xs), 1)
    masks = col_vec_to_vec(vec_to_col_vec([bases[0]], zero=com_cls.zero).left_mul(rand))
    embedded = bases[1].batch_scalar_linear_map(xs, gen)
    coms = [emb + mask for emb, mask in zip(embedded, masks)]
    return coms, rand


def commit_scalar_to_B1(x, crs, rng):
    """스칼라 하나를 B1 으로 커밋한다.

    Returns:
        Commit1: coms 길이 1, rand 1×1
    """
    return batch_commit_scalar_to_B1([x], crs, rng)


def batch_commit_scalar_to_B1(xs, crs, rng):
    coms, rand = _batch_commit_scalar(xs, crs.u, crs.g1_gen, Com1, rng)
    logger.debug("스칼라 %d 개를 B1 으로 커밋", len(xs))
    return Commit1(coms, rand)


def commit_scalar_to_B2(y, crs, rng):
    return batch_commit_scalar_to_B2([y], crs, rng)


def batch_commit_scalar_to_B2(ys, crs, rng):
    coms, rand = _batch_commit_scalar(ys, crs.v, crs.g2_gen, Com2, rng)
    logger.debug("스칼라 %d 개를 B2 로 커밋", len(ys))
    return Commit2(coms, rand)
