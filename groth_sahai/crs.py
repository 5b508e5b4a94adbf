"""
Groth-Sahai 공통 참조 문자열 (CRS)
===================================

SXDH 인스턴스의 공개 파라미터를 생성한다.

**CRS란?**
  커밋먼트 기저와 생성원의 묶음이다.
    g1_gen ∈ G1, g2_gen ∈ G2
    u = [u0, u1]  (B1 원소 2개)
    v = [v0, v1]  (B2 원소 2개)

**바인딩(binding) 설정**:
    P1, P2 ← 랜덤 생성원
    a1, a2, t1, t2 ← FR
    u0 = (P1, a1·P1),   u1 = t1 · u0
    v0 = (P2, a2·P2),   v1 = t2 · v0

  u1 이 u0 의 배수이므로 커밋먼트는 완전히 바인딩되고
  a1, a2 를 아는 사람은 커밋먼트를 열 수 있다 (추출 트랩도어).
  생성 후 a1, a2, t1, t2 는 버린다.

**SXDH 가정**:
  G1, G2 각각에서 DDH 가 어렵다고 가정한다. 그러면 이 바인딩 CRS 는
  u1 이 u0 와 독립인 은닉(hiding) CRS 와 구별할 수 없다.

사용 예시:
    >>> crs = CRS.generate_crs(make_rng(42))
    >>> crs.u[0], crs.v[1]
"""

import logging

from groth_sahai.field import FR, G1, G2, ec_mul, random_scalar
from groth_sahai.algebra.com import Com1, Com2

logger = logging.getLogger(__name__)


class CRS:
    """Common Reference String: 커밋먼트/증명/검증 공용 파라미터.

    속성:
        u: [u0, u1] (Com1)
        v: [v0, v1] (Com2)
        g1_gen: G1 생성원 P1
        g2_gen: G2 생성원 P2
    """

    def __init__(self, u, v, g1_gen, g2_gen):
        self.u = list(u)
        self.v = list(v)
        self.g1_gen = g1_gen
        self.g2_gen = g2_gen

    @classmethod
    def generate_crs(cls, rng):
        """바인딩 설정의 CRS 를 생성한다.

        Args:
            rng: randrange 를 가진 랜덤 소스 (make_rng 참고)

        Returns:
            CRS
        """
        p1 = ec_mul(G1, _nonzero_scalar(rng))
        p2 = ec_mul(G2, _nonzero_scalar(rng))

        # 트랩도어
        a1 = random_scalar(rng)
        a2 = random_scalar(rng)
        t1 = random_scalar(rng)
        t2 = random_scalar(rng)

        u0 = Com1(p1, ec_mul(p1, a1))
        u1 = u0 * t1
        v0 = Com2(p2, ec_mul(p2, a2))
        v1 = v0 * t2

        logger.debug("CRS 생성 완료 (binding setting)")
        return cls([u0, u1], [v0, v1], p1, p2)

    def __eq__(self, other):
        if not isinstance(other, CRS):
            return NotImplemented
        return (
            self.u == other.u
            and self.v == other.v
            and self.g1_gen == other.g1_gen
            and self.g2_gen == other.g2_gen
        )

    def __repr__(self):
        return f"CRS(u={self.u!r}, v={self.v!r})"


def _nonzero_scalar(rng):
    while True:
        s = random_scalar(rng)
        if s != FR(0):
            return s


def generate_crs(rng):
    return CRS.generate_crs(rng)
