"""
Groth-Sahai 기반 모듈: 스칼라 필드, 쌍선형 군 연산, 페어링
=============================================================

이 모듈은 Groth-Sahai 증명 시스템 전체에서 사용되는 쌍선형 군(bilinear group)
어댑터를 정의한다. 곡선은 BLS12-381 (Type-III, G1 ≠ G2) 이다.

**스칼라 필드 FR**:
  BLS12-381 군 위수 r (≈ 2^255) 위의 소수체.
  커밋먼트 랜덤니스, 스칼라 witness, Γ 계수가 모두 FR 원소이다.

**점 표현**:
  py_ecc optimized 곡선은 사영(projective) 좌표 (x, y, z)를 쓴다.
  커밋먼트 구조 안에 저장되는 점은 항상 z = 1 로 정규화한 아핀 형태이거나
  라이브러리의 무한원점 상수(Z1, Z2)이다. 그래서 튜플 비교가 곧 군 원소 비교이고
  직렬화도 표준형(canonical)이 된다.

**GT (페어링 타깃)**:
  FQ12 원소. 대수 계층에서는 GT를 덧셈군처럼 다룬다:
  - 덧셈 a + b  = FQ12 곱셈
  - 음수 -a     = FQ12 역원
  - 영원 zero   = FQ12.one()

**멀티 페어링**:
  Π e(Pᵢ, Qᵢ) 는 Miller loop 결과를 모두 곱한 뒤 final exponentiation 을
  한 번만 수행한다. 순수 파이썬에서 final exponentiation 이 가장 비싸다.

사용 예시:
    >>> from groth_sahai.field import FR, G1, G2, ec_mul, ec_pairing
    >>> P = ec_mul(G1, FR(5))          # 5·G1
    >>> e = ec_pairing(P, G2)          # e(5·G1, G2)
"""

import functools
import random
import secrets

from py_ecc.fields import optimized_bls12_381_FQ as FQ
from py_ecc.optimized_bls12_381 import (
    FQ2,
    FQ12,
    G1,
    G2,
    Z1,
    Z2,
    add,
    b,
    b2,
    curve_order,
    final_exponentiate,
    is_inf,
    is_on_curve,
    multiply,
    neg,
    normalize,
    pairing,
)

from groth_sahai.errors import DimensionMismatch


# ─────────────────────────────────────────────────────────────────────
# 스칼라 필드 FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """BLS12-381 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, /, ** 필드 연산을 제공한다.

    예시:
        >>> FR(3) * FR(5)      # FR(15)
        >>> FR(0) - FR(1)      # FR(r - 1)
    """
    field_modulus = curve_order


# 곡선 위수 (스칼라 필드 크기)
CURVE_ORDER = curve_order


# ─────────────────────────────────────────────────────────────────────
# 점 연산 (G1, G2)
# ─────────────────────────────────────────────────────────────────────

def to_affine(point):
    """사영 좌표 점을 표준 아핀 형태 (x, y, 1) 로 정규화한다.

    무한원점은 라이브러리 상수 Z1 / Z2 로 바꾼다.
    """
    z = point[2]
    if z == z.__class__.zero():
        return Z2 if isinstance(z, FQ2) else Z1
    if z == z.__class__.one():
        return point
    x, y = normalize(point)
    return (x, y, z.__class__.one())


def is_zero_point(point):
    """무한원점(군의 항등원)인지 확인한다."""
    return is_inf(point)


def ec_add(p1, p2):
    """점 덧셈: p1 + p2 (아핀 결과)."""
    return to_affine(add(p1, p2))


def ec_neg(point):
    """점의 역원: -point (아핀 결과)."""
    return to_affine(neg(point))


def ec_mul(point, scalar):
    """스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 군의 아핀 점)

    예시:
        >>> ec_mul(G1, FR(5))   # 5·G1
        >>> ec_mul(G2, 3)       # 3·G2
    """
    return to_affine(multiply(point, int(scalar) % CURVE_ORDER))


def is_on_g1(point):
    return is_on_curve(point, b)


def is_on_g2(point):
    return is_on_curve(point, b2)


def in_subgroup(point):
    """위수 r 부분군에 속하는지 확인한다 (r · P == O)."""
    return is_inf(multiply(point, CURVE_ORDER))


# ─────────────────────────────────────────────────────────────────────
# 페어링과 GT
# ─────────────────────────────────────────────────────────────────────

def ec_pairing(p1, p2):
    """쌍선형 페어링 e(P, Q) → GT.

    주의:
        py_ecc.pairing 의 인자 순서는 (G2, G1) 이지만,
        이 함수는 Groth-Sahai 표기에 맞춰 (G1, G2) 순서를 받는다.

    Args:
        p1: G1 위의 점 P
        p2: G2 위의 점 Q

    Returns:
        FQ12: e(P, Q). 둘 중 하나가 무한원점이면 GT 영원(FQ12.one()).
    """
    if is_inf(p1) or is_inf(p2):
        return FQ12.one()
    return pairing(p2, p1)


def multi_pairing(p1s, p2s):
    """멀티 페어링 Π e(Pᵢ, Qᵢ) 를 계산한다.

    각 쌍의 Miller loop 결과를 곱한 뒤 final exponentiation 을 한 번만 한다.
    무한원점이 섞인 쌍은 항등원이므로 건너뛴다.

    Raises:
        DimensionMismatch: 두 리스트의 길이가 다를 때
    """
    if len(p1s) != len(p2s):
        raise DimensionMismatch(
            f"멀티 페어링 입력 길이가 다릅니다: {len(p1s)} != {len(p2s)}"
        )
    acc = FQ12.one()
    for p, q in zip(p1s, p2s):
        if is_inf(p) or is_inf(q):
            continue
        acc = acc * pairing(q, p, final_exponentiate=False)
    if acc == FQ12.one():
        return acc
    return final_exponentiate(acc)


def gt_zero():
    """GT 의 영원 (곱셈 표기의 1)."""
    return FQ12.one()


def gt_add(x, y):
    return x * y


def gt_neg(a):
    return a.inv()


def gt_mul_scalar(a, scalar):
    """GT 원소의 스칼라 배 (곱셈 표기의 거듭제곱)."""
    return a ** (int(scalar) % CURVE_ORDER)


@functools.lru_cache(maxsize=1)
def gt_generator():
    """e(G1, G2): GT 부분군의 생성원. 한 번만 계산해 둔다."""
    return ec_pairing(G1, G2)


# ─────────────────────────────────────────────────────────────────────
# 랜덤 샘플링
# ─────────────────────────────────────────────────────────────────────

def make_rng(seed=None):
    """랜덤 소스를 만든다.

    seed 가 주어지면 결정론적인 random.Random (테스트/교육용),
    없으면 secrets.SystemRandom 을 반환한다.
    모든 확률적 연산은 이 rng 를 인자로 명시적으로 받는다.
    """
    if seed is not None:
        return random.Random(seed)
    return secrets.SystemRandom()


def random_scalar(rng):
    """FR 위에서 균등하게 스칼라를 뽑는다."""
    return FR(rng.randrange(CURVE_ORDER))


def random_g1(rng):
    return ec_mul(G1, random_scalar(rng))


def random_g2(rng):
    return ec_mul(G2, random_scalar(rng))


def random_gt(rng):
    return gt_mul_scalar(gt_generator(), random_scalar(rng))


__all__ = [
    "FR", "FQ", "FQ2", "FQ12", "CURVE_ORDER", "G1", "G2", "Z1", "Z2",
    "to_affine", "is_zero_point", "ec_add", "ec_neg", "ec_mul",
    "is_on_g1", "is_on_g2", "in_subgroup",
    "ec_pairing", "multi_pairing",
    "gt_zero", "gt_add", "gt_neg", "gt_mul_scalar", "gt_generator",
    "make_rng", "random_scalar", "random_g1", "random_g2", "random_gt",
]
