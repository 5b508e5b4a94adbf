import pytest

from groth_sahai.field import make_rng
from groth_sahai.crs import CRS


@pytest.fixture(scope="session")
def crs():
    """고정 시드로 만든 CRS (모든 테스트 공용, 읽기 전용)."""
    return CRS.generate_crs(make_rng(20240601))


@pytest.fixture
def rng():
    return make_rng(7)
