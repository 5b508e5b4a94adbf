"""
Groth-Sahai 웹 서비스 설정
===========================

환경 변수에서 읽고, 없으면 기본값을 쓴다.
"""

import os

DEFAULT_HOST = os.getenv("GS_HOST", "127.0.0.1")
DEFAULT_PORT = int(os.getenv("GS_PORT", 5000))

# ":memory:" 이면 MemoryStorage 를 쓴다
DEFAULT_DB_PATH = os.getenv("GS_DB_PATH", "db.json")

DEFAULT_SECRET_KEY = os.getenv("GS_SECRET_KEY", "key")

# 응답에 담는 hex 인코딩의 점 압축 여부
DEFAULT_COMPRESS = os.getenv("GS_COMPRESS", "true").lower() == "true"

# 개발 모드: 고정 시드로 CRS 를 만든다 (테스트 전용)
DEFAULT_CRS_SEED = os.getenv("GS_CRS_SEED")

DEFAULT_LOG_LEVEL = os.getenv("GS_LOG_LEVEL", "INFO").upper()


class Config:
    """설정 클래스"""

    def __init__(self):
        self.host = DEFAULT_HOST
        self.port = DEFAULT_PORT
        self.db_path = DEFAULT_DB_PATH
        self.secret_key = DEFAULT_SECRET_KEY
        self.compress = DEFAULT_COMPRESS
        self.crs_seed = DEFAULT_CRS_SEED
        self.log_level = DEFAULT_LOG_LEVEL

    @property
    def in_memory(self):
        return self.db_path == ":memory:"


# 전역 설정 인스턴스
config = Config()
