"""
Groth-Sahai 예외 타입
======================

**GrothSahaiError**: 이 패키지가 던지는 모든 예외의 기반 클래스.

**DimensionMismatch**: 행렬/벡터 차원이 맞지 않는 호출 (사전조건 위반).
  잘못된 입력을 즉시 거부한다. 검증 실패와는 다르다.

**DeserializationError**: 잘린 입력, 남는 바이트, 곡선 밖의 점 등
  바이트 디코딩 실패.

검증이 거부되는 경우는 예외가 아니라 False 를 반환한다.
"""


class GrothSahaiError(Exception):
    pass


class DimensionMismatch(GrothSahaiError, ValueError):
    pass


class DeserializationError(GrothSahaiError, ValueError):
    pass
