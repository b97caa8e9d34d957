"""
GoalServe Exceptions

GoalServe 게이트웨이 도메인 전용 예외 클래스
"""

from typing import Optional


class GoalserveError(Exception):
    """GoalServe 게이트웨이 기본 예외"""
    pass


class ConfigurationError(GoalserveError):
    """서비스 설정 누락 (기동 시 치명적)"""
    pass


class InvalidArgumentError(GoalserveError):
    """필수 경로 파라미터 누락 또는 형식 오류 (네트워크 호출 전 거부)"""
    pass


class FeedNotImplementedError(GoalserveError):
    """업스트림 매핑이 아직 없는 오퍼레이션"""
    pass


class UpstreamError(GoalserveError):
    """업스트림 호출 실패 (네트워크, 타임아웃, 4xx/5xx)"""

    def __init__(self, status_code: Optional[int], message: str = ""):
        self.status_code = status_code
        self.message = message
        status = status_code if status_code is not None else "n/a"
        super().__init__(f"GoalServe API error [{status}]: {message}")
