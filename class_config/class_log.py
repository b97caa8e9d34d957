import os
import sys
from urllib.parse import quote
from class_config.class_env import Config
from loguru import logger


REDACTED = "***"


def redact_secret(text: str, secret: str = None) -> str:
    """
    문자열에서 비밀값(API 키)을 마스킹

    URL 경로에 들어간 퍼센트 인코딩 형태도 함께 마스킹한다.
    """
    if not text or not secret:
        return text
    for form in (secret, quote(secret, safe=""), quote(secret)):
        text = text.replace(form, REDACTED)
    return text


class ConfigLogger:
    LOG_FORMAT = "[{time}] [{level}] [PID: {process}] - {message}"

    def __init__(self, log_name='app_log', backupCount=365):
        self.config = Config()
        self.log_name = log_name
        self.backupCount = backupCount
        self.setup_log_listener()

    def setup_log_listener(self):
        level = self.config.log_level

        logger.remove()
        # GoalServe API 키는 URL 경로에 포함되므로 모든 레코드에서 마스킹
        logger.configure(patcher=self._redact_record)
        logger.add(sys.stderr, format=self.LOG_FORMAT, level=level)

        log_dir = self.config.log_path
        if not log_dir:
            return

        if not os.path.exists(log_dir):
            os.makedirs(log_dir)

        log_file = os.path.join(log_dir, self.log_name)
        logger.add(
            log_file,
            rotation="00:00",
            retention=f"{self.backupCount} days",
            format=self.LOG_FORMAT,
            level=level,
            enqueue=True
        )

    def _redact_record(self, record):
        record["message"] = redact_secret(record["message"], self.config.goalserve_api_key)

    @staticmethod
    def get_logger(name):
        return logger.bind(name=name)
