import os
from pathlib import Path
from dotenv import load_dotenv


class Config:
    BASE_DIR = Path(__file__).resolve().parent.parent
    ENV_FILE_PATH = BASE_DIR / '.env'

    def __init__(self):
        # 기본 .env 로드
        load_dotenv(self.ENV_FILE_PATH)

        # 환경별 .env 파일 결정
        app_env = os.getenv('APP_ENV', 'development')
        env_file_name = f".env.{app_env}"
        env_file_path = self.BASE_DIR / env_file_name
        load_dotenv(env_file_path, override=True)

    def _get(self, key: str, default: str = None) -> str:
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int = 0) -> int:
        return int(os.getenv(key, default))

    def _get_bool(self, key: str, default: bool = False) -> bool:
        val = os.getenv(key, str(default)).lower()
        return val in ('true', '1', 'yes')

    def _get_list(self, key: str, default: list = None) -> list:
        raw = os.getenv(key)
        if not raw:
            return list(default or [])
        return [item.strip() for item in raw.split(',') if item.strip()]

    # Server
    @property
    def app_env(self):
        return self._get('APP_ENV', 'development')

    @property
    def is_development(self):
        return self.app_env == 'development'

    @property
    def is_production(self):
        return self.app_env == 'production'

    @property
    def port(self):
        return self._get_int('PORT', 3000)

    @property
    def cors_origins(self):
        return self._get_list('CORS_ORIGINS', ['*'])

    # Logging
    @property
    def log_path(self):
        return self._get('LOG_PATH')

    @property
    def log_level(self):
        return self._get('LOG_LEVEL', 'INFO')

    # GoalServe
    @property
    def goalserve_api_key(self):
        key = self._get('GOALSERVE_API_KEY', '')
        return key.strip() or None

    @property
    def goalserve_base_url(self):
        return self._get('GOALSERVE_BASE_URL', 'https://www.goalserve.com/getfeed')

    @property
    def request_timeout_ms(self):
        return self._get_int('REQUEST_TIMEOUT_MS', 10000)
