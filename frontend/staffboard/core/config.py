import sys

from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    EMPLOYEE_API_BASE_URL: str = "http://localhost:8000/api"
    EMPLOYEE_API_PATH: str = "/employees"
    EMPLOYEE_API_TIMEOUT_SECONDS: float = 30.0

    NOTIFICATION_TTL_SECONDS: float = 5.0

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()
