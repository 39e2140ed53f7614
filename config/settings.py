# config/settings.py
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """환경변수 / .env 기반 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_TITLE: str = Field(default="BMI Check API")
    API_PREFIX: str = Field(default="/api")

    # 쉼표 구분, "*"이면 모든 origin 허용
    CORS_ORIGINS: str = Field(default="http://localhost:3000,http://127.0.0.1:3000")

    LOG_LEVEL: str = Field(default="INFO")
    LOG_FORMAT: str = Field(default="text")  # text | json

    @field_validator("API_PREFIX")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
