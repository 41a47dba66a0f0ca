from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    kubeconfig: str | None = Field(default=None)
    context: str | None = Field(default=None)
    log_level: LogLevel = Field(default="WARNING")
    field_manager: str = Field(default="kubectl-create")

    model_config = {"env_prefix": "KUBECTL_LR_", "case_sensitive": False}

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v


settings = Settings()
