"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherview.config.defaults import (
    DEFAULT_API_BASE_URL,
    DEFAULT_API_VERSION,
    DEFAULT_DATASET_PATH,
)


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = DEFAULT_API_BASE_URL
    version: str = DEFAULT_API_VERSION
    app_id: str = ""
    app_secret: str = ""
    unescape: bool = True


class DatasetConfig(BaseModel):
    model_config = {"extra": "forbid"}

    path: str = str(DEFAULT_DATASET_PATH)
    max_name_length: int = Field(default=20, ge=1)


class TransportConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timeout_seconds: float = Field(default=10.0, gt=0.0)
    max_retries: int = Field(default=2, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    dataset: DatasetConfig = DatasetConfig()
    transport: TransportConfig = TransportConfig()
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR)$")
