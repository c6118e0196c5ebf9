from typing import List

from pydantic_settings import BaseSettings


class ApiSettings(BaseSettings):
    """
    HTTP API settings.
    Loaded automatically from .env with prefix API_*
    """

    title: str = "Storefront API"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "API_",
        "extra": "ignore",
    }
