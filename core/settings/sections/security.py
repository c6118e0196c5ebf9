from pydantic import Field
from pydantic_settings import BaseSettings


class SecuritySettings(BaseSettings):
    """
    Password hashing settings.
    Loaded automatically from .env with prefix SECURITY_*
    """

    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SECURITY_",
        "extra": "ignore",
    }
