"""Firebase Admin SDK settings configuration."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class FirebaseSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service-account JSON, passed as a single string
    FIREBASE_ADMIN_SDK_KEY: SecretStr = SecretStr("")
    FIREBASE_PROJECT_ID: str = ""


__all__ = ["FirebaseSettings"]
