"""Partner application (sidebar configuration API) settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class PartnerSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    PARTNER_API_BASE_URL: str = "https://upmo-demo.vercel.app"
    PARTNER_API_TIMEOUT: int = 15

    # Writes without a version are last-write-wins; false makes the version mandatory
    SIDEBAR_ALLOW_UNVERSIONED_WRITES: bool = True


__all__ = ["PartnerSettings"]
