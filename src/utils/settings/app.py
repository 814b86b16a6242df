from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DEBUG: bool = False
    ENVIRONMENT: str = "DEV"
    API_VERSION: str = "0.1.0"
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]

    # Console sign-in gate; empty list admits any authenticated caller
    ALLOWED_EMAILS: list[str] = []

    # Callers with a user record must hold the admin role to mutate others
    ENFORCE_ADMIN_ROLE: bool = True

    # Re-run record validation on partial updates (off by default)
    VALIDATE_ON_UPDATE: bool = False

    # Generated password length for single and bulk registration
    PASSWORD_LENGTH: int = 12

    # Security settings
    MAX_REQUEST_SIZE: int = 1 * 1024 * 1024  # 1MB

    def validate_prod(self) -> None:
        """Sanity checks for production environment."""
        if self.ENVIRONMENT.upper() == "PROD":
            if not self.CORS_ORIGINS:
                raise ValueError("CORS_ORIGINS must be set in production")
            if not self.ALLOWED_EMAILS:
                raise ValueError("ALLOWED_EMAILS must be set in production")
