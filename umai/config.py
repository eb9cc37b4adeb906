from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="UMAI_")

    app_name: str = "Umai"
    debug: bool = False

    # Demo user service (GET /api/users/{id})
    users_api_url: str = "https://reqres.in"

    # Seconds (httpx default)
    request_timeout: float = 5.0


settings = Settings()
