"""Application configuration using Pydantic settings."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str
    db_pool_size: int = 20
    db_max_overflow: int = 10

    # API Configuration
    api_host: str = "0.0.0.0"
    api_port: int = 7777
    environment: str = "development"

    # Form submission API (target of the injected form handler script)
    form_api_base_url: str = "https://app.getalloro.com"
    form_handler_enabled: bool = True

    @property
    def form_submission_endpoint(self) -> str:
        """Full URL the injected form handler posts to."""
        return f"{self.form_api_base_url.rstrip('/')}/api/websites/form-submission"

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
