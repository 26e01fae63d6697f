from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    transport_provider: str = "httpx"

    api_base_url: str = "https://devik.eurovdc.eu/"
    api_search_path: str = "tr/api/search"
    api_whois_path: str = "tr/api/whois"
    api_user_agent: str = "domaincheck/0.1"

    api_connect_timeout_seconds: int = 30
    api_read_timeout_seconds: int = 30
    api_write_timeout_seconds: int = 30
    api_connection_retries: int = 1
