from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Shared secret typed into the admin page
    admin_password: str = ""

    # GitHub contents API (repo hosting the static site)
    gh_token: str = ""
    gh_owner: str = ""
    gh_repo: str = ""
    gh_file: str = "custom-recipes.json"
    gh_branch: str = "main"
    gh_api_url: str = "https://api.github.com"
    gh_timeout_seconds: float = 30.0

    # CORS: comma-separated allowlist, empty means allow all
    allowed_origins: str = ""

    rate_limit: str = "30/minute"
    log_level: str = "INFO"

    @property
    def origin_allowlist(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def store_configured(self) -> bool:
        return bool(self.gh_token and self.gh_owner and self.gh_repo)


settings = Settings()
