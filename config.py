from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Catalog API"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    database_url: str = "sqlite+aiosqlite:///./catalog.db"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Page size used when a list request paginates without per_page
    default_per_page: int = 15

    imagekit_private_key: str = ""
    imagekit_upload_url: str = "https://upload.imagekit.io/api/v1/files/upload"
    imagekit_api_url: str = "https://api.imagekit.io/v1"
    imagekit_timeout: float = 30.0

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"

    @field_validator("default_per_page")
    @classmethod
    def _positive_per_page(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("default_per_page must be positive")
        return v

    @property
    def database_scheme(self) -> str:
        return self.database_url.split(":", 1)[0].lower()

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.database_scheme

    @property
    def is_postgresql(self) -> bool:
        return "postgresql" in self.database_scheme

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
