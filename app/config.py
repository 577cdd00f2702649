from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "local"

    database_url_override: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = ""
    postgres_db: str = "shopping_cart"
    postgres_host: str = "localhost"
    postgres_port: str = "5432"

    log_level: str = "INFO"

    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:8000",
    ]

    # warehouse the carts ship from
    origin_country: str = "USA"
    origin_city: str = "Dallas"
    origin_street: str = "1234 Main St"

    premium_discount_percent: float = 10.0

    @property
    def database_url(self):
        if self.database_url_override:
            return self.database_url_override

        encoded_password = quote_plus(self.postgres_password)
        return (
            f"postgresql+psycopg2://{self.postgres_user}:"
            f"{encoded_password}@{self.postgres_host}:"
            f"{self.postgres_port}/{self.postgres_db}"
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "allow"

settings = Settings()
