from pydantic_settings import BaseSettings

from app.utils.constants import HASH_COLLECTION, USERS_COLLECTION


class Settings(BaseSettings):
    # Environment
    env: str = "local"

    # Pseudonymization
    email_hash_secret: str

    # Firebase
    firebase_credentials_file: str | None = None
    firebase_project_id: str | None = None

    # Document store
    hash_collection: str = HASH_COLLECTION
    users_collection: str = USERS_COLLECTION

    # HTTP
    cors_origins: list[str] = ["*"]

    # Observability
    sentry_dsn: str | None = None
    log_level: str | None = None
    log_file: str | None = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_debug(self) -> bool:
        return self.env == "local"


def load_settings() -> Settings:
    """Read settings from the environment. Fails if the hash secret is unset."""
    return Settings()
