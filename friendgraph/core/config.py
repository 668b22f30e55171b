# friendgraph/core/config.py

from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    PROJECT_NAME: str = "friendgraph"

    DATABASE_URL: str = "sqlite:///./friendgraph.db"
    # Server databases only; "REPEATABLE READ" when unset. Ignored for SQLite.
    DB_ISOLATION_LEVEL: Optional[str] = None
    SQL_ECHO: bool = False

    SECRET_KEY: str = "CHANGE_THIS_TO_A_SUPER_SECRET_KEY"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    LOG_LEVEL: str = "INFO"

    class Config:
        """
        Values come from the process environment first, then from .env
        in the working directory.
        """
        env_file = ".env"

settings = Settings()
