"""Environment-sourced configuration for the task_api service.

Values are read from the process environment (and a ``.env`` file when one is
present) into a single ``Settings`` object that is built once at startup and
handed to the persistence gateway and the token verifier.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field
from sqlalchemy.engine import URL

load_dotenv()


class Settings(BaseModel):
    """Service configuration."""

    db_user: Optional[str] = None
    db_host: Optional[str] = None
    db_name: Optional[str] = None
    test_db_name: Optional[str] = None
    db_password: Optional[str] = None
    db_port: int = Field(5432, description="PostgreSQL port")
    jwt_secret: Optional[str] = Field(None, description="Shared secret used to verify credentials")
    app_env: str = "development"
    database_url_override: Optional[str] = Field(None, description="Full database URL, wins over the parts")
    service_host: str = "0.0.0.0"
    service_port: int = 8000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            db_user=os.getenv("DB_USER"),
            db_host=os.getenv("DB_HOST"),
            db_name=os.getenv("DB_NAME"),
            test_db_name=os.getenv("TEST_DB_NAME"),
            db_password=os.getenv("DB_PASSWORD"),
            db_port=int(os.getenv("DB_PORT") or 5432),
            jwt_secret=os.getenv("JWT_SECRET"),
            app_env=os.getenv("APP_ENV", "development"),
            database_url_override=os.getenv("DATABASE_URL") or None,
            service_host=os.getenv("SERVICE_HOST", "0.0.0.0"),
            service_port=int(os.getenv("SERVICE_PORT") or 8000),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    @property
    def database_name(self) -> Optional[str]:
        """Database name, switched to the test database under APP_ENV=test."""
        if self.app_env == "test":
            return self.test_db_name
        return self.db_name

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the task store."""
        if self.database_url_override:
            return self.database_url_override
        url = URL.create(
            "postgresql+psycopg2",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.database_name,
        )
        return url.render_as_string(hide_password=False)
