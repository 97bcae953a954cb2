"""
Application configuration module.

Manages all configuration settings using Pydantic settings management.
Configuration can be overridden via environment variables.
"""

import tempfile
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    All settings can be overridden via environment variables
    matching the field name (case-insensitive).

    Attributes:
        app_name: Name of the application.
        app_version: Current version of the application.
        debug: Enable debug mode.
        environment: Current environment (development, staging, production).

        database_url: SQLAlchemy database connection URL.
        storage_backend: Which store implementation to build at startup.

        lighthouse_api_key: Lighthouse API key. Pinning endpoints fail without it.
        lighthouse_upload_url: Base URL of the Lighthouse upload node.
        lighthouse_api_url: Base URL of the Lighthouse account API.
        lighthouse_timeout: Timeout in seconds for Lighthouse requests.

        upload_tmp_dir: Directory where multipart uploads are spooled.
        max_upload_size: Maximum combined upload size per request in bytes.

        seed_demo_user: Create the demo user on startup.
        demo_username: Username of the demo user.
        demo_password: Password of the demo user.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    app_name: str = "Dataset Lineage Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: Literal["development", "staging", "production"] = "development"
    cors_origins: list[str] = ["*"]

    # Storage settings
    database_url: str = "sqlite:///./lineage.db"
    storage_backend: Literal["memory", "database"] = "database"

    # Lighthouse settings
    lighthouse_api_key: Optional[str] = None
    lighthouse_upload_url: str = "https://node.lighthouse.storage"
    lighthouse_api_url: str = "https://api.lighthouse.storage"
    lighthouse_timeout: int = 300

    # File upload settings
    upload_tmp_dir: Path = Path(tempfile.gettempdir()) / "uploads"
    max_upload_size: int = 500 * 1024 * 1024  # 500MB

    # Demo user
    seed_demo_user: bool = True
    demo_username: str = "demo"
    demo_password: str = "password"

    def get_upload_tmp_path(self) -> Path:
        """Get and ensure the upload spool directory exists."""
        self.upload_tmp_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_tmp_dir


settings = Settings()
