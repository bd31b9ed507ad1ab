"""
Configuration settings for the FRA DSS Assistant
"""
from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DATA_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application Configuration
    app_name: str = Field(default="FRA DSS Assistant")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Catalog Configuration
    schemes_file: Path = Field(default=DATA_DIR / "schemes.json")
    villages_file: Path = Field(default=DATA_DIR / "villages.json")

    # Chat widget
    typing_delay_ms: int = Field(default=1500, ge=0)

    # API Configuration
    api_prefix: str = Field(default="/api/v1")
    cors_origins: str = Field(default="http://localhost:3000,http://localhost:8080")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list"""
        if ',' in self.cors_origins:
            return [origin.strip() for origin in self.cors_origins.split(',')]
        return [self.cors_origins.strip()]

    model_config = SettingsConfigDict(
        env_prefix="FRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create global settings instance
settings = Settings()
