"""Application configuration."""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class MatterApiConfig:
    """Matter API configuration."""

    host: str = "https://api.getmatter.app/api/v11"
    client_type: str = "integration"
    timeout: Optional[float] = None  # None keeps the requests default (no timeout)

    @classmethod
    def from_env(cls) -> "MatterApiConfig":
        """Load config from environment variables."""
        timeout = os.getenv("MATTER_TIMEOUT")
        return cls(
            host=os.getenv("MATTER_API_HOST", "https://api.getmatter.app/api/v11").rstrip("/"),
            client_type=os.getenv("MATTER_CLIENT_TYPE", "integration"),
            timeout=float(timeout) if timeout else None,
        )


@dataclass
class AppConfig:
    """Application configuration."""

    config_dir: str = "./config"
    output_dir: str = "./api-docs"
    matter_api: MatterApiConfig = None

    def __post_init__(self):
        """Initialize default values."""
        if self.matter_api is None:
            self.matter_api = MatterApiConfig.from_env()

    @property
    def settings_file(self) -> Path:
        return Path(self.config_dir) / "settings.json"

    @property
    def endpoints_file(self) -> Path:
        return Path(self.config_dir) / "endpoints.json"

    @property
    def results_file(self) -> Path:
        return Path(self.output_dir) / "api-results.json"

    @property
    def summary_file(self) -> Path:
        return Path(self.output_dir) / "successful-endpoints.json"

    @property
    def docs_file(self) -> Path:
        return Path(self.output_dir) / "matter-api-docs.md"

    @property
    def highlights_file(self) -> Path:
        return Path(self.output_dir) / "highlights.json"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            config_dir=os.getenv("MATTER_CONFIG_DIR", "./config"),
            output_dir=os.getenv("MATTER_OUTPUT_DIR", "./api-docs"),
            matter_api=MatterApiConfig.from_env(),
        )


# Global instance
app_config = AppConfig.from_env()
