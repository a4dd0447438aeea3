"""Persisted authentication settings."""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Saved Matter tokens."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "accessToken": self.access_token,
            "refreshToken": self.refresh_token,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        return cls(
            access_token=data.get("accessToken"),
            refresh_token=data.get("refreshToken"),
        )


class SettingsStore:
    """Load and save Settings as a JSON file."""

    def __init__(self, settings_file: Path):
        self.settings_file = Path(settings_file)

    def load(self) -> Settings:
        """Load saved settings, defaults when none are found."""
        try:
            with open(self.settings_file, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.debug(f"No usable settings in {self.settings_file}: {e}")
            return Settings()

        if not isinstance(data, dict):
            return Settings()
        return Settings.from_dict(data)

    def save(self, settings: Settings) -> None:
        """Persist settings to disk."""
        self.settings_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            json.dump(settings.to_dict(), f, indent=2)
