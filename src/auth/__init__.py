"""Authentication: saved tokens and the QR login flow."""

from .settings import Settings, SettingsStore
from .qr_login import AuthenticationError, QrAuthenticator

__all__ = [
    "Settings",
    "SettingsStore",
    "AuthenticationError",
    "QrAuthenticator",
]
