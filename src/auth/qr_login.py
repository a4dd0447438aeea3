"""
QR Login - Authenticates against Matter by scanning a QR code in the app.

Flow:
- trigger a login session and render its token as a QR code
- poll the exchange endpoint once per second until tokens are issued
- save the tokens through the SettingsStore
"""

import logging
import time
from typing import Callable, Optional

import click
import qrcode

from src.api.matter_client import MatterClient
from src.auth.settings import Settings, SettingsStore

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 600
POLL_INTERVAL = 1.0


class AuthenticationError(RuntimeError):
    """QR login did not produce an access token."""


def print_qr_code(data: str) -> None:
    """Render data as a QR code on the terminal"""
    qr = qrcode.QRCode(border=1)
    qr.add_data(data)
    qr.make(fit=True)
    qr.print_ascii(invert=True)


class QrAuthenticator:
    """
    Performs QR-based authentication

    Usage:
    ```python
    authenticator = QrAuthenticator(MatterClient(app_config.matter_api), store)
    settings = authenticator.authenticate()
    ```
    """

    def __init__(
        self,
        client: MatterClient,
        settings_store: SettingsStore,
        max_attempts: int = MAX_ATTEMPTS,
        poll_interval: float = POLL_INTERVAL,
        show_qr: Optional[Callable[[str], None]] = None,
    ):
        self.client = client
        self.settings_store = settings_store
        self.max_attempts = max_attempts
        self.poll_interval = poll_interval
        self.show_qr = show_qr or print_qr_code

    def authenticate(self) -> Settings:
        """
        Run the QR login flow and save the resulting tokens

        Returns:
            Saved settings with the new access token

        Raises:
            AuthenticationError: If no token was issued within max_attempts polls
            requests.exceptions.RequestException: If the login cannot be triggered
        """
        logger.info("Starting Matter authentication...")
        session_token = self.client.trigger_qr_login()

        click.echo("Scan this QR code in the Matter app:")
        self.show_qr(session_token)

        settings = self.settings_store.load()
        for _ in range(self.max_attempts):
            payload = self.client.exchange_qr_login(session_token)
            access_token = payload.get("access_token")
            if access_token:
                settings.access_token = access_token
                settings.refresh_token = payload.get("refresh_token")
                self.settings_store.save(settings)
                click.echo()
                logger.info("Authentication successful")
                return settings

            click.echo(".", nl=False)
            time.sleep(self.poll_interval)

        click.echo()
        raise AuthenticationError("QR login exchange timed out.")
