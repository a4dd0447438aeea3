"""Tests for settings persistence and QR login."""
import json
from unittest.mock import Mock, patch

import pytest

from config import MatterApiConfig
from src.api.matter_client import MatterClient
from src.auth.qr_login import AuthenticationError, QrAuthenticator
from src.auth.settings import Settings, SettingsStore


@pytest.fixture
def store(tmp_path):
    return SettingsStore(tmp_path / "config" / "settings.json")


class TestSettingsStore:
    """Test SettingsStore."""

    def test_defaults_when_missing(self, store):
        assert store.load() == Settings(access_token=None, refresh_token=None)

    def test_defaults_when_invalid(self, store):
        store.settings_file.parent.mkdir(parents=True)
        store.settings_file.write_text("{broken")

        assert store.load() == Settings()

    def test_save_and_load(self, store):
        store.save(Settings(access_token="a", refresh_token="r"))

        assert json.loads(store.settings_file.read_text()) == {"accessToken": "a", "refreshToken": "r"}
        assert store.load() == Settings(access_token="a", refresh_token="r")


class TestQrAuthenticator:
    """Test the QR login flow."""

    @pytest.fixture
    def client(self):
        client = Mock(spec=MatterClient)
        client.trigger_qr_login.return_value = "session-xyz"
        return client

    @patch("src.auth.qr_login.time.sleep")
    def test_polls_until_token(self, mock_sleep, client, store):
        client.exchange_qr_login.side_effect = [
            {},
            {"access_token": None},
            {"access_token": "acc", "refresh_token": "ref"},
        ]
        shown = []

        settings = QrAuthenticator(client, store, show_qr=shown.append).authenticate()

        assert shown == ["session-xyz"]
        assert settings.access_token == "acc"
        assert settings.refresh_token == "ref"
        assert store.load() == Settings(access_token="acc", refresh_token="ref")
        assert mock_sleep.call_count == 2
        client.exchange_qr_login.assert_called_with("session-xyz")

    @patch("src.auth.qr_login.time.sleep")
    def test_timeout(self, mock_sleep, client, store):
        client.exchange_qr_login.return_value = {}

        authenticator = QrAuthenticator(client, store, max_attempts=3, show_qr=lambda data: None)

        with pytest.raises(AuthenticationError, match="timed out"):
            authenticator.authenticate()

        assert client.exchange_qr_login.call_count == 3
        assert store.load().access_token is None


class TestMatterClient:
    """Test MatterClient requests."""

    @patch("requests.Session.post")
    def test_trigger_qr_login(self, mock_post):
        response = Mock()
        response.json.return_value = {"session_token": "tok"}
        mock_post.return_value = response

        client = MatterClient(MatterApiConfig(host="https://api.example.test", client_type="integration"))

        assert client.trigger_qr_login() == "tok"
        args, kwargs = mock_post.call_args
        assert args[0] == "https://api.example.test/qr_login/trigger/"
        assert kwargs["json"] == {"client_type": "integration"}

    @patch("requests.Session.post")
    def test_exchange_non_json_reply(self, mock_post):
        response = Mock()
        response.status_code = 400
        response.json.side_effect = ValueError("no body")
        mock_post.return_value = response

        client = MatterClient(MatterApiConfig(host="https://api.example.test"))

        assert client.exchange_qr_login("tok") == {}

    def test_bearer_header(self):
        client = MatterClient(MatterApiConfig(host="https://api.example.test"), access_token="abc")

        assert client.session.headers["Authorization"] == "Bearer abc"
