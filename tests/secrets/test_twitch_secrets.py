import pytest
from keyring.errors import KeyringError

from mostlybot.config.secrets import load_twitch_secrets
from mostlybot.secrets.store import KeyringSecretStore, SecretStoreError


class _DummyStore:
    def __init__(self, values: dict[str, str]) -> None:
        self._values = values

    def get_secret(self, account: str) -> str:
        if account not in self._values:
            raise SecretStoreError(f"missing: {account}")
        return self._values[account]


def test_load_twitch_secrets(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "mostlybot.config.secrets.create_secret_store",
        lambda service_name: _DummyStore({"twitch_client_id": " cid ", "twitch_access_token": "tok"}),
    )

    secrets = load_twitch_secrets()
    assert secrets.client_id == "cid"
    assert secrets.access_token == "tok"


def test_load_twitch_secrets_missing_token() -> None:
    with pytest.raises(SecretStoreError):
        load_twitch_secrets(store=_DummyStore({"twitch_client_id": "cid"}))


def test_load_twitch_secrets_blank_value() -> None:
    with pytest.raises(SecretStoreError, match="empty"):
        load_twitch_secrets(store=_DummyStore({"twitch_client_id": "cid", "twitch_access_token": "  "}))


class _FakeKeyring:
    def __init__(self, values: dict[tuple[str, str], str]) -> None:
        self._values = values

    def get_password(self, service: str, account: str):
        if service == "broken":
            raise KeyringError("keychain locked")
        return self._values.get((service, account))


def test_keyring_store_reads_service_scoped_values(monkeypatch: pytest.MonkeyPatch) -> None:
    fake = _FakeKeyring({("mostlybot", "twitch_client_id"): "cid"})
    monkeypatch.setattr("keyring.get_password", fake.get_password)
    store = KeyringSecretStore(service_name="mostlybot")

    assert store.get_secret("twitch_client_id") == "cid"
    with pytest.raises(SecretStoreError, match="missing secret"):
        store.get_secret("twitch_access_token")


def test_keyring_store_wraps_backend_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("keyring.get_password", _FakeKeyring({}).get_password)
    with pytest.raises(SecretStoreError, match="failed to read"):
        KeyringSecretStore(service_name="broken").get_secret("twitch_client_id")
