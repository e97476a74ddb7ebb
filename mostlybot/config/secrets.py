"""Twitch credentials for the Helix client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mostlybot.secrets.store import KeyringSecretStore, SecretStore, SecretStoreError, require_secret

DEFAULT_SERVICE_NAME = "mostlybot"


@dataclass(frozen=True)
class TwitchSecrets:
    client_id: str
    access_token: str


def create_secret_store(service_name: str = DEFAULT_SERVICE_NAME) -> SecretStore:
    return KeyringSecretStore(service_name=service_name)


def load_twitch_secrets(
    service_name: str = DEFAULT_SERVICE_NAME,
    store: Optional[SecretStore] = None,
) -> TwitchSecrets:
    store = store if store is not None else create_secret_store(service_name=service_name)
    return TwitchSecrets(
        client_id=require_secret(store, "twitch_client_id"),
        access_token=require_secret(store, "twitch_access_token"),
    )


__all__ = ["TwitchSecrets", "create_secret_store", "load_twitch_secrets", "SecretStoreError"]
