"""Credential lookup for the Twitch API.

Accounts are stored under one keyring service (default ``mostlybot``):
- twitch_client_id
- twitch_access_token

Environment variables are never consulted.
"""

from __future__ import annotations

import logging
from typing import Protocol

import keyring
from keyring.errors import KeyringError

LOGGER = logging.getLogger(__name__)


class SecretStoreError(RuntimeError):
    """Raised when a secret is missing or the credential store is unusable."""


class SecretStore(Protocol):
    def get_secret(self, account: str) -> str:
        ...


class KeyringSecretStore:
    """Reads from whatever backend keyring picked for this OS."""

    def __init__(self, service_name: str) -> None:
        self.service_name = service_name

    def get_secret(self, account: str) -> str:
        try:
            value = keyring.get_password(self.service_name, account)
        except KeyringError as exc:
            LOGGER.error("credential store read failed service=%s account=%s", self.service_name, account)
            raise SecretStoreError(f"failed to read secret '{account}' from {self.service_name}") from exc
        if value is None:
            raise SecretStoreError(f"missing secret '{account}' in {self.service_name}")
        return value


def require_secret(store: SecretStore, account: str) -> str:
    value = store.get_secret(account).strip()
    if not value:
        raise SecretStoreError(f"secret is empty: {account}")
    return value
