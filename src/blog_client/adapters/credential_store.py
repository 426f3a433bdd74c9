"""Persistent storage for the bearer credential."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)


class CredentialProvider(Protocol):
    """Interface for the single persistent credential slot."""

    def get_token(self) -> str | None:
        """Return the stored bearer token, if any."""

    def set_token(self, token: str) -> None:
        """Persist a bearer token, replacing any previous one."""

    def clear_token(self) -> None:
        """Remove the stored bearer token."""


@dataclass
class FileCredentialStore(CredentialProvider):
    """Credential slot backed by a file on disk.

    The file is read on every call so tokens written by another process are
    picked up without restarting the client.
    """

    path: Path

    def get_token(self) -> str | None:
        """Read the token from disk."""
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def set_token(self, token: str) -> None:
        """Write the token with owner-only permissions."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        self.path.chmod(0o600)
        _logger.debug("Stored credential at %s", self.path)

    def clear_token(self) -> None:
        """Delete the token file if present."""
        self.path.unlink(missing_ok=True)
        _logger.debug("Cleared credential at %s", self.path)
