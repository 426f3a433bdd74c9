"""Session store: the authenticated identity and its credential."""

import logging
from dataclasses import dataclass, field, replace

from pydantic import BaseModel

from blog_client.adapters.blog_api_client import BlogApiClient
from blog_client.adapters.credential_store import CredentialProvider
from blog_client.domain.media import MediaUpload
from blog_client.domain.operations import Operation, OperationStatus
from blog_client.domain.session import (
    Identity,
    LoginRequest,
    ProfileUpdate,
    RegistrationRequest,
)
from blog_client.services.lifecycle import OperationLifecycle

_logger = logging.getLogger(__name__)


class _LoginResponse(BaseModel):
    token: str
    user: Identity


@dataclass(frozen=True)
class SessionState:
    """Snapshot of the session category; never holds the credential."""

    identity: Identity | None = None
    status: OperationStatus = field(default_factory=OperationStatus)


@dataclass
class SessionStore:
    """Login, registration and profile operations for the signed-in user."""

    client: BlogApiClient
    credentials: CredentialProvider
    lifecycle: OperationLifecycle[SessionState] = field(
        default_factory=lambda: OperationLifecycle(SessionState())
    )

    @property
    def state(self) -> SessionState:
        """Current session snapshot."""
        return self.lifecycle.state

    @property
    def has_credential(self) -> bool:
        """True when a bearer token is stored."""
        return self.credentials.get_token() is not None

    async def login(self, request: LoginRequest) -> Identity:
        """Exchange credentials for a token and load the identity."""

        async def call() -> Identity:
            payload = await self.client.request(
                "POST", "/auth/login", json=request.model_dump()
            )
            response = _LoginResponse.model_validate(payload)
            self.credentials.set_token(response.token)
            _logger.info("Logged in as %s", response.user.username)
            return response.user

        return await self.lifecycle.run(Operation.LOGIN, call, _set_identity)

    async def register(
        self,
        request: RegistrationRequest,
        avatar: MediaUpload | None = None,
        cover_image: MediaUpload | None = None,
    ) -> Identity:
        """Create an account, optionally uploading profile images with it."""
        files: dict[str, tuple[str, bytes, str]] = {}
        if avatar is not None:
            files["avatar"] = avatar.as_multipart()["file"]
        if cover_image is not None:
            files["cover_image"] = cover_image.as_multipart()["file"]

        async def call() -> Identity:
            payload = await self.client.request(
                "POST",
                "/auth/register",
                data=request.model_dump(exclude_none=True),
                files=files or None,
            )
            return Identity.model_validate(payload)

        return await self.lifecycle.run(Operation.REGISTER, call, _set_identity)

    async def fetch_profile(self) -> Identity:
        """Reload the identity from the server."""

        async def call() -> Identity:
            payload = await self.client.request("GET", "/users/profile")
            return Identity.model_validate(payload)

        return await self.lifecycle.run(Operation.FETCH_PROFILE, call, _set_identity)

    async def update_profile(self, update: ProfileUpdate) -> Identity:
        """Submit profile changes; the returned identity replaces the old one."""

        async def call() -> Identity:
            payload = await self.client.request(
                "PUT", "/users/profile", json=update.to_payload()
            )
            return Identity.model_validate(payload)

        return await self.lifecycle.run(Operation.UPDATE_PROFILE, call, _set_identity)

    async def restore(self) -> Identity | None:
        """Rebuild the identity from a persisted credential, if one exists."""
        if not self.has_credential:
            return None
        return await self.fetch_profile()

    async def request_password_reset(self, email: str) -> str | None:
        """Ask the server to send a password reset link."""

        async def call() -> str | None:
            payload = await self.client.request(
                "POST", "/auth/password-reset/request", json={"email": email}
            )
            return _message(payload)

        return await self.lifecycle.run(
            Operation.REQUEST_PASSWORD_RESET, call, lambda state, _: state
        )

    async def reset_password(self, token: str, password: str) -> str | None:
        """Set a new password using a reset token."""

        async def call() -> str | None:
            payload = await self.client.request(
                "POST",
                "/auth/password-reset/reset",
                json={"token": token, "password": password},
            )
            return _message(payload)

        return await self.lifecycle.run(
            Operation.RESET_PASSWORD, call, lambda state, _: state
        )

    def logout(self) -> None:
        """Forget the credential and the identity."""
        self.credentials.clear_token()
        self.lifecycle.commit(SessionState())
        _logger.info("Logged out")

    def clear_error(self) -> None:
        """Drop the session failure reason."""
        self.lifecycle.clear_error()


def _set_identity(state: SessionState, identity: Identity) -> SessionState:
    return replace(state, identity=identity)


def _message(payload: object) -> str | None:
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str):
            return message
    return None
