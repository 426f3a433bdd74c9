"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from blog_client.adapters.blog_api_client import BlogApiClient
from blog_client.adapters.credential_store import CredentialProvider
from blog_client.config import Settings


@dataclass
class InMemoryCredentialStore(CredentialProvider):
    """In-memory credential slot for tests."""

    token: str | None = None

    def get_token(self) -> str | None:
        return self.token

    def set_token(self, token: str) -> None:
        self.token = token

    def clear_token(self) -> None:
        self.token = None


@dataclass
class FakeBlogApiClient(BlogApiClient):
    """Fake API client returning scripted responses per (method, path).

    A scripted exception is raised instead of returned. Requests whose key has
    a gate wait until the gate's event is set.
    """

    responses: dict[tuple[str, str], object] = field(default_factory=dict)
    gates: dict[tuple[str, str], asyncio.Event] = field(default_factory=dict)
    calls: list[tuple[str, str, dict[str, object]]] = field(default_factory=list)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: object | None = None,
        data: object | None = None,
        files: object | None = None,
    ) -> object:
        self.calls.append((method, path, {"json": json, "data": data, "files": files}))
        gate = self.gates.get((method, path))
        if gate is not None:
            await gate.wait()
        response = self.responses.get((method, path))
        if isinstance(response, Exception):
            raise response
        return response


def post_payload(post_id: str, title: str | None = None, **extra: object) -> dict:
    """Build a server-shaped post body."""
    payload: dict[str, object] = {
        "id": post_id,
        "title": title or f"Post {post_id}",
        "content": "Body",
        "status": "published",
        "tags": ["go", "python"],
        "author_id": "author-1",
        "created_at": "2024-05-01T10:00:00Z",
    }
    payload.update(extra)
    return payload


def identity_payload(user_id: str = "user-1", **profile: object) -> dict:
    """Build a server-shaped identity body."""
    return {
        "id": user_id,
        "username": "ada",
        "email": "ada@example.com",
        "profile": {"full_name": "Ada Lovelace", **profile},
    }


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        blog_api_base_url="https://blog.test/api",
        blog_media_base_url="https://blog.test/media",
        token_path=tmp_path / "token",
    )


@pytest.fixture
def credentials() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def api_client() -> FakeBlogApiClient:
    return FakeBlogApiClient()
