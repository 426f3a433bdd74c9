"""Dependency container wiring for a client session."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from blog_client.adapters.blog_api_client import BlogApiClient, HttpxBlogApiClient
from blog_client.adapters.credential_store import (
    CredentialProvider,
    FileCredentialStore,
)
from blog_client.app_logging import configure_logging
from blog_client.config import Settings
from blog_client.services.media import MediaStore
from blog_client.services.posts import PostStore
from blog_client.services.session import SessionStore


@dataclass
class AppContainer:
    """Holds the stores for one application session.

    Build one per session and pass it to the callers that need it.
    """

    settings: Settings
    credentials: CredentialProvider
    api_client: BlogApiClient
    session_store: SessionStore
    post_store: PostStore
    media_store: MediaStore
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    credentials = FileCredentialStore(resolved_settings.token_path)
    api_client = HttpxBlogApiClient.create(
        base_url=resolved_settings.blog_api_base_url,
        credentials=credentials,
        timeout=resolved_settings.request_timeout_seconds,
    )

    async def close_resources() -> None:
        await api_client.close()

    return AppContainer(
        settings=resolved_settings,
        credentials=credentials,
        api_client=api_client,
        session_store=SessionStore(client=api_client, credentials=credentials),
        post_store=PostStore(client=api_client),
        media_store=MediaStore(
            client=api_client,
            media_base_url=resolved_settings.blog_media_base_url,
        ),
        close_resources=close_resources,
    )
