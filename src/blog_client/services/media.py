"""Media store: uploads made during the current session."""

from dataclasses import dataclass, field, replace

from blog_client.adapters.blog_api_client import BlogApiClient
from blog_client.domain.media import Media, MediaUpload, media_url
from blog_client.domain.operations import Operation, OperationStatus
from blog_client.services import consistency
from blog_client.services.lifecycle import OperationLifecycle


@dataclass(frozen=True)
class MediaState:
    """Snapshot of the media category."""

    uploads: tuple[Media, ...] = ()
    status: OperationStatus = field(default_factory=OperationStatus)


@dataclass
class MediaStore:
    """Upload and delete media, tracking this session's uploads."""

    client: BlogApiClient
    media_base_url: str
    lifecycle: OperationLifecycle[MediaState] = field(
        default_factory=lambda: OperationLifecycle(MediaState())
    )

    @property
    def state(self) -> MediaState:
        """Current media snapshot."""
        return self.lifecycle.state

    async def upload_media(self, upload: MediaUpload) -> Media:
        """Upload a file and append the returned reference."""

        async def call() -> Media:
            payload = await self.client.request(
                "POST", "/media", files=upload.as_multipart()
            )
            return Media.model_validate(payload)

        return await self.lifecycle.run(
            Operation.UPLOAD_MEDIA,
            call,
            lambda state, media: replace(
                state, uploads=consistency.append(state.uploads, media)
            ),
        )

    async def delete_media(self, media_id: str) -> str:
        """Delete a media file and drop it from the uploads."""

        async def call() -> str:
            await self.client.request("DELETE", f"/media/{media_id}")
            return media_id

        return await self.lifecycle.run(
            Operation.DELETE_MEDIA,
            call,
            lambda state, deleted_id: replace(
                state, uploads=consistency.remove_by_id(state.uploads, deleted_id)
            ),
        )

    def url_for(self, media: Media) -> str:
        """Resolve the display URL of a media reference."""
        return media_url(self.media_base_url, media)

    def clear_uploads(self) -> None:
        """Forget uploads tracked so far."""
        self.lifecycle.commit(replace(self.state, uploads=()))

    def clear_error(self) -> None:
        """Drop the media failure reason."""
        self.lifecycle.clear_error()
