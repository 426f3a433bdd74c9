"""Domain models for uploaded media."""

from pydantic import BaseModel, ConfigDict, field_validator


class Thumbnail(BaseModel):
    """Server-generated thumbnail of an uploaded image."""

    model_config = ConfigDict(frozen=True, extra="allow")

    size: str | None = None
    width: int | None = None
    height: int | None = None
    path: str | None = None
    url: str | None = None


class Media(BaseModel):
    """Reference to a file stored by the server.

    Only server-resolvable references are kept; binary content is never held
    after upload. Unknown metadata keys returned by the server are preserved.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str | None = None
    path: str
    file_name: str | None = None
    mime_type: str | None = None
    size: int | None = None
    url: str | None = None
    thumbnails: tuple[Thumbnail, ...] = ()

    @field_validator("thumbnails", mode="before")
    @classmethod
    def null_thumbnails(cls, value: object) -> object:
        return () if value is None else value


class MediaUpload(BaseModel):
    """Raw file payload to be uploaded."""

    model_config = ConfigDict(frozen=True)

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    def as_multipart(self) -> dict[str, tuple[str, bytes, str]]:
        """Return the httpx ``files`` mapping for the upload form."""
        return {"file": (self.filename, self.content, self.content_type)}


def media_url(base_url: str, media: Media) -> str:
    """Resolve a display URL for a media reference."""
    return f"{base_url.rstrip('/')}/{media.path.lstrip('/')}"
