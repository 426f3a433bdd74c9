"""Tests for the media store."""

import asyncio

import pytest

from blog_client.adapters.blog_api_client import ApiError
from blog_client.domain.media import MediaUpload
from blog_client.domain.operations import OperationFailed
from blog_client.services.media import MediaStore
from tests.conftest import FakeBlogApiClient


def _store(api_client: FakeBlogApiClient) -> MediaStore:
    return MediaStore(client=api_client, media_base_url="https://blog.test/media/")


def test_upload_appends_and_sends_multipart(api_client: FakeBlogApiClient) -> None:
    store = _store(api_client)
    upload = MediaUpload(filename="a.png", content=b"png", content_type="image/png")
    api_client.responses[("POST", "/media")] = {
        "id": "m1",
        "path": "user-1/a.png",
        "thumbnails": [{"Size": "small", "Path": "user-1/a_small.png"}],
    }
    first = asyncio.run(store.upload_media(upload))
    api_client.responses[("POST", "/media")] = {"id": "m2", "path": "user-1/b.png"}
    asyncio.run(store.upload_media(upload))

    assert [media.id for media in store.state.uploads] == ["m1", "m2"]
    assert len(first.thumbnails) == 1
    _, _, kwargs = api_client.calls[0]
    assert kwargs["files"] == {"file": ("a.png", b"png", "image/png")}


def test_delete_media_removes_by_id(api_client: FakeBlogApiClient) -> None:
    store = _store(api_client)
    upload = MediaUpload(filename="a.png", content=b"png")
    for media_id in ("m1", "m2"):
        api_client.responses[("POST", "/media")] = {"id": media_id, "path": media_id}
        asyncio.run(store.upload_media(upload))

    asyncio.run(store.delete_media("m1"))
    asyncio.run(store.delete_media("m1"))

    assert [media.id for media in store.state.uploads] == ["m2"]


def test_failed_upload_keeps_uploads(api_client: FakeBlogApiClient) -> None:
    store = _store(api_client)
    api_client.responses[("POST", "/media")] = ApiError(None, 500)

    with pytest.raises(OperationFailed):
        asyncio.run(store.upload_media(MediaUpload(filename="a", content=b"")))

    assert store.state.uploads == ()
    assert store.state.status.error == "Failed to upload media"


def test_failed_delete_reports_server_reason(api_client: FakeBlogApiClient) -> None:
    store = _store(api_client)
    api_client.responses[("DELETE", "/media/m1")] = ApiError("file missing", 500)

    with pytest.raises(OperationFailed):
        asyncio.run(store.delete_media("m1"))

    assert store.state.status.error == "file missing"


def test_url_for_and_clear_uploads(api_client: FakeBlogApiClient) -> None:
    store = _store(api_client)
    api_client.responses[("POST", "/media")] = {"id": "m1", "path": "/user-1/a.png"}
    media = asyncio.run(store.upload_media(MediaUpload(filename="a", content=b"")))

    assert store.url_for(media) == "https://blog.test/media/user-1/a.png"

    store.clear_uploads()
    assert store.state.uploads == ()
