"""Tests for the file-backed credential store."""

from pathlib import Path

from blog_client.adapters.credential_store import FileCredentialStore


def test_token_round_trips_through_file(tmp_path: Path) -> None:
    store = FileCredentialStore(tmp_path / "nested" / "token")

    assert store.get_token() is None

    store.set_token("abc")

    assert store.get_token() == "abc"
    assert FileCredentialStore(tmp_path / "nested" / "token").get_token() == "abc"


def test_clear_token_is_safe_when_missing(tmp_path: Path) -> None:
    store = FileCredentialStore(tmp_path / "token")
    store.set_token("abc")

    store.clear_token()
    store.clear_token()

    assert store.get_token() is None


def test_blank_file_counts_as_no_token(tmp_path: Path) -> None:
    path = tmp_path / "token"
    path.write_text("\n", encoding="utf-8")

    assert FileCredentialStore(path).get_token() is None
