"""Tests for the release check (no network: fake session)."""

import pytest
import requests

from browserport.errors import UpdateCheckError
from browserport.models import UpdateInfo
from browserport.update_check import check_for_update, compare_versions, describe_update, fetch_latest_release

from tests.fakes import FakeResponse, FakeSession


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("1.2.0", "1.1.9", 1),
        ("v1.0", "1.0.0", 0),
        ("1.0.0", "1.0.1", -1),
        ("2.0.0-beta", "1.9", 1),
        ("1.10.0", "1.9.0", 1),
    ],
)
def test_compare_versions(a: str, b: str, expected: int) -> None:
    assert compare_versions(a, b) == expected


def test_newer_release_is_reported() -> None:
    session = FakeSession(
        FakeResponse(
            200,
            {
                "tag_name": "v1.2.0",
                "name": "BrowserPort 1.2.0",
                "html_url": "https://github.com/jcyrus/browserport/releases/tag/v1.2.0",
                "body": "Fixes",
            },
        )
    )

    info = check_for_update("1.0.0", "jcyrus/browserport", session=session)

    assert info is not None
    assert info.version == "1.2.0"
    assert info.release_url.endswith("v1.2.0")
    assert session.requested == ["https://api.github.com/repos/jcyrus/browserport/releases/latest"]


def test_same_or_older_release_is_none() -> None:
    session = FakeSession(FakeResponse(200, {"tag_name": "v1.0.0"}))

    assert check_for_update("1.0.0", "jcyrus/browserport", session=session) is None


def test_http_error_is_wrapped() -> None:
    session = FakeSession(FakeResponse(404, {"message": "Not Found"}))

    with pytest.raises(UpdateCheckError, match="HTTP error"):
        fetch_latest_release("jcyrus/browserport", session=session)


def test_network_error_is_wrapped() -> None:
    session = FakeSession(error=requests.exceptions.ConnectionError("offline"))

    with pytest.raises(UpdateCheckError, match="Network error"):
        fetch_latest_release("jcyrus/browserport", session=session)


def test_missing_tag_is_an_error() -> None:
    session = FakeSession(FakeResponse(200, {"message": "no releases"}))

    with pytest.raises(UpdateCheckError):
        fetch_latest_release("jcyrus/browserport", session=session)


def test_invalid_json_is_an_error() -> None:
    session = FakeSession(FakeResponse(200, ValueError("bad json")))

    with pytest.raises(UpdateCheckError, match="Invalid response"):
        fetch_latest_release("jcyrus/browserport", session=session)


class TestDescribeUpdate:
    def test_uses_release_name_containing_version(self) -> None:
        info = UpdateInfo(version="1.2.0", release_name="BrowserPort 1.2.0")

        assert describe_update(info) == "BrowserPort 1.2.0 is available."

    def test_adds_release_name_next_to_version(self) -> None:
        info = UpdateInfo(version="1.2.0", release_name="Spring cleanup")

        assert describe_update(info) == "Version 1.2.0 (Spring cleanup) is available."

    def test_falls_back_to_version(self) -> None:
        assert describe_update(UpdateInfo(version="1.2.0")) == "Version 1.2.0 is available."


def test_release_notes_are_kept_for_the_dialog() -> None:
    session = FakeSession(FakeResponse(200, {"tag_name": "v2.0.0", "name": "Big one", "body": "- faster scan"}))

    info = check_for_update("1.0.0", "jcyrus/browserport", session=session)

    assert info is not None
    assert info.release_name == "Big one"
    assert info.release_notes == "- faster scan"
