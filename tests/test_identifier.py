"""Tests for channel URL parsing."""

import pytest

from livewatch.youtube.identifier import resolve_identifier
from livewatch.youtube.models import ChannelIdentifier, IdentifierKind


@pytest.mark.parametrize(
    "url,kind,value",
    [
        ("https://www.youtube.com/@SkylifeRP", IdentifierKind.HANDLE, "SkylifeRP"),
        ("https://youtube.com/@SkylifeRP/", IdentifierKind.HANDLE, "SkylifeRP"),
        ("https://www.youtube.com/@SkylifeRP/live?si=abc", IdentifierKind.HANDLE, "SkylifeRP"),
        ("https://www.youtube.com/channel/UCabcdefghijklmnopqrstuv", IdentifierKind.CHANNEL_ID, "UCabcdefghijklmnopqrstuv"),
        ("https://www.youtube.com/c/SkylifeRoleplay", IdentifierKind.CUSTOM_NAME, "SkylifeRoleplay"),
        ("https://www.youtube.com/user/oldname", IdentifierKind.CUSTOM_NAME, "oldname"),
    ],
)
def test_known_shapes_resolve(url, kind, value):
    assert resolve_identifier(url) == ChannelIdentifier(kind=kind, value=value)


@pytest.mark.parametrize(
    "url",
    [
        "",
        None,
        "https://www.twitch.tv/skyliferp",
        "https://www.youtube.com/watch?v=abc12345678",
        "https://www.youtube.com/channel/notachannelid",
        "just some text",
    ],
)
def test_other_strings_do_not_resolve(url):
    assert resolve_identifier(url) is None


def test_query_string_is_stripped_before_matching():
    ident = resolve_identifier("https://www.youtube.com/c/Name?view_as=subscriber")
    assert ident.value == "Name"


def test_page_urls():
    handle = ChannelIdentifier(IdentifierKind.HANDLE, "SkylifeRP")
    assert handle.live_page_url == "https://www.youtube.com/@SkylifeRP/live"
    cid = ChannelIdentifier(IdentifierKind.CHANNEL_ID, "UCabc")
    assert cid.channel_page_url == "https://www.youtube.com/channel/UCabc"
    custom = ChannelIdentifier(IdentifierKind.CUSTOM_NAME, "Name")
    assert custom.live_page_url == "https://www.youtube.com/c/Name/live"
