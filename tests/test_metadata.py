"""Tests for video id, title and thumbnail extraction."""

from conftest import player_page
from livewatch.youtube.metadata import (
    clean_title,
    extract_title,
    extract_video_id,
    thumbnail_url,
    watch_url,
)

CHANNEL_LIVE_URL = "https://www.youtube.com/@SkylifeRP/live"


def test_final_url_video_id_wins_over_embedded_ids():
    page = player_page('"videoId":"zzzzzzzzzzz"', '"isLive":true')
    url = "https://www.youtube.com/watch?v=abc12345678&feature=live"
    assert extract_video_id(page, url) == "abc12345678"


def test_og_url_then_canonical_link():
    head = (
        '<meta property="og:url" content="https://www.youtube.com/watch?v=ogogogogogo">'
        '<link rel="canonical" href="https://www.youtube.com/watch?v=canonicalid">'
    )
    page = player_page('"videoId":"zzzzzzzzzzz"', head=head)
    assert extract_video_id(page, CHANNEL_LIVE_URL) == "ogogogogogo"

    head = '<link rel="canonical" href="https://www.youtube.com/watch?v=canonicalid">'
    assert extract_video_id(player_page(head=head), CHANNEL_LIVE_URL) == "canonicalid"


def test_video_details_block():
    page = player_page('"videoId":"zzzzzzzzzzz"', '"videoDetails":{"videoId":"details0001","title":"x"}')
    assert extract_video_id(page, CHANNEL_LIVE_URL) == "details0001"


def test_proximity_prefers_id_near_live_marker():
    filler = "y" * 500
    page = player_page(
        '"videoId":"related0001"',
        f'"pad":"{filler}"',
        '"videoId":"livevideo01"',
        '"isLiveNow":true',
    )
    assert extract_video_id(page, CHANNEL_LIVE_URL, proximity_window=100) == "livevideo01"


def test_proximity_skips_replay_region():
    filler = "y" * 500
    page = player_page(
        '"videoId":"replayvid01"',
        '"isLiveNow":true',
        '"isReplay":true',
        f'"pad":"{filler}"',
        '"videoId":"livevideo01"',
        '"isLive":true',
    )
    assert extract_video_id(page, CHANNEL_LIVE_URL, proximity_window=100) == "livevideo01"


def test_first_video_id_is_last_resort():
    page = player_page('"videoId":"first000001"', '"videoId":"second00001"')
    assert extract_video_id(page, CHANNEL_LIVE_URL, proximity_window=50) == "first000001"


def test_no_video_id():
    assert extract_video_id("<html></html>", CHANNEL_LIVE_URL) is None


def test_structured_title_with_escapes():
    page = player_page('"videoDetails":{"videoId":"abc12345678","title":"Heists \\u0026 Chases \\ud83d\\udd34"}')
    assert extract_title(page, "SkylifeRP") == "Heists & Chases \U0001F534"


def test_simple_text_title():
    page = player_page('"title":{"simpleText":"Late night patrol"}')
    assert extract_title(page, "SkylifeRP") == "Late night patrol"


def test_meta_title_strips_site_suffix():
    page = '<html><head><meta property="og:title" content="City RP &amp; Chill - YouTube"></head></html>'
    assert extract_title(page, "SkylifeRP") == "City RP & Chill"


def test_bare_site_name_is_rejected():
    page = '<html><head><title>YouTube</title><meta name="title" content=" - YouTube"></head></html>'
    assert extract_title(page, "SkylifeRP") == "SkylifeRP is Live!"


def test_page_title_fallback():
    page = "<html><head><title>Opening night - YouTube</title></head></html>"
    assert extract_title(page, "SkylifeRP") == "Opening night"


def test_clean_title():
    assert clean_title("  Stream - YouTube ") == "Stream"
    assert clean_title("YouTube") is None
    assert clean_title("") is None
    assert clean_title(None) is None


def test_thumbnail_and_watch_url():
    assert thumbnail_url("abc12345678").endswith("/abc12345678/maxresdefault.jpg")
    assert watch_url("abc12345678") == "https://www.youtube.com/watch?v=abc12345678"
