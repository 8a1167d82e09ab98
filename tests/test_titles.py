"""Tests for release-title display helpers."""

from streamscout.titles import clean_title_for_home, language_badge, split_title, truncate_subtitle


def test_clean_title_for_home():
    title = "Following (2024) AMZN-WEB-DL Dual Audio {Hindi-Korean} 480p [370MB]"
    assert clean_title_for_home(title) == "Following"
    assert clean_title_for_home("(2024) Untitled") == "(2024) Untitled"
    assert clean_title_for_home("") == ""


def test_split_title_at_indicator():
    title = "Panchayat (2020) Season 1 Hindi Complete Prime Video WEB Series 480p [90MB]"
    assert split_title(title) == (
        "Panchayat (2020) Season 1",
        "Hindi Complete Prime Video WEB Series 480p [90MB]",
    )


def test_split_title_at_season_marker():
    assert split_title("Show Name S02E05 x265 HEVC") == ("Show Name S02E05", "x265 HEVC")


def test_split_title_without_markers():
    assert split_title("  Plain Title  ") == ("Plain Title", "")
    assert split_title("") == ("", "")


def test_indicator_at_start_does_not_split():
    assert split_title("Hindi Movie") == ("Hindi Movie", "")


def test_truncate_subtitle():
    assert truncate_subtitle("short") == "short"
    assert truncate_subtitle("x" * 100, max_length=10) == "x" * 10 + "..."


def test_language_badge():
    assert language_badge("Movie 2024 Hindi 1080p") == "Hindi"
    assert language_badge("Movie [Hindi + English] 720p") == "Multi Audio"
    assert language_badge("Movie Malayalam") == "Malayalam"
    assert language_badge("Movie 2024 1080p") is None
    assert language_badge("") is None
