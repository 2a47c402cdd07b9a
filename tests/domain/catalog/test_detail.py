"""
Tests for song detail and table-row assembly.
"""

import pytest

from song_browser.domain.catalog.detail import build_song_detail, summarize_song
from song_browser.domain.materials.resolver import MELODY_TAB, SONG_SHEET


class TestBuildSongDetail:
    """Test the detail view for a single song."""

    def test_header_and_classified_terms(self, craig_david, materials_config):
        detail = build_song_detail(craig_david, materials_config)

        assert detail.title == "7 Days"
        assert detail.artist == "Craig David"
        assert detail.genres == ["Pop"]

    def test_season_and_era_are_appended_to_tags(self, craig_david, materials_config):
        """Test the detail tags end with the song's season and era."""
        detail = build_song_detail(craig_david, materials_config)
        assert detail.tags == ["British", "Summer", "2000s"]

    def test_materials_are_resolved(self, craig_david, materials_config):
        detail = build_song_detail(craig_david, materials_config)

        assert detail.has_materials
        sheet, tab = detail.materials
        assert sheet.kind == SONG_SHEET
        assert sheet.label == "Song Sheet in Key Em"
        assert tab.kind == MELODY_TAB
        assert tab.label == "Melody TAB in Key Em"
        assert tab.url == (
            "http://localhost:3001/materials/"
            "7%20Days%20-%20Craig%20David%20(2000)%20Key%20Em/7%20Days%20Key%20Em%20TAB.pdf"
        )

    def test_no_materials(self, materials_config):
        detail = build_song_detail({"title": "Bare"}, materials_config)
        assert not detail.has_materials
        assert detail.materials == []

    def test_badges_and_achievements(self, craig_david, materials_config):
        song = dict(craig_david, popularityTier="High", top10=True)
        detail = build_song_detail(song, materials_config)

        assert detail.badges == ["High Popularity", "Top 10", "Peak #1"]
        assert detail.chart_achievements == ["Top 10 Hit", "Peak Position: #1"]

    def test_top40_badge_only_without_top10(self, materials_config):
        detail = build_song_detail({"top40": True}, materials_config)
        assert detail.badges == ["Top 40"]
        assert detail.chart_achievements == ["Top 40 Hit"]

    def test_links(self, materials_config):
        song = {
            "discogsUrl": "https://www.discogs.com/release/1",
            "spotifyTrackId": "abc123",
        }
        detail = build_song_detail(song, materials_config)

        assert detail.links["Discogs"] == "https://www.discogs.com/release/1"
        assert detail.links["Spotify Track"] == "https://open.spotify.com/track/abc123"
        assert detail.links["YouTube"] == ""

    def test_info_and_overview(self, craig_david, materials_config):
        song = dict(
            craig_david,
            releaseDate="2000-07-24",
            releaseDateSource="Discogs",
            souKeys=["Em", "Am"],
            bpm=83.0,
        )
        detail = build_song_detail(song, materials_config)

        assert detail.info["Year"] == "2000"
        assert detail.info["Release Date"] == "2000-07-24 (Discogs)"
        assert detail.info["Written by"] == "Craig David, Mark Hill"
        assert detail.overview["Original Key"] == "Em"
        assert detail.overview["SOU Keys"] == "Em, Am"
        assert detail.overview["BPM"] == "83"
        assert detail.overview["SOU Level"] == "2"
        assert "Strum Style" not in detail.overview

    def test_popularity_bars(self, materials_config):
        song = {"lastfmPlays": 50_000, "lastfmListeners": 80_000, "spotifyPopularity": 64}
        detail = build_song_detail(song, materials_config)

        plays, listeners, spotify = detail.popularity
        assert plays.percent == pytest.approx(50.0)
        assert listeners.percent == 100.0
        assert spotify.value == 64
        assert detail.has_popularity

    def test_unknown_popularity_tier_is_hidden(self, materials_config):
        detail = build_song_detail({"popularityTier": "Unknown"}, materials_config)
        assert detail.popularity_tier == ""

    def test_no_popularity_data(self, materials_config):
        detail = build_song_detail({"title": "Quiet"}, materials_config)
        assert detail.popularity == []
        assert not detail.has_popularity

    def test_chart_flags_count_as_popularity(self, materials_config):
        assert build_song_detail({"top40": True}, materials_config).has_popularity

    def test_malformed_record(self, sample_songs, materials_config):
        detail = build_song_detail(sample_songs[-1], materials_config)
        assert detail.artist == ""
        assert detail.genres == []
        assert detail.tags == []


class TestSummarizeSong:
    """Test flattening songs into table rows."""

    def test_columns(self, craig_david):
        row = summarize_song(craig_david)

        assert row["id"] == "1"
        assert row["genre"] == "Pop, British"
        assert row["key"] == "Em"
        assert row["level"] == "2"
        assert row["song_sheet_status"] == "Yes"
        assert row["tab_status"] == "Draft"

    def test_array_genre_is_joined(self, sample_songs):
        assert summarize_song(sample_songs[1])["genre"] == "Rock, Pop"

    def test_malformed_record(self, sample_songs):
        row = summarize_song(sample_songs[-1])
        assert row["id"] == "five"
        assert row["artist"] == ""
        assert row["key"] == ""
        assert row["genre"] == ""
        assert row["song_sheet_status"] == ""
