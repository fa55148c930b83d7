"""
Unit tests for content servers and receipt computation.
"""

import math

import pytest

from storefront_cli.core.server import (
    ContentServer,
    ContentServing,
    MusicServer,
    VideoServer,
    round_half_up,
)
from storefront_cli.exceptions import (
    ConfigurationError,
    DuplicateTitleError,
    InvalidItemError,
)
from storefront_cli.models.catalog import Movie, Song


class TestScenarios:
    def test_music_checkout_with_missing_title(self, music_server):
        receipt = music_server.serve(["Aurora", "Quasar", "Nope"])

        assert receipt.item_titles == ["Aurora", "Quasar"]
        assert receipt.missing == ("Nope",)
        assert receipt.total_price == 2.08
        assert receipt.estimated_seconds == pytest.approx(2.24)

    def test_video_checkout_all_found(self, video_server):
        receipt = video_server.serve(["SolarisRising", "StarlightExpress"])

        assert receipt.item_titles == ["SolarisRising", "StarlightExpress"]
        assert receipt.missing == ()
        assert receipt.total_price == 22.98
        assert receipt.estimated_seconds == pytest.approx(100.0)

    def test_empty_wish_list(self, music_server):
        receipt = music_server.serve([])

        assert receipt.items == ()
        assert receipt.missing == ()
        assert receipt.total_price == 0.0
        assert receipt.estimated_seconds == 0.0

    def test_all_missing(self, video_server):
        receipt = video_server.serve(["Unknown"])

        assert receipt.items == ()
        assert receipt.missing == ("Unknown",)
        assert receipt.total_price == 0.0
        assert receipt.estimated_seconds == 0.0


class TestResolution:
    @pytest.mark.parametrize(
        "wish_list",
        [
            [],
            ["Nope"],
            ["Quasar", "Aurora"],
            ["Aurora", "Nope", "Nebula", "Other", "Quasar"],
            ["Aurora", "Aurora", "Nope", "Nope"],
        ],
    )
    def test_every_title_accounted_for(self, music_server, wish_list):
        receipt = music_server.serve(wish_list)
        assert len(receipt.items) + len(receipt.missing) == len(wish_list)

    def test_missing_keeps_wish_list_order(self, music_server):
        receipt = music_server.serve(["Zeta", "Aurora", "Alpha", "Mid"])
        assert receipt.missing == ("Zeta", "Alpha", "Mid")

    def test_items_follow_wish_list_not_catalog_order(self, music_server):
        receipt = music_server.serve(["Quasar", "Aurora", "Nebula"])
        assert receipt.item_titles == ["Quasar", "Aurora", "Nebula"]

    def test_repeated_title_is_charged_each_time(self, music_server):
        receipt = music_server.serve(["Aurora", "Aurora"])
        assert receipt.item_titles == ["Aurora", "Aurora"]
        assert receipt.total_price == 1.98
        assert receipt.estimated_seconds == pytest.approx(2.0)

    def test_items_are_catalog_objects(self, music_server, songs):
        receipt = music_server.serve(["Nebula"])
        assert receipt.items[0] is songs[1]

    def test_total_price_is_rounded_sum(self, music_server):
        receipt = music_server.serve(["Aurora", "Nebula", "Quasar"])
        assert abs(receipt.total_price - round(0.99 + 1.29 + 1.09, 2)) < 1e-9

    def test_serve_is_idempotent(self, music_server):
        wish_list = ["Aurora", "Nope", "Quasar"]
        assert music_server.serve(wish_list) == music_server.serve(wish_list)

    def test_accepts_any_sequence(self, music_server):
        receipt = music_server.serve(("Aurora",))
        assert receipt.item_titles == ["Aurora"]


class TestDownloadEstimate:
    def test_zero_speed_is_infinite(self, songs):
        server = MusicServer(songs, speed_mbps=0)
        receipt = server.serve(["Aurora"])
        assert math.isinf(receipt.estimated_seconds)
        assert receipt.estimated_seconds > 0

    def test_zero_speed_with_nothing_found_is_still_infinite(self, songs):
        server = MusicServer(songs, speed_mbps=0)
        assert math.isinf(server.serve([]).estimated_seconds)
        assert math.isinf(server.serve(["Nope"]).estimated_seconds)

    def test_zero_speed_still_prices_items(self, songs):
        server = MusicServer(songs, speed_mbps=0)
        assert server.serve(["Aurora"]).total_price == 0.99

    def test_minutes_derived_from_seconds(self, video_server):
        receipt = video_server.serve(["EventHorizonRedux"])
        assert receipt.estimated_seconds == pytest.approx(75.0)
        assert receipt.estimated_minutes == pytest.approx(1.25)
        assert receipt.total_size_mb == 1500.0


class TestRounding:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.0, 0.0),
            (2.08, 2.08),
            (0.125, 0.13),
            (0.625, 0.63),
            (1.005, 1.0),
            (0.004, 0.0),
            (-0.125, -0.13),
            (0.004999999999999999, 0.0),
            (45035996273704.97, 45035996273704.97),
        ],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_ties_round_up_not_to_even(self):
        server = MusicServer(
            [Song("Half", 1.0, 0.5), Song("Eighth", 1.0, 0.125)], speed_mbps=1
        )
        assert server.serve(["Eighth"]).total_price == 0.13
        assert server.serve(["Half", "Eighth"]).total_price == 0.63


class TestConstruction:
    def test_negative_speed_rejected(self, songs):
        with pytest.raises(ConfigurationError):
            MusicServer(songs, speed_mbps=-1)

    def test_duplicate_titles_rejected(self):
        with pytest.raises(DuplicateTitleError):
            MusicServer([Song("Aurora", 5.0, 0.99), Song("Aurora", 5.0, 0.99)], 5)

    def test_server_only_accepts_its_item_kind(self, movies):
        with pytest.raises(InvalidItemError, match="MusicServer only serves Song"):
            MusicServer(movies, speed_mbps=5)

    def test_generic_server_accepts_mixed_content(self):
        server = ContentServer(
            [Song("Aurora", 5.0, 0.99), Movie("Solaris Rising", 900, 12.99)], 10
        )
        receipt = server.serve(["Solaris Rising", "Aurora"])
        assert receipt.total_price == 13.98

    def test_server_owns_a_copy_of_its_catalog(self, songs):
        server = MusicServer(songs, speed_mbps=5)
        songs.clear()
        assert len(server.catalog) == 3

    def test_speed_stored_as_float(self, songs):
        assert MusicServer(songs, 5).speed_mbps == 5.0

    def test_servers_satisfy_protocol(self, music_server, video_server):
        assert isinstance(music_server, ContentServing)
        assert isinstance(video_server, ContentServing)

    def test_kinds(self):
        assert MusicServer.kind == "music"
        assert VideoServer.kind == "video"
