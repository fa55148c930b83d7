"""Shared fixtures for the storefront tests."""

import pytest

from storefront_cli.core.server import MusicServer, VideoServer
from storefront_cli.models.catalog import Movie, Song


@pytest.fixture
def songs():
    return [
        Song("Aurora", 5.0, 0.99),
        Song("Nebula", 7.5, 1.29),
        Song("Quasar", 6.2, 1.09),
    ]


@pytest.fixture
def movies():
    return [
        Movie("SolarisRising", 900, 12.99),
        Movie("EventHorizonRedux", 1500, 14.99),
        Movie("StarlightExpress", 1100, 9.99),
    ]


@pytest.fixture
def music_server(songs):
    return MusicServer(songs, speed_mbps=5)


@pytest.fixture
def video_server(movies):
    return VideoServer(movies, speed_mbps=20)


@pytest.fixture
def config_file(tmp_path):
    """Path to a config file that does not exist yet."""
    return tmp_path / "storefront-cli" / "config.ini"
