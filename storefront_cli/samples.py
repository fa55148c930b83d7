"""
Sample catalogs used by the command-line demo.

Everything here is built fresh on each call so no state outlives the command
that asked for it.
"""

from storefront_cli.core.server import ContentServer, MusicServer, VideoServer
from storefront_cli.exceptions import UnknownServerKindError
from storefront_cli.models.catalog import Movie, Song
from storefront_cli.models.config import StoreConfig

# (kind, wish list) pairs run in order by `storefront-cli demo`
DEMO_RUNS = (
    ("music", ("Aurora", "Quasar", "Nope")),
    ("video", ("Solaris Rising", "Starlight Express")),
)


def sample_songs() -> list[Song]:
    return [
        Song("Aurora", 5.0, 0.99),
        Song("Nebula", 7.5, 1.29),
        Song("Quasar", 6.2, 1.09),
    ]


def sample_movies() -> list[Movie]:
    return [
        Movie("Solaris Rising", 900, 12.99),
        Movie("Event Horizon Redux", 1500, 14.99),
        Movie("Starlight Express", 1100, 9.99),
    ]


def build_server(kind: str, speed_mbps: float) -> ContentServer:
    """
    Builds the sample server for a catalog kind.

    Raises:
        UnknownServerKindError: If `kind` is neither 'music' nor 'video'.
    """
    kind = kind.strip().lower()
    if kind == "music":
        return MusicServer(sample_songs(), speed_mbps)
    if kind == "video":
        return VideoServer(sample_movies(), speed_mbps)
    raise UnknownServerKindError(
        f"No catalog registered for kind '{kind}'. Use 'music' or 'video'."
    )


def build_servers(config: StoreConfig) -> dict[str, ContentServer]:
    """Builds every sample server with the speeds from `config`."""
    return {
        kind: build_server(kind, config.speed_for(kind)) for kind in ("music", "video")
    }
