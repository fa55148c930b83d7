"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront_cli.exceptions import UnknownServerKindError

# Known catalog kinds and their display metadata
SERVER_KINDS = {
    "music": {"name": "Music", "item": "Song", "color": "cyan"},
    "video": {"name": "Video", "item": "Movie", "color": "magenta"},
}


def get_kind_info(kind: str) -> dict[str, str]:
    """Gets display information for a server kind from the central map."""
    return SERVER_KINDS.get(
        kind, {"name": kind.title(), "item": "Item", "color": "white"}
    )


class StoreConfig(BaseModel):
    """A validated configuration model for the storefront."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # Download speeds of the sample servers, in MB/s
    music_speed_mbps: float = 5.0
    video_speed_mbps: float = 20.0

    # Catalog used by `checkout` and `catalog` when --kind is omitted
    default_kind: str = "music"

    # Internal fields not loaded from INI file
    config_path: str = Field("", repr=False)

    @field_validator("music_speed_mbps", "video_speed_mbps")
    @classmethod
    def validate_speed(cls, v: float) -> float:
        """Download speeds may be zero (offline) but never negative."""
        if v < 0:
            raise ValueError("Download speed cannot be negative.")
        return v

    @field_validator("default_kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        """Ensures the default kind names a registered catalog."""
        v = v.lower()
        if v not in SERVER_KINDS:
            raise ValueError(
                f"Unknown catalog kind '{v}'. Choose one of: "
                f"{', '.join(SERVER_KINDS)}."
            )
        return v

    def speed_for(self, kind: str) -> float:
        """Returns the configured download speed for a server kind."""
        if kind not in SERVER_KINDS:
            raise UnknownServerKindError(
                f"No catalog registered for kind '{kind}'. Use 'music' or 'video'."
            )
        return getattr(self, f"{kind}_speed_mbps")

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {"config_path"}
        return {key for key in cls.model_fields if key not in internal_fields}
