"""Application configuration model."""

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field

from midipump.utils import PydanticPersistence

DEFAULT_CONFIG_DIR = Path.home() / ".midipump"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"


class AppConfig(BaseModel):
    """Settings for the midipump command line tool."""

    # Ports (name or index; None = first port)
    default_input: Optional[Union[int, str]] = Field(
        default=None, description="Input port name or index used by 'monitor'"
    )
    default_output: Optional[Union[int, str]] = Field(
        default=None, description="Output port name or index used by 'send'"
    )

    backend: Optional[str] = Field(
        default=None,
        description="mido backend module, e.g. 'mido.backends.rtmidi' (None = mido default)",
    )

    poll_interval: float = Field(
        default=0.005, gt=0, description="Seconds to sleep between pumps while monitoring"
    )
    filter_clock: bool = Field(
        default=True, description="Hide clock and active sense messages while monitoring"
    )
    default_channel: int = Field(
        default=0, ge=0, le=15, description="MIDI channel used by 'send' when none is given"
    )

    @classmethod
    def load_or_default(cls, path: Optional[Path] = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.midipump/config.json

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to file."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
