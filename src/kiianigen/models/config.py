"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_serializer

from kiianigen.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".kiianigen" / "config.json"

# Keys that start/stop animations on the trigger layer. On qwerty keyboards:
#   qwertyuiop[]\
#   asdfghjkl;'
#   zxcvbnm,./
DEFAULT_TRIGGER_SCAN_CODES: list[str] = (
    [f"0x{code:02X}" for code in range(0x25, 0x31)]
    + [f"0x{code:02X}" for code in range(0x37, 0x42)]
    + [f"0x{code:02X}" for code in range(0x47, 0x50)]
)


class AppConfig(BaseModel):
    """Application configuration and settings."""

    # Paths
    source_dir: Path = Field(
        default=Path("../KType-Standard"),
        description="Configurator export directory with KType-Standard.json and kll.json",
    )
    output_dir: Path = Field(
        default=Path("./json_out"), description="Directory for generated config files"
    )
    conf_file: Path = Field(
        default=Path("./kiianiconf.json"), description="Batch generation file for 'conf' mode"
    )

    # Input file names inside source_dir
    device_config_name: str = Field(
        default="KType-Standard.json", description="Device config file name"
    )
    pixel_map_name: str = Field(default="kll.json", description="Pixel geometry file name")

    # Output
    output_prefix: str = Field(default="KType", description="Generated file name prefix")
    author: str = Field(default="kiianigen", description="Author written into the header")
    copy_to_clipboard: bool = Field(
        default=True, description="Copy the generated config to the clipboard (macOS)"
    )

    # Trigger bindings
    trigger_layer: str = Field(default="1", description="Layer holding the animation triggers")
    trigger_scan_codes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TRIGGER_SCAN_CODES),
        description="Scan codes of the keys bound to animations, in order",
    )

    @field_serializer("source_dir", "output_dir", "conf_file")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string."""
        return str(path)

    @property
    def device_config_path(self) -> Path:
        """Full path of the device config."""
        return self.source_dir / self.device_config_name

    @property
    def pixel_map_path(self) -> Path:
        """Full path of the pixel geometry."""
        return self.source_dir / self.pixel_map_name

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.kiianigen/config.json).

        Raises:
            ValidationError: If the file exists but has invalid content
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH
        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH
        PydanticPersistence.save_json(self, path)
