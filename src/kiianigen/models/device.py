"""Configurator export documents.

Two files come out of the kiibohd configurator export directory:

- ``KType-Standard.json``: the device config (LEDs, key matrix, animations,
  header). Read for its LED list and written back with new animations,
  triggers and header values.
- ``kll.json``: pixel geometry (``PixelIds`` with ``Row``/``Col``).

Both models allow extra keys so everything the configurator wrote survives
a load/save round trip.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


def normalize_scan_code(value: Any) -> str | None:
    """Normalize a scan code to the configurator's ``0x..`` string form.

    Empty values mean the LED has no key (base/underglow LEDs).
    """
    if value is None or value == "":
        return None
    if isinstance(value, int):
        return f"0x{value:02X}"
    return str(value)


class Led(BaseModel):
    """A physical LED."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: int = Field(description="Pixel identifier")
    scan_code: str | None = Field(
        default=None, alias="scanCode", description="Scan code of the key above the LED"
    )

    @field_validator("scan_code", mode="before")
    @classmethod
    def validate_scan_code(cls, v: Any) -> str | None:
        """Accept ints and empty strings."""
        return normalize_scan_code(v)

    @field_serializer("scan_code")
    def serialize_scan_code(self, v: str | None) -> str:
        """Blank LEDs are written back with an empty scan code."""
        return v or ""

    @property
    def is_keyed(self) -> bool:
        """True when the LED sits under a key."""
        return self.scan_code is not None


class MatrixKey(BaseModel):
    """A key in the layout matrix with its per-layer actions."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    code: str | None = Field(default=None, description="Scan code")
    layers: dict[str, Any] = Field(default_factory=dict, description="Actions per layer")
    triggers: dict[str, list[dict[str, str]]] | None = Field(
        default=None, description="Trigger actions per layer"
    )

    @field_validator("code", mode="before")
    @classmethod
    def validate_code(cls, v: Any) -> str | None:
        """Accept ints and empty strings."""
        return normalize_scan_code(v)

    def layer_key(self, layer: str) -> str:
        """Key label for a layer, or an empty string."""
        action = self.layers.get(layer)
        if isinstance(action, dict):
            return str(action.get("key", ""))
        return ""


class DeviceConfig(BaseModel):
    """The ``KType-Standard.json`` device configuration."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    header: dict[str, Any] = Field(default_factory=dict, description="Layout metadata")
    leds: list[Led] = Field(default_factory=list, description="Physical LEDs")
    matrix: list[MatrixKey] = Field(default_factory=list, description="Key matrix")
    animations: dict[str, Any] = Field(default_factory=dict, description="Animations by name")

    def to_json(self, indent: int = 4) -> str:
        """Serialize without adding keys the source did not have."""
        return self.model_dump_json(indent=indent, by_alias=True, exclude_unset=True)


class PixelEntry(BaseModel):
    """One entry of ``PixelIds``."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    row: int = Field(default=0, alias="Row")
    col: int = Field(default=0, alias="Col")


class PixelMap(BaseModel):
    """The ``kll.json`` pixel geometry."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    pixel_ids: list[PixelEntry] = Field(default_factory=list, alias="PixelIds")

    @field_validator("pixel_ids", mode="before")
    @classmethod
    def accept_mapping(cls, v: Any) -> Any:
        """The configurator writes ``PixelIds`` keyed by id; only values matter."""
        if isinstance(v, dict):
            return list(v.values())
        return v

    @property
    def max_row(self) -> int:
        """Largest row index (0 when empty)."""
        return max([0] + [p.row for p in self.pixel_ids])

    @property
    def max_col(self) -> int:
        """Largest column index (0 when empty)."""
        return max([0] + [p.col for p in self.pixel_ids])
