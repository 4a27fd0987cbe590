"""Read-only device geometry handed to every generator.

The geometry combines what the configurator export tells us (grid extent,
which LED sits under which key) with the fixed zone layout of the KType
keyboard: key groups, the top interpolation anchors and the base ring.

Base ring, seen from above (front at the bottom)::

              105 106 107 108 109 110 111 112 113 114 115
          104                                             116
      103                                                     117
      102                                                     118
      101                                                     119
          100                                             88
              99  98  97  96  95  94  93  92  91  90  89
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from .device import DeviceConfig, PixelMap

logger = logging.getLogger(__name__)

# A key is a scan code string ("0x25") or a literal LED id
Key = Union[str, int]
# A key group entry is a single key or an inclusive [low, high] range
KeyEntry = Union[Key, tuple[Key, Key]]


class KeyGroup(BaseModel):
    """A named zone of the keyboard."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Group name")
    entries: tuple[KeyEntry, ...] = Field(description="Keys and inclusive key ranges")


KTYPE_KEY_GROUPS: tuple[KeyGroup, ...] = (
    KeyGroup(name="FUNC_KEY_GROUP", entries=(("0x01", "0x10"),)),
    KeyGroup(name="LEFT_GROUP", entries=("0x11", "0x24", "0x36", "0x45", ("0x55", "0x57"))),
    KeyGroup(
        name="LETTERS_GROUP",
        entries=(("0x12", "0x1D"), ("0x25", "0x30"), ("0x37", "0x41"), ("0x47", "0x50")),
    ),
    KeyGroup(name="RIGHT_GROUP", entries=("0x1F", "0x31", "0x43", "0x52", ("0x59", "0x5C"))),
    KeyGroup(name="SPACE_GROUP", entries=("0x58",)),
    KeyGroup(name="NAV_GROUP", entries=(("0x21", "0x23"), ("0x33", "0x35"))),
    KeyGroup(name="ARROW_GROUP", entries=("0x54", ("0x5D", "0x5F"))),
    KeyGroup(name="BASE_GROUP", entries=((88, 119),)),
)

# Tracer paths around the base ring, from the front center to the back center
KTYPE_LEFT_BASE_PATH: tuple[int, ...] = (
    94, 95, 96, 97, 98, 99, 100, 101, 102, 103, 104, 105, 106, 107, 108, 109, 110,
)
KTYPE_RIGHT_BASE_PATH: tuple[int, ...] = (
    94, 93, 92, 91, 90, 89, 88, 119, 118, 117, 116, 115, 114, 113, 112, 111, 110,
)

KTYPE_TOP_FIRST_ID = 1
KTYPE_TOP_LAST_ID = 87
KTYPE_BASE_FIRST_ID = 88
KTYPE_BASE_LAST_ID = 119


class DeviceGeometry(BaseModel):
    """Immutable view of the keyboard used by the generators."""

    model_config = ConfigDict(frozen=True)

    max_row: int = Field(default=0, ge=0, description="Largest pixel row index")
    max_col: int = Field(default=0, ge=0, description="Largest pixel column index")
    led_ids_by_scan_code: Mapping[str, int] = Field(
        default_factory=dict, description="LED id under each scan code"
    )
    keyed_led_ids: tuple[int, ...] = Field(default=(), description="LEDs under keys")
    blank_led_ids: tuple[int, ...] = Field(default=(), description="LEDs without keys")
    key_groups: tuple[KeyGroup, ...] = Field(default=KTYPE_KEY_GROUPS)
    top_first_id: int = Field(default=KTYPE_TOP_FIRST_ID, description="First key LED")
    top_last_id: int = Field(default=KTYPE_TOP_LAST_ID, description="Last key LED")
    base_first_id: int = Field(default=KTYPE_BASE_FIRST_ID, description="First base ring LED")
    base_last_id: int = Field(default=KTYPE_BASE_LAST_ID, description="Last base ring LED")
    left_base_path: tuple[int, ...] = Field(default=KTYPE_LEFT_BASE_PATH)
    right_base_path: tuple[int, ...] = Field(default=KTYPE_RIGHT_BASE_PATH)

    @property
    def led_count(self) -> int:
        """Number of LEDs; falls back to the KType total when no LEDs are known."""
        total = len(self.keyed_led_ids) + len(self.blank_led_ids)
        return total if total else self.base_last_id

    @property
    def base_ring(self) -> list[int]:
        """Base ring LED ids in ascending order."""
        return list(range(self.base_first_id, self.base_last_id + 1))

    def resolve_key(self, key: Key) -> int | None:
        """Map a scan code to its LED id; integers are already LED ids."""
        if isinstance(key, int):
            return key
        return self.led_ids_by_scan_code.get(key)

    def group_led_ids(self, group: KeyGroup) -> list[int]:
        """Expand a key group into LED ids, in entry order.

        Keys whose scan code has no LED are skipped.
        """
        ids: list[int] = []
        for entry in group.entries:
            if isinstance(entry, Sequence) and not isinstance(entry, str):
                low = self.resolve_key(entry[0])
                high = self.resolve_key(entry[1])
                if low is None or high is None:
                    logger.debug(f"Skipping unresolved range {entry} in {group.name}")
                    continue
                ids.extend(range(low, high + 1))
            else:
                led_id = self.resolve_key(entry)
                if led_id is None:
                    logger.debug(f"Skipping unresolved key {entry} in {group.name}")
                    continue
                ids.append(led_id)
        return ids

    @classmethod
    def from_documents(
        cls, device_config: DeviceConfig, pixel_map: PixelMap | None = None
    ) -> "DeviceGeometry":
        """Derive the geometry from the two configurator documents."""
        if pixel_map is None:
            pixel_map = PixelMap()

        by_scan_code: dict[str, int] = {}
        keyed: list[int] = []
        blank: list[int] = []
        for led in device_config.leds:
            if led.is_keyed:
                by_scan_code[led.scan_code] = led.id
                keyed.append(led.id)
            else:
                blank.append(led.id)

        geometry = cls(
            max_row=pixel_map.max_row,
            max_col=pixel_map.max_col,
            led_ids_by_scan_code=by_scan_code,
            keyed_led_ids=tuple(keyed),
            blank_led_ids=tuple(blank),
        )
        logger.info(
            f"Device geometry: {geometry.max_row + 1} rows x {geometry.max_col + 1} columns, "
            f"{len(keyed)} keyed and {len(blank)} blank LEDs"
        )
        return geometry
