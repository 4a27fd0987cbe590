"""Pytest fixtures for tests."""

import json
import logging
import random
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from kiianigen.models import AppConfig, DeviceConfig, DeviceGeometry, PixelMap

# Test keyboard: LEDs 1-87 sit under keys with scan codes 0x01-0x57,
# LEDs 88-119 form the base ring. The pixel grid is 6 rows by 22 columns.
KEYED_LED_COUNT = 87
BASE_LED_IDS = range(88, 120)
GRID_ROWS = 6
GRID_COLS = 22


def scan_code(led_id: int) -> str:
    return f"0x{led_id:02X}"


def make_device_document() -> dict:
    """A trimmed-down configurator export of the KType."""
    leds = [{"id": i, "scanCode": scan_code(i)} for i in range(1, KEYED_LED_COUNT + 1)]
    leds += [{"id": i, "scanCode": ""} for i in BASE_LED_IDS]
    matrix = [
        {
            "code": scan_code(i),
            "x": i,
            "y": 0,
            "layers": {"0": {"key": f"K{scan_code(i)}", "label": f"key {i}"}},
        }
        for i in range(1, KEYED_LED_COUNT + 1)
    ]
    return {
        "header": {"Name": "KType", "Layout": "Standard", "Author": "Input Club"},
        "defines": [{"name": "ledCount", "value": "119"}],
        "leds": leds,
        "matrix": matrix,
        "animations": {
            "existing_anim": {
                "settings": "framedelay:1, loop",
                "type": "animation",
                "frames": ["P[1](255,0,0)"],
            }
        },
    }


def make_pixel_map_document() -> dict:
    """A ``kll.json`` with a full rectangular grid."""
    pixel_ids = {}
    pixel_id = 1
    for row in range(GRID_ROWS):
        for col in range(GRID_COLS):
            pixel_ids[str(pixel_id)] = {"Row": row, "Col": col}
            pixel_id += 1
    return {"PixelIds": pixel_ids}


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Remove handlers added by the CLI's logging setup."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def device_document():
    """Device config document as parsed JSON."""
    return make_device_document()


@pytest.fixture
def device_config(device_document):
    """DeviceConfig model of the test keyboard."""
    return DeviceConfig.model_validate(device_document)


@pytest.fixture
def pixel_map():
    """PixelMap model of the test grid."""
    return PixelMap.model_validate(make_pixel_map_document())


@pytest.fixture
def geometry(device_config, pixel_map):
    """Geometry of the test keyboard."""
    return DeviceGeometry.from_documents(device_config, pixel_map)


@pytest.fixture
def rng():
    """Seeded random source for the random generators."""
    return random.Random(1234)


@pytest.fixture
def source_dir(temp_dir, device_document):
    """Configurator export directory with both documents."""
    source = temp_dir / "KType-Standard"
    source.mkdir()
    (source / "KType-Standard.json").write_text(json.dumps(device_document, indent=4))
    (source / "kll.json").write_text(json.dumps(make_pixel_map_document()))
    return source


@pytest.fixture
def app_config(temp_dir, source_dir):
    """App config pointing at the temp source and output directories."""
    return AppConfig(
        source_dir=source_dir,
        output_dir=temp_dir / "json_out",
        conf_file=temp_dir / "kiianiconf.json",
        copy_to_clipboard=False,
    )
