"""Binding animations to trigger keys."""

import logging
from collections.abc import Sequence

from kiianigen.models.config import AppConfig
from kiianigen.models.device import DeviceConfig, MatrixKey

logger = logging.getLogger(__name__)

KEY_MAP_HEADING = "Animations are mapped to the following keys:"
# Action that keeps a trigger key from typing on its layer
DISABLED_KEY_ACTION = {"key": "#:None", "label": "NONE"}


def trigger_actions(animation_names: Sequence[str], active: str) -> list[dict[str, str]]:
    """Start ``active`` and stop every other animation."""
    actions = []
    for name in animation_names:
        verb = "start" if name == active else "stop"
        actions.append({
            "type": "animation",
            "label": f"{verb} '{name}' animation",
            "action": f"A[{name}]({verb})",
        })
    return actions


class TriggerService:
    """
    Binds animations to keys on the trigger layer.

    On the trigger layer each bound key starts its animation and stops all
    the others. The key's own action on that layer is disabled so triggering
    an animation does not type into the foreground application.

    The service is stateless apart from the config it reads the trigger
    layer and scan codes from; it mutates the DeviceConfig passed to it.
    """

    def __init__(self, config: AppConfig):
        """
        Initialize the TriggerService.

        Args:
            config: Application configuration
        """
        self.config = config

    def find_trigger_keys(self, device_config: DeviceConfig) -> list[MatrixKey | None]:
        """Matrix keys for the trigger scan codes, in scan code order.

        Scan codes with no matrix key give None.
        """
        by_code = {key.code: key for key in device_config.matrix if key.code}
        return [by_code.get(code) for code in self.config.trigger_scan_codes]

    def bind(self, device_config: DeviceConfig, animation_names: Sequence[str]) -> list[str]:
        """
        Bind each animation to the next free trigger key.

        Args:
            device_config: Device config to update in place
            animation_names: Animations in config order

        Returns:
            The key map: a heading followed by ``"<key>: <animation>"`` lines
        """
        layer = self.config.trigger_layer
        keys = self.find_trigger_keys(device_config)
        key_map = [KEY_MAP_HEADING]

        for index, name in enumerate(animation_names):
            key = keys[index] if index < len(keys) else None
            if key is None:
                logger.warning(f"No trigger key left for animation '{name}', leaving it unbound")
                continue

            # Assign rather than mutate so the fields count as set when dumped
            key.layers = {**key.layers, layer: dict(DISABLED_KEY_ACTION)}
            key.triggers = {layer: trigger_actions(animation_names, name)}
            key_map.append(f"{key.layer_key('0')}: {name}")
            logger.debug(f"Bound animation '{name}' to key {key.code}")

        logger.info(f"Bound {len(key_map) - 1} of {len(animation_names)} animations to triggers")
        return key_map
