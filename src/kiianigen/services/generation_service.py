"""Service that turns a generator request into a new device config file."""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kiianigen.animation.interpolation import RandomSource
from kiianigen.animation.registry import GeneratorRegistry, get_registry
from kiianigen.exceptions import (
    ConfigFileInvalidError,
    ConfigFileNotFoundError,
    ErrorCollector,
    ErrorContext,
    UnknownGeneratorError,
    collect_errors,
    wrap_pydantic_error,
)
from kiianigen.models.animation import Animation
from kiianigen.models.conf import GenerationConf, sanitize_animation_name
from kiianigen.models.config import AppConfig
from kiianigen.models.device import DeviceConfig, PixelMap
from kiianigen.models.geometry import DeviceGeometry
from kiianigen.utils import PydanticPersistence, copy_file_to_clipboard

from .trigger_service import TriggerService

logger = logging.getLogger(__name__)

ALL_TARGET = "all"
CONF_TARGET = "conf"


class GenerationResult(BaseModel):
    """Outcome of one generation run."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    target: str = Field(description="Generator name, 'all' or 'conf'")
    output_path: Path = Field(description="Written device config")
    animation_names: list[str] = Field(default_factory=list, description="Animations written")
    key_map: list[str] = Field(default_factory=list, description="Trigger key map lines")
    errors: list[str] = Field(default_factory=list, description="Per-animation failures")
    copied_to_clipboard: bool = Field(default=False)

    @property
    def has_errors(self) -> bool:
        """True when some animations of a conf run failed."""
        return bool(self.errors)


class GenerationService:
    """
    Generates animations and writes them into a copy of the device config.

    This service is responsible for:
    - Loading the configurator export (device config and pixel map)
    - Running one generator, every generator, or the batch conf file
    - Merging the animations and binding them to trigger keys
    - Writing the timestamped output file

    The configurator export is never modified; every run writes a new file
    to the output directory.
    """

    def __init__(
        self,
        config: AppConfig,
        registry: Optional[GeneratorRegistry] = None,
        rng: Optional[RandomSource] = None,
    ):
        """
        Initialize the GenerationService.

        Args:
            config: Application configuration
            registry: Generator registry (defaults to the built-in one)
            rng: Random source for the random generators
        """
        self.config = config
        self.registry = registry if registry is not None else get_registry()
        self.rng = rng
        self.triggers = TriggerService(config)

    # =================================================================
    # Inputs
    # =================================================================

    def load_device_config(self) -> DeviceConfig:
        """
        Load the device config from the source directory.

        Raises:
            ConfigFileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is not valid JSON
            ConfigValidationError: If the file doesn't look like a device config
        """
        path = self.config.device_config_path
        try:
            return PydanticPersistence.load_json(path, DeviceConfig)
        except FileNotFoundError as e:
            raise ConfigFileNotFoundError(str(path), "Device config") from e
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e
        except ValueError as e:
            raise ConfigFileInvalidError(str(path), str(e)) from e

    def load_pixel_map(self) -> PixelMap:
        """Load the pixel map; missing or unreadable maps give an empty one."""
        path = self.config.pixel_map_path
        try:
            return PydanticPersistence.load_json(path, PixelMap)
        except FileNotFoundError:
            logger.warning(f"{path.name} not found in {path.parent}, grid animations will be 1x1")
        except ValueError as e:
            logger.warning(f"Ignoring unreadable pixel map {path}: {e}")
        return PixelMap()

    def load_conf(self) -> GenerationConf:
        """
        Load the batch conf file, writing the demo conf first if it is missing.

        Raises:
            ConfigFileInvalidError: If the file is not valid JSON
            ConfigValidationError: If the file doesn't look like a conf file
        """
        path = self.config.conf_file
        if not path.exists():
            logger.info(f"No conf file at {path}, writing the demo conf")
            conf = GenerationConf.demo()
            PydanticPersistence.save_json(conf, path, indent=4, by_alias=True)
            return conf

        try:
            return PydanticPersistence.load_json(path, GenerationConf)
        except ValidationError as e:
            raise wrap_pydantic_error(e, str(path)) from e
        except ValueError as e:
            raise ConfigFileInvalidError(str(path), str(e)) from e

    # =================================================================
    # Generation
    # =================================================================

    def check_target(self, target: str) -> None:
        """
        Fail early on an unknown generator name.

        Raises:
            UnknownGeneratorError: If target is not 'all', 'conf' or a generator
        """
        if target in (ALL_TARGET, CONF_TARGET) or target in self.registry:
            return
        raise UnknownGeneratorError(target, self.registry.names(include_internal=True))

    def generate_from_conf(
        self, conf: GenerationConf, geometry: DeviceGeometry
    ) -> tuple[dict[str, Animation], ErrorCollector]:
        """
        Generate the active animations of a conf file.

        Failing entries are collected instead of aborting the batch.

        Returns:
            Animations by sanitized name, and the collector holding failures
        """
        animations: dict[str, Animation] = {}
        collector = collect_errors("generate animations from conf")

        for display_name, spec in conf.active_specs():
            name = sanitize_animation_name(display_name)
            with collector.try_operation(f"generate '{display_name}'"):
                animations[name] = self.registry.generate(
                    spec.generator, geometry, spec.params, rng=self.rng
                )

        if collector.has_errors:
            logger.warning(collector.get_summary())
        return animations, collector

    def generate(
        self, target: str, geometry: DeviceGeometry, params: Sequence[Any] = ()
    ) -> tuple[dict[str, Animation], list[str]]:
        """
        Generate the animations for a target.

        Args:
            target: A generator name, 'all' or 'conf'
            geometry: Device geometry
            params: Generator parameters (single generator only)

        Returns:
            Animations by name, and messages for animations that failed
        """
        if target != ALL_TARGET and target != CONF_TARGET:
            return {target: self.registry.generate(target, geometry, params, rng=self.rng)}, []

        if params:
            logger.warning(f"Ignoring parameters {list(params)!r} for '{target}'")

        if target == ALL_TARGET:
            return self.registry.generate_all(geometry, rng=self.rng), []

        animations, collector = self.generate_from_conf(self.load_conf(), geometry)
        errors = [f"{op}: {error}" for op, error in collector.errors]
        return animations, errors

    # =================================================================
    # Output
    # =================================================================

    @staticmethod
    def merge_animations(device_config: DeviceConfig, animations: dict[str, Animation]) -> None:
        """Add the animations, replacing existing ones with the same name."""
        merged = dict(device_config.animations)
        for name, animation in animations.items():
            if name in merged:
                logger.info(f"Replacing existing animation '{name}'")
            merged[name] = animation.model_dump()
        device_config.animations = merged

    def update_header(
        self, device_config: DeviceConfig, target: str, key_map: list[str], now: datetime
    ) -> None:
        """Stamp author, date, layout name and key map into the header."""
        header = dict(device_config.header)
        title = target[:1].upper() + target[1:]
        layout = header.get("Layout")

        header["Author"] = f"{self.config.author} {now:%Y}"
        header["Date"] = f"{now:%Y-%m-%d}"
        header["Layout"] = f"{layout} + Kiianigen {title}" if layout else f"Kiianigen {title}"
        header["KiianigenKeyMap"] = key_map
        device_config.header = header

    def output_path(self, target: str, now: datetime) -> Path:
        """``<output_dir>/<prefix>-<yyyymmdd-HHMMSS>-<target>.json``"""
        file_name = f"{self.config.output_prefix}-{now:%Y%m%d-%H%M%S}-{target}.json"
        return self.config.output_dir / file_name

    def run(
        self,
        target: str,
        params: Sequence[Any] = (),
        now: Optional[datetime] = None,
    ) -> GenerationResult:
        """
        Generate animations and write the updated device config.

        Args:
            target: A generator name, 'all' or 'conf'
            params: Generator parameters (single generator only)
            now: Timestamp for the header and file name (defaults to now)

        Returns:
            GenerationResult describing what was written

        Raises:
            UnknownGeneratorError: If target is not known
            GeneratorParameterError: If a single generator rejects its parameters
            ConfigurationError: If an input file is missing or invalid
        """
        self.check_target(target)
        if now is None:
            now = datetime.now()

        device_config = self.load_device_config()
        geometry = DeviceGeometry.from_documents(device_config, self.load_pixel_map())

        animations, errors = self.generate(target, geometry, params)
        self.merge_animations(device_config, animations)

        key_map = self.triggers.bind(device_config, list(device_config.animations))
        self.update_header(device_config, target, key_map, now)

        path = self.output_path(target, now)
        with ErrorContext("write generated config", logger_instance=logger):
            PydanticPersistence.save_json(
                device_config, path, indent=4, by_alias=True, exclude_unset=True
            )
        logger.info(f"New config json has been saved to {path}")

        copied = False
        if self.config.copy_to_clipboard:
            copied = copy_file_to_clipboard(path)

        return GenerationResult(
            target=target,
            output_path=path,
            animation_names=list(animations),
            key_map=key_map,
            errors=errors,
            copied_to_clipboard=copied,
        )
