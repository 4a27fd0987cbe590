"""
Generator registry.

Maps generator names (from the command line or a conf file) to the
functions that build the animations.

Names are the camelCase names the configurator exports use. A name with a
leading underscore marks an internal diagnostic generator: it can be run by
name but is skipped when generating "all".
Aliases keep older names working without listing them twice.

To add a generator::

    registry = get_registry()

    @registry.register("sunrise")
    def sunrise(geometry, color=None, *, rng=None):
        ...
"""

import inspect
import logging
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, Optional

from kiianigen.exceptions import GeneratorParameterError, UnknownGeneratorError
from kiianigen.models.animation import Animation
from kiianigen.models.geometry import DeviceGeometry

from .interpolation import RandomSource

logger = logging.getLogger(__name__)

# fn(geometry, *params, rng=None) -> Animation
Generator = Callable[..., Animation]


class GeneratorName(str, Enum):
    """Built-in generators, in listing order."""

    DODGY_PIXEL = "dodgyPixel"
    KITT2000 = "kitt2000"
    BLUEWIPE = "bluewipe"
    MAC_SLEEP_BREATH = "macSleepBreath"
    BLUE_GREEN_BREATH = "blueGreenBreath"
    BLUE_GREEN_BASE_TOP_BREATH_SPIN = "blueGreenBaseTopBreathSpin"
    KEY_GROUP_CYCLER = "keyGroupCycler"
    VERTICAL_PULSE_WITH_TRACERS = "verticalPulseWithTracers"
    BASE_TOP_BREATH = "baseTopBreath"
    RED_PULSE = "redPulse"
    LINEAR_PULSE = "linearPulse"
    BLUE_YELLOW_PULSE = "blueYellowPulse"
    RGB_PULSE = "rgbPulse"
    RGB_ZEBRA_PULSE = "rgbZebraPulse"
    WHITE_NOISE = "whiteNoise"
    TOP_AND_BOTTOM = "topAndBottom"
    TOP_AND_BOTTOM2 = "topAndBottom2"
    ESCAPE_TEST = "_escapeTest"


def _key(name: str) -> str:
    # Enum members hash by member name, not by value
    return name.value if isinstance(name, GeneratorName) else name


class GeneratorRegistry:
    """Ordered name -> generator mapping."""

    def __init__(self):
        self._generators: dict[str, Generator] = {}
        self._aliases: dict[str, str] = {}

    def add(self, name: str, generator: Generator) -> None:
        """
        Register a generator under a name.

        Args:
            name: Generator name (a leading underscore marks it internal)
            generator: Callable taking the geometry, positional parameters
                and a keyword-only ``rng``
        """
        name = _key(name)
        if name in self._generators:
            logger.warning(f"Replacing generator '{name}'")
        self._generators[name] = generator
        logger.debug(f"Registered generator '{name}'")

    def register(self, name: str) -> Callable[[Generator], Generator]:
        """Decorator form of :meth:`add`."""

        def decorator(generator: Generator) -> Generator:
            self.add(name, generator)
            return generator

        return decorator

    def add_alias(self, alias: str, name: str) -> None:
        """Make a generator reachable under another name without listing it twice."""
        self._aliases[_key(alias)] = _key(name)

    def resolve(self, name: str) -> str:
        """Canonical name for a name or alias."""
        name = _key(name)
        return self._aliases.get(name, name)

    def get(self, name: str) -> Generator | None:
        """
        Get a generator by name.

        Returns:
            The generator, or None if not registered
        """
        return self._generators.get(self.resolve(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve(name) in self._generators

    @staticmethod
    def is_internal(name: str) -> bool:
        """Internal generators are skipped by "all" and hidden from listings."""
        return name.startswith("_")

    def names(self, include_internal: bool = False) -> list[str]:
        """Registered names in registration order."""
        return [
            name for name in self._generators
            if include_internal or not self.is_internal(name)
        ]

    def generate(
        self,
        name: str,
        geometry: DeviceGeometry,
        params: Sequence[Any] = (),
        rng: Optional[RandomSource] = None,
    ) -> Animation:
        """
        Run one generator.

        Args:
            name: Generator name
            geometry: Device geometry
            params: Positional parameters; missing trailing ones use defaults
            rng: Random source for the random generators

        Returns:
            The generated animation

        Raises:
            UnknownGeneratorError: If no generator has that name
            GeneratorParameterError: If the parameters don't fit the generator
        """
        generator = self.get(name)
        if generator is None:
            raise UnknownGeneratorError(_key(name), self.names(include_internal=True))
        name = self.resolve(name)

        params = list(params)
        try:
            inspect.signature(generator).bind(geometry, *params, rng=rng)
        except TypeError as e:
            raise GeneratorParameterError(name, params, str(e)) from e

        logger.debug(f"Generating '{name}' with params {params!r}")
        try:
            animation = generator(geometry, *params, rng=rng)
        except (TypeError, ValueError, ArithmeticError) as e:
            # pydantic's ValidationError is a ValueError
            raise GeneratorParameterError(name, params, str(e)) from e

        logger.info(f"Generated '{name}': {animation.frame_count} frames")
        return animation

    def generate_all(
        self, geometry: DeviceGeometry, rng: Optional[RandomSource] = None
    ) -> dict[str, Animation]:
        """Run every public generator with default parameters, in order."""
        return {name: self.generate(name, geometry, rng=rng) for name in self.names()}


def _register_builtin_generators(registry: GeneratorRegistry) -> None:
    """Register the built-in generators in listing order."""
    from . import generators as g

    builtins: dict[GeneratorName, Generator] = {
        GeneratorName.DODGY_PIXEL: g.dodgy_pixel,
        GeneratorName.KITT2000: g.kitt2000,
        GeneratorName.BLUEWIPE: g.bluewipe,
        GeneratorName.MAC_SLEEP_BREATH: g.mac_sleep_breath,
        GeneratorName.BLUE_GREEN_BREATH: g.blue_green_breath,
        GeneratorName.BLUE_GREEN_BASE_TOP_BREATH_SPIN: g.blue_green_base_top_breath_spin,
        GeneratorName.KEY_GROUP_CYCLER: g.key_group_cycler,
        GeneratorName.VERTICAL_PULSE_WITH_TRACERS: g.vertical_pulse_with_tracers,
        GeneratorName.BASE_TOP_BREATH: g.base_top_breath,
        GeneratorName.RED_PULSE: g.red_pulse,
        GeneratorName.LINEAR_PULSE: g.linear_pulse,
        GeneratorName.BLUE_YELLOW_PULSE: g.blue_yellow_pulse,
        GeneratorName.RGB_PULSE: g.rgb_pulse,
        GeneratorName.RGB_ZEBRA_PULSE: g.rgb_zebra_pulse,
        GeneratorName.WHITE_NOISE: g.white_noise,
        GeneratorName.TOP_AND_BOTTOM: g.top_and_bottom,
        GeneratorName.TOP_AND_BOTTOM2: g.top_and_bottom2,
        GeneratorName.ESCAPE_TEST: g.escape_test,
    }
    for name in GeneratorName:
        registry.add(name.value, builtins[name])
    # Name used by older conf files
    registry.add_alias("escapeTest", GeneratorName.ESCAPE_TEST)


# Singleton instance
_registry: GeneratorRegistry | None = None


def get_registry() -> GeneratorRegistry:
    """Get singleton GeneratorRegistry instance with the built-ins registered."""
    global _registry
    if _registry is None:
        _registry = GeneratorRegistry()
        _register_builtin_generators(_registry)
    return _registry
