"""Generator-related exceptions.

- GeneratorError: Base class for generator errors
- UnknownGeneratorError: No generator is registered under a name
- GeneratorParameterError: Parameters don't fit the generator
"""

from collections.abc import Sequence

from .base import KiianigenError


class GeneratorError(KiianigenError):
    """An animation generator could not run."""
    pass


class UnknownGeneratorError(GeneratorError):
    """No generator is registered under the requested name."""

    def __init__(self, name: str, valid_names: Sequence[str]):
        """
        Initialize unknown generator error.

        Args:
            name: The requested generator name
            valid_names: Names that are registered
        """
        listing = "\n\t".join([""] + list(valid_names))
        super().__init__(
            user_message=f"Unknown generator: {name!r}",
            technical_message=f"Generator lookup failed for {name!r}",
            recoverable=True,
            recovery_hint=(
                "Either specify 'all', 'conf', or use one of the following generators:"
                + listing
            ),
        )
        self.name = name
        self.valid_names = list(valid_names)


class GeneratorParameterError(GeneratorError):
    """Parameters passed to a generator are not usable."""

    def __init__(self, name: str, params: Sequence, reason: str):
        """
        Initialize generator parameter error.

        Args:
            name: The generator name
            params: The positional parameters that were passed
            reason: Why the parameters were rejected
        """
        super().__init__(
            user_message=f"Invalid parameters for generator '{name}': {reason}",
            technical_message=f"Generator {name} failed with params {list(params)!r}: {reason}",
            recoverable=True,
            recovery_hint=(
                "Colors are [r, g, b] lists, palettes are lists of colors and counts "
                "are plain numbers, e.g. kiianigen generate kitt2000 '[255,102,0]'"
            ),
        )
        self.name = name
        self.params = list(params)
        self.reason = reason
