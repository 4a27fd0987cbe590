"""
Custom exception hierarchy for kiianigen.

## Exception Hierarchy

```
KiianigenError (base)
├── ConfigurationError
│   ├── ConfigFileNotFoundError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── GeneratorError
    ├── UnknownGeneratorError
    └── GeneratorParameterError
```

All custom exceptions carry a `user_message`, a `technical_message` for
logs, a `recoverable` flag and an optional `recovery_hint`.

### Example: Unknown Generator

```python
from kiianigen.exceptions import UnknownGeneratorError

raise UnknownGeneratorError("kit2000", registry.names())

# User sees: "Unknown generator: 'kit2000'"
# Recovery hint lists every registered generator
```
"""

from .base import KiianigenError
from .config import (
    ConfigFileInvalidError,
    ConfigFileNotFoundError,
    ConfigurationError,
    ConfigValidationError,
)
from .generator import GeneratorError, GeneratorParameterError, UnknownGeneratorError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)

__all__ = [
    "ConfigFileInvalidError",
    "ConfigFileNotFoundError",
    "ConfigValidationError",
    # Config
    "ConfigurationError",
    "ErrorCollector",
    "ErrorContext",
    # Generators
    "GeneratorError",
    "GeneratorParameterError",
    # Base
    "KiianigenError",
    "UnknownGeneratorError",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
