"""Shared utilities for Pydantic model persistence.

Stateless helpers for loading and saving Pydantic models to/from JSON
files. Used for the app config, the batch generation file, the
configurator documents and the generated output.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

# Type variable bound to Pydantic BaseModel
T = TypeVar('T', bound=BaseModel)


class PydanticPersistence:
    """
    Utility class providing shared Pydantic persistence operations.

    All methods are static and can be used without instantiation.

    Example Usage:
        ```python
        device_config = PydanticPersistence.load_json(
            path=Path("KType-Standard.json"),
            model_type=DeviceConfig
        )

        PydanticPersistence.save_json(
            data=device_config,
            path=Path("json_out/KType-20240101-120000-kitt2000.json"),
            indent=4,
            by_alias=True,
            exclude_unset=True
        )
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: Type[T]) -> T:
        """
        Load and validate a Pydantic model from a JSON file.

        Args:
            path: Path to the JSON file to load
            model_type: The Pydantic model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the content is not valid JSON or fails validation
            ValueError: If the file is empty or cannot be read
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text(encoding="utf-8")

            if not json_content or not json_content.strip():
                raise ValueError(f"File is empty: {path}")

            model = model_type.model_validate_json(json_content)

            logger.debug(f"Loaded {model_type.__name__} from {path}")
            return model

        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise
        except ValueError:
            raise
        except Exception as e:
            logger.error(f"Error loading {model_type.__name__} from {path}: {e}")
            raise ValueError(f"Failed to load {model_type.__name__}: {e}") from e

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        by_alias: bool = False,
        exclude_unset: bool = False
    ) -> None:
        """
        Save a Pydantic model to a JSON file.

        Args:
            data: The Pydantic model instance to save
            path: Path where the file should be saved
            indent: JSON indentation level (default: 2 spaces)
            create_parents: Create parent directories if they don't exist (default: True)
            by_alias: Write field aliases (camelCase wire names)
            exclude_unset: Leave out fields that were never set

        Raises:
            ValueError: If serialization or writing fails

        Notes:
            - The file will be overwritten if it exists
        """
        try:
            if create_parents and path.parent:
                path.parent.mkdir(parents=True, exist_ok=True)

            json_content = data.model_dump_json(
                indent=indent, by_alias=by_alias, exclude_unset=exclude_unset
            )
            path.write_text(json_content, encoding="utf-8")

            logger.debug(f"Saved {type(data).__name__} to {path}")

        except Exception as e:
            logger.error(f"Error saving {type(data).__name__} to {path}: {e}")
            raise ValueError(f"Failed to save {type(data).__name__}: {e}") from e

    @staticmethod
    def load_json_or_default(
        path: Path,
        model_type: Type[T],
        default_factory: Optional[Callable[[], T]] = None
    ) -> T:
        """
        Load a model from JSON, or return a default if the file doesn't exist.

        Args:
            path: Path to the JSON file
            model_type: The Pydantic model class
            default_factory: Optional callable that returns a default instance.
                           If None, calls model_type() to get defaults.

        Returns:
            Loaded model instance, or default instance if file doesn't exist

        Raises:
            ValidationError: If the file exists but has invalid content

        Notes:
            - Does not automatically save the default to disk
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"File not found: {path}, using default {model_type.__name__}")
            if default_factory:
                return default_factory()
            return model_type()
