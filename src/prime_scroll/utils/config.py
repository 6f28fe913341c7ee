"""Configuration for prime scrolling sessions.

Configuration is a flat JSON object, for example::

    {
        "chunk_size": 100,
        "start": 2,
        "max_start": 2147483647,
        "log_level": "INFO"
    }

Missing keys take their defaults and unknown keys are ignored.
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Union

from prime_scroll.core.chunks import DEFAULT_CHUNK_SIZE
from prime_scroll.core.errors import InvalidInputError
from prime_scroll.core.primality import is_integer

DEFAULT_START = 2
DEFAULT_MAX_START = 2147483647


@dataclass
class ScrollConfig:
    """Settings shared by the session layer and the CLI."""
    chunk_size: int = DEFAULT_CHUNK_SIZE
    start: int = DEFAULT_START
    max_start: int = DEFAULT_MAX_START
    log_level: str = "INFO"

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Raise InvalidInputError if any field is out of range."""
        if not is_integer(self.chunk_size) or self.chunk_size < 1:
            raise InvalidInputError(f"chunk_size must be a positive integer, got {self.chunk_size!r}")
        if not is_integer(self.max_start) or self.max_start < 2:
            raise InvalidInputError(f"max_start must be an integer >= 2, got {self.max_start!r}")
        if not is_integer(self.start) or not 0 <= self.start <= self.max_start:
            raise InvalidInputError(
                f"start must be an integer in [0, {self.max_start}], got {self.start!r}"
            )
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise InvalidInputError(f"unknown log_level {self.log_level!r}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'ScrollConfig':
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})


def load_config(path: Union[str, Path]) -> ScrollConfig:
    """Load a ScrollConfig from a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed and validated configuration.

    Raises:
        InvalidInputError: If the file is not a JSON object or a value is invalid.
    """
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInputError(f"{path}: invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise InvalidInputError(f"{path}: expected a JSON object, got {type(data).__name__}")

    return ScrollConfig.from_dict(data)


def save_config(config: ScrollConfig, path: Union[str, Path]) -> Path:
    """Write a ScrollConfig to a JSON file and return its path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.to_dict(), f, indent=2)
    return path
