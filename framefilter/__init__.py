"""
Framefilter - row selection over column-oriented frames by field values.
"""

import os
import sys
from typing import Any, Optional
from pathlib import Path
from dotenv import load_dotenv

from .infrastructure.frames import Field, FieldType, Frame
from .infrastructure.predicates import UnknownPredicateKindError, value_filters_registry
from .infrastructure.transformers.filters import (
    FilterByValueOptions,
    FilterByValueTransformer,
    ValueFilterConfig,
    apply
)

__version__ = "1.0.0"

__all__ = [
    "Field",
    "FieldType",
    "FilterByValueOptions",
    "FilterByValueTransformer",
    "Frame",
    "UnknownPredicateKindError",
    "ValueFilterConfig",
    "apply",
    "configure",
    "value_filters_registry",
]

VERBOSE_ENV_VAR = "FRAMEFILTER_VERBOSE"

# Global configuration state
_config = {
    "verbose": False,
}


def _exception_handler(
    exc_type: type, exc_value: BaseException, exc_traceback: Any
) -> None:
    """
    Print only the exception type and message unless verbose mode is on.

    Args:
        exc_type: The exception class.
        exc_value: The exception instance.
        exc_traceback: The traceback object.
    """
    if _config["verbose"]:
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
    else:
        print(f"{exc_type.__name__}: {exc_value}")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def configure(
    env_file_path: Optional[str] = None,
    verbose: Optional[bool] = None,
    **kwargs: Any,
) -> bool:
    """
    Configure the Framefilter library.

    Loads environment variables from a .env file, then resolves verbose mode
    and installs the exception hook.

    Args:
        env_file_path (str, optional): Path to the .env file. If None, searches for
            .env in the current directory and parent directories.
        verbose (bool, optional): If True, show full exception tracebacks. If False,
            show only the error message. If None, read FRAMEFILTER_VERBOSE from the
            environment (after the .env file is loaded).
        **kwargs: Reserved for future configuration parameters.

    Returns:
        bool: True if a .env file was found and loaded, False otherwise.
    """
    if env_file_path:
        env_file = Path(env_file_path)
        env_loaded = load_dotenv(dotenv_path=env_file) if env_file.exists() else False
    else:
        env_loaded = load_dotenv()

    if verbose is None:
        verbose = _env_flag(VERBOSE_ENV_VAR)

    _config["verbose"] = bool(verbose)
    sys.excepthook = _exception_handler

    return env_loaded
