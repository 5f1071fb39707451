""" PSIT admin toolkit: system info, message boxes, console logging and parallel script runs. """

from .config import PSITConfig, load_config
from .errors import (BootstrapError, DialogValidationError, PSITError, ScriptFragmentError,
                     SystemInfoError, UnsupportedContentError)
from .loader import Toolkit, load_toolkit
from .logger import LogEntry, PSITLogger

__version__ = "1.4.0"

__all__ = (
    "PSITConfig", "load_config",
    "PSITError", "BootstrapError", "DialogValidationError", "ScriptFragmentError",
    "SystemInfoError", "UnsupportedContentError",
    "Toolkit", "load_toolkit",
    "LogEntry", "PSITLogger",
)
