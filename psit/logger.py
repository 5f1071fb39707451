import getpass
import logging
import os
import socket
import sys
import tempfile
import time
from datetime import datetime

from colored import cprint

from .config import LOG_FILE_PREFIX

# Stdlib logger the console writers forward to. It carries no console
# handler of its own so lines are not printed twice.
log = logging.getLogger("psit")
log.setLevel(logging.DEBUG)

LOG_TYPES = ("debug", "info", "warning", "error")

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

# colored 256-colour names per log type
_COLORS = {
    "debug": "light_cyan",
    "info": "white",
    "warning": "light_yellow",
    "error": "red",
}


def setup_file_logging(directory=None, level=logging.INFO):
    """ Attaches a timestamped file handler to the 'psit' logger and returns its path.

    A file handler already writing into the same directory is reused, so
    loading the toolkit repeatedly keeps a single log file.
    """
    directory = directory or tempfile.gettempdir()
    for handler in log.handlers:
        if isinstance(handler, logging.FileHandler) and \
                os.path.dirname(handler.baseFilename) == os.path.abspath(directory):
            return handler.baseFilename
    path = os.path.join(directory, f"{LOG_FILE_PREFIX}__{time.strftime('%Y%m%d_%H%M%S')}.log")
    fh = logging.FileHandler(path, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    log.addHandler(fh)
    return path


def _user_domain():
    return os.environ.get("USERDOMAIN") or socket.gethostname()


class LogEntry:
    """ A single structured log record, returned instead of printing. """

    __slots__ = ("type", "timestamp", "message", "computer_name", "user_name", "user_domain")

    def __init__(self, type, message, timestamp=None, computer_name=None,
                 user_name=None, user_domain=None):
        if type not in LOG_TYPES:
            raise ValueError(f"Unknown log type: {type}")
        values = {
            "type": type,
            "timestamp": timestamp or datetime.now(),
            "message": str(message),
            "computer_name": computer_name or socket.gethostname(),
            "user_name": user_name or getpass.getuser(),
            "user_domain": user_domain or _user_domain(),
        }
        for name, value in values.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError("LogEntry is immutable")

    def to_dict(self):
        return {
            "Type": self.type,
            "Timestamp": self.timestamp,
            "Message": self.message,
            "ComputerName": self.computer_name,
            "UserName": self.user_name,
            "UserDomain": self.user_domain,
        }

    def __repr__(self):
        return f"LogEntry(type={self.type!r}, message={self.message!r})"


class PSITLogger:
    """ Leveled console writer.

    Each method prints one colourised line (``[INFO] message``) or, with
    ``as_object=True``, returns a LogEntry and prints nothing. Debug output
    is gated by ``config.debug_enabled`` and ``config.debug_level``.
    """

    def __init__(self, config):
        self.config = config

    def _write(self, type, message, as_object):
        if as_object:
            return LogEntry(type, message)
        line = f"[{type.upper()}] {message}"
        stream = sys.stderr if type in ("warning", "error") else sys.stdout
        cprint(line, fore_256=_COLORS[type], file=stream, flush=True)
        log.log(_LEVELS[type], message)
        return None

    def debug_active(self, level=1):
        return self.config.debug_enabled and level <= self.config.debug_level

    def debug(self, message, as_object=False, level=1):
        if not self.debug_active(level):
            return None
        return self._write("debug", message, as_object)

    def info(self, message, as_object=False):
        return self._write("info", message, as_object)

    def warning(self, message, as_object=False):
        return self._write("warning", message, as_object)

    def error(self, message, as_object=False):
        return self._write("error", message, as_object)
