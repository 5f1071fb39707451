import importlib
import inspect
import os
import sys

from .config import DEFAULT_CONFIG_PATH, PACKAGE_DIR, load_config
from .errors import BootstrapError
from .logger import PSITLogger, setup_file_logging

# Helper collections imported by load_toolkit, in order
HELPER_MODULES = (
    "psit.system_info",
    "psit.popup.message_box",
    "psit.parallel",
)


class Toolkit:
    """ The loaded toolkit: config, logger and the commands of every helper module that imported. """

    def __init__(self, config, logger):
        self.config = config
        self.logger = logger
        self.modules = {}
        self.commands = {}
        self.failed = {}

    def command(self, name):
        """ Looks up a command by name; raises KeyError for commands whose module failed to load. """
        try:
            return self.commands[name]
        except KeyError:
            raise KeyError(f"Command '{name}' is not available") from None

    def __getattr__(self, name):
        commands = self.__dict__.get("commands", {})
        if name in commands:
            return commands[name]
        raise AttributeError(name)


def module_commands(module):
    """ Public functions a helper module exports through __all__. """
    names = getattr(module, "__all__", ())
    return {name: getattr(module, name) for name in names
            if inspect.isfunction(getattr(module, name, None))}


def render_help(commands, config):
    """ Markdown help listing every command with the first line of its docstring. """
    lines = [f"# {config.title}", ""]
    if not commands:
        lines.append("_No commands loaded._")
    for name, func in sorted(commands.items()):
        doc = inspect.getdoc(func) or ""
        summary = doc.splitlines()[0] if doc else ""
        lines.append(f"- `{name}{inspect.signature(func)}`: {summary}".rstrip(": "))
    return "\n".join(lines) + "\n"


def set_console_title(title):
    """ Sets the console window title (SetConsoleTitleW on Windows, an OSC escape elsewhere). """
    if os.name == "nt":
        import ctypes
        ctypes.windll.kernel32.SetConsoleTitleW(title)
    elif sys.stdout.isatty():
        sys.stdout.write(f"\33]0;{title}\a")
        sys.stdout.flush()


def load_toolkit(config_path=None, helpers=HELPER_MODULES):
    """ Reads the config, imports the helper modules and returns a Toolkit.

    A config that can't be read is fatal (BootstrapError). A helper module
    that fails to import is only logged as a warning: the toolkit loads
    without its commands.
    """
    config_path = config_path or DEFAULT_CONFIG_PATH
    try:
        config = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        raise BootstrapError(f"Failed to load PSIT configuration '{config_path}': {e}") from e

    logger = PSITLogger(config)
    if config.log_to_file:
        path = setup_file_logging()
        logger.debug(f"Logging to {path}")

    # Search path for the helper modules
    search_path = os.path.dirname(PACKAGE_DIR)
    if search_path not in sys.path:
        sys.path.append(search_path)
    config.module_path = PACKAGE_DIR
    logger.debug(f"Module path: {config.module_path}")

    toolkit = Toolkit(config, logger)
    for name in helpers:
        try:
            module = importlib.import_module(name)
        except Exception as e:
            toolkit.failed[name] = str(e)
            logger.warning(f"Failed to load helper module '{name}': {type(e).__name__}: {e}")
            continue
        toolkit.modules[name] = module
        toolkit.commands.update(module_commands(module))
        logger.debug(f"Loaded helper module '{name}'", level=2)

    config.help = render_help(toolkit.commands, config)
    if config.show_md_help:
        logger.info(config.help)

    if config.enable_custom_title:
        set_console_title(config.title)

    return toolkit
