import json
import os

# --- Constants ---
APP_NAME = "PSIT Admin Toolkit"
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
CONFIG_FILENAME = "psit_config.json"
DEFAULT_CONFIG_PATH = os.path.join(PACKAGE_DIR, CONFIG_FILENAME)
LOG_FILE_PREFIX = "psit"


# --- Config Class ---
class PSITConfig:
    """ Toolkit settings, read once from the static JSON file.

    The loader fills in ``module_path`` and ``help``; everything else is
    treated as read-only for the lifetime of the process. The object is
    handed to whatever needs it (logger, toolkit) instead of living in a
    module global.
    """

    # JSON key -> attribute name
    FIELDS = {
        "DebugEnabled": "debug_enabled",
        "DebugLevel": "debug_level",
        "Version": "version",
        "ShowMDHelp": "show_md_help",
        "ModulePath": "module_path",
        "Help": "help",
        "EnableCustomTitle": "enable_custom_title",
        "BaseTitle": "base_title",
        "LogToFile": "log_to_file",
    }

    def __init__(self, debug_enabled=False, debug_level=1, version="0.0.0",
                 show_md_help=False, module_path="", help="",
                 enable_custom_title=False, base_title=APP_NAME, log_to_file=False):
        self.debug_enabled = bool(debug_enabled)
        self.debug_level = int(debug_level)
        self.version = str(version)
        self.show_md_help = bool(show_md_help)
        self.module_path = module_path or ""
        self.help = help or ""
        self.enable_custom_title = bool(enable_custom_title)
        self.base_title = str(base_title)
        self.log_to_file = bool(log_to_file)

    @classmethod
    def from_dict(cls, data):
        """ Build a config from the PascalCase record stored on disk. Unknown keys are ignored. """
        kwargs = {attr: data[key] for key, attr in cls.FIELDS.items() if key in data}
        return cls(**kwargs)

    def to_dict(self):
        return {key: getattr(self, attr) for key, attr in self.FIELDS.items()}

    @property
    def title(self):
        return f"{self.base_title} v{self.version}"

    def __repr__(self):
        return f"PSITConfig(version={self.version!r}, debug_enabled={self.debug_enabled!r})"


def load_config(path=None):
    """ Reads the JSON config file and returns a PSITConfig.

    OSError and ValueError (bad JSON, bad field types) propagate to the
    caller; the loader turns them into a BootstrapError.
    """
    path = path or DEFAULT_CONFIG_PATH
    with open(path, "r", encoding="utf-8") as config_file:
        data = json.load(config_file)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return PSITConfig.from_dict(data)
