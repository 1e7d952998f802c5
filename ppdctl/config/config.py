from configparser import ConfigParser, Error as ConfigParserError
from os import getenv, path
from typing import Optional

from ppdctl.dbus.constants import DBUS_SERVICE_NAME, KNOWN_SERVICES
from ppdctl.errors import InvalidConfig
from ppdctl.globals import BUS_TYPES, CONFIG_FILE_NAME, CONFIG_SECTION, LOG_LEVELS, SYSTEM_CONFIG_FILE

DEFAULTS = {
    "bus": "system",
    "service": DBUS_SERVICE_NAME,
    "log_level": "warning",
}


def find_config_file(args_config_file: Optional[str]) -> Optional[str]:
    if args_config_file is not None:
        if path.isfile(args_config_file): return args_config_file     # (1) Command line argument was specified
        raise InvalidConfig(f'config file specified with "--config {args_config_file}" not found')

    user_config_path = getenv("XDG_CONFIG_HOME") or path.join(path.expanduser("~"), ".config")
    for dir in ("", "/ppdctl"):
        conf_file = user_config_path + dir + "/" + CONFIG_FILE_NAME
        if path.isfile(conf_file): return conf_file                   # (2) User config file

    if path.isfile(SYSTEM_CONFIG_FILE): return SYSTEM_CONFIG_FILE     # (3) System config file
    return None                                                       # (4) Built-in defaults


class Config:
    conf: ConfigParser = None
    file: Optional[str] = None

    def __init__(self) -> None:
        self.conf = self._new_parser()

    @staticmethod
    def _new_parser() -> ConfigParser:
        conf = ConfigParser(interpolation=None)     # values are taken verbatim
        conf.read_dict({CONFIG_SECTION: DEFAULTS})
        return conf

    def get_option(self, option: str) -> str: return self.conf[CONFIG_SECTION][option]

    def has_config(self) -> bool: return self.file is not None

    def setup(self, args_config_file: Optional[str]) -> None:
        self.set_file(find_config_file(args_config_file))

    def set_file(self, file: Optional[str]) -> None:
        self.file = file
        self.update_config()

    def update_config(self) -> None:
        self.conf = self._new_parser()      # create new ConfigParser to prevent old data from remaining
        if self.file is not None:
            try: self.conf.read(self.file, encoding="utf-8")
            except (ConfigParserError, UnicodeDecodeError, OSError) as e: raise InvalidConfig(f"unable to parse {self.file}: {e}") from e
        self.validate()

    def validate(self) -> None:
        if self.bus not in BUS_TYPES:
            raise InvalidConfig(f"bus must be one of {', '.join(BUS_TYPES)}, got {self.bus!r}")
        if self.service not in KNOWN_SERVICES:
            raise InvalidConfig(f"service must be one of {', '.join(KNOWN_SERVICES)}, got {self.service!r}")
        if self.log_level not in LOG_LEVELS:
            raise InvalidConfig(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

    @property
    def bus(self) -> str: return self.get_option("bus").strip().lower()

    @property
    def service(self) -> str: return self.get_option("service").strip()

    @property
    def log_level(self) -> str: return self.get_option("log_level").strip().lower()


config = Config()
