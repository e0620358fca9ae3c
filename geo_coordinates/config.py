import logging
import os
from dataclasses import dataclass
from pathlib import Path

import toml

from geo_coordinates.formatting import DD_DECIMALS, DMS_DECIMALS
from geo_coordinates.notation import CoordinateFormat

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when the configuration file cannot be read."""


ROOT_DIR = Path(__file__).resolve().parent.parent
CONFIG_FILE_PATH = os.environ.get("GEO_COORDINATES_CONFIG", ROOT_DIR / "coordinates_config.toml")


@dataclass(frozen=True)
class Settings:
    format: CoordinateFormat = CoordinateFormat.DD
    dd_decimals: int = DD_DECIMALS
    dms_decimals: int = DMS_DECIMALS
    strict: bool = False

    def decimals_for(self, kind: CoordinateFormat) -> int:
        if kind is CoordinateFormat.DMS:
            return self.dms_decimals
        return self.dd_decimals


def _flag(value, name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{name} must be true or false, got {value!r}")
    return value


def load_settings(path=None) -> Settings:
    """
    Load output and parsing defaults from a TOML file.

    Args:
        path: Config file path. Defaults to ``GEO_COORDINATES_CONFIG`` or
            ``coordinates_config.toml`` at the project root.

    Returns:
        Settings, built-in defaults when the file does not exist

    Raises:
        ConfigError: If the file cannot be parsed or holds bad values
    """
    path = Path(path if path is not None else CONFIG_FILE_PATH)
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return Settings()

    try:
        config = toml.load(path)
        output = config.get("output", {})
        parsing = config.get("parsing", {})
        return Settings(
            format=CoordinateFormat.from_name(output.get("format", "dd")),
            dd_decimals=int(output.get("dd_decimals", DD_DECIMALS)),
            dms_decimals=int(output.get("dms_decimals", DMS_DECIMALS)),
            strict=_flag(parsing.get("strict", False), "parsing.strict"),
        )
    except (toml.TomlDecodeError, TypeError, ValueError, AttributeError) as e:
        raise ConfigError(f"Config read failed: {e}") from e
