from pathlib import Path
from typing import Optional

import yaml

# Path to the bundled default config within the package
PACKAGE_DIR    = Path(__file__).resolve().parent
BUNDLED_CONFIG = PACKAGE_DIR / "configs" / "cleancharge.yml"

DEFAULTS = {
    "provider": {
        "base_url": "https://api.carbonintensity.org.uk",
        "timeout": 10.0,
    },
    "server": {
        "host": "127.0.0.1",
        "port": 8080,
    },
}


class ConfigError(Exception):
    pass


def load_config(path: Optional[Path] = None) -> dict:
    """
    Load the YAML config at `path` (or the bundled one) and fill in any
    missing keys from DEFAULTS.
    """
    config_path = Path(path) if path else BUNDLED_CONFIG
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config {config_path}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config {config_path} must be a mapping, got {type(raw).__name__}")

    cfg = {}
    for section, defaults in DEFAULTS.items():
        values = raw.get(section) or {}
        if not isinstance(values, dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")
        cfg[section] = {**defaults, **values}

    try:
        cfg["provider"]["timeout"] = float(cfg["provider"]["timeout"])
        cfg["server"]["port"]      = int(cfg["server"]["port"])
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in {config_path}: {e}") from e
    return cfg
