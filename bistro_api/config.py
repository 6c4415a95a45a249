import copy
import logging
import os

import yaml

# ----------------------------
# Configuration
# ----------------------------
CONFIG_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "config")
SET_FILE = os.getenv("BISTRO_SETTINGS", os.path.abspath(os.path.join(CONFIG_DIR, "settings.yaml")))

# Safe defaults if the YAML file is missing
DEFAULTS = {
    "database": {"url": "sqlite:///./database.sqlite"},
    "server": {"host": "0.0.0.0", "port": 4000},
    "cors": {"allow_origins": ["*"]},
    "logging": {"level": "INFO"},
}

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _load_yaml(path: str) -> dict:
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path: str = SET_FILE) -> dict:
    settings = _merge(DEFAULTS, _load_yaml(path))

    # Environment wins over the YAML file
    if os.getenv("DATABASE_URL"):
        settings["database"]["url"] = os.getenv("DATABASE_URL")
    if os.getenv("TEST_DATABASE"):
        settings["database"]["url"] = f"sqlite:///{os.getenv('TEST_DATABASE')}"
    if os.getenv("PORT"):
        settings["server"]["port"] = int(os.getenv("PORT"))
    if os.getenv("LOG_LEVEL"):
        settings["logging"]["level"] = os.getenv("LOG_LEVEL")
    return settings


SETTINGS = load_settings()


def configure_logging(level: str | None = None) -> None:
    level = (level or SETTINGS["logging"]["level"]).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("bistro_api").setLevel(level)
