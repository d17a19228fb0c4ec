import json
import os
from datetime import datetime

DEFAULT_CONFIG_PATH = "config/runtime_config.json"
SHIPPED_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "runtime_config.json")

DEFAULT_CONFIG = {
    "max_steps": None,
    "verbose": False,
    "blank_glyph": "Δ",
    "head_marker": "|",
    "log_runs": True,
    "output_directory": "logs/",
    "log_file_prefix": "turing_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "max_steps": (int, type(None)),
    "verbose": bool,
    "blank_glyph": str,
    "head_marker": str,
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is an int subclass; a step cap of `true` is a typo, not a number
        if isinstance(config[key], bool) and expected_type is not bool:
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")
        if not isinstance(config[key], expected_type):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["max_steps"] is not None and config["max_steps"] <= 0:
        raise ValueError("max_steps must be a positive integer or null for no limit.")

    for key in ["blank_glyph", "head_marker"]:
        if not config[key]:
            raise ValueError(f"Config key '{key}' must not be empty.")

def load_config(path=None, show=False):
    """Merge the JSON file at `path` over the defaults. No path means defaults only."""
    config = DEFAULT_CONFIG.copy()

    if path is not None:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found at: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        # Merge defaults with overrides
        config.update(user_config)

    # Validate schema
    validate_config(config)

    if show:
        print_config(config)

    return config

def print_config(config):
    print(f"[{datetime.now()}] Loaded config:")
    for key, value in config.items():
        print(f"  {key}: {value}")
