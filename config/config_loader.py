import json
import os

from simulator.programs import PROGRAMS

DEFAULT_CONFIG = {
    "program": "copy_and_erase",
    "max_steps": 10_000,
    "window_left": 2,
    "window_right": 3,
    "blank_glyph": "_",
    "strict_halt": False,
    "show_trace": True,
    "log_runs": True,
    "output_directory": "logs/",
    "log_file_prefix": "tape_machine_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "program": str,
    "max_steps": int,
    "window_left": int,
    "window_right": int,
    "blank_glyph": str,
    "strict_halt": bool,
    "show_trace": bool,
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ValueError(f"Missing required configuration key: {key}")
        # bool is a subclass of int; reject it for the numeric keys
        if not isinstance(config[key], expected_type) or (expected_type is int and isinstance(config[key], bool)):
            raise TypeError(f"Config key '{key}' expected {expected_type}, got {type(config[key])}.")

    if config["program"] not in PROGRAMS:
        raise ValueError(f"Unknown program '{config['program']}'. Available: {', '.join(sorted(PROGRAMS))}")
    if config["max_steps"] <= 0:
        raise ValueError("max_steps must be positive.")
    if config["window_left"] < 0 or config["window_right"] < 0:
        raise ValueError("window_left and window_right must be non-negative.")
    if len(config["blank_glyph"]) != 1:
        raise ValueError("blank_glyph must be a single character.")

def load_config(path="config/runtime_config.json"):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        user_config = json.load(f)

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    # Validate output directory
    os.makedirs(config["output_directory"], exist_ok=True)

    return config

def save_config(config, path="config/runtime_config.json"):
    validate_config(config)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=4)
