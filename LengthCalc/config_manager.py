# config_manager.py
from pathlib import Path
import json

from . import error as E

config_json = Path(__file__).resolve().parent / "config.json"


# Used for every key the settings file does not provide
DEFAULT_SETTINGS = {
    "imperial_fractions": True,
    "decimal_places": 6,
    "output_to_cm": False,
    "output_to_yards": False,
    "legacy_unit_subtraction": True,
}



def load_setting_value(key_value, path=None):
    settings_dict = dict(DEFAULT_SETTINGS)
    try:
        with open(path or config_json, 'r', encoding= 'utf-8') as f:
            settings_dict.update(json.load(f))

    except (FileNotFoundError, json.JSONDecodeError):
        pass


    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def validate_settings(settings_dict):
    """""

    Merge the given settings over the defaults and check the types, so the engine never
    has to second guess a value read from disk.

    Raises ConfigurationError for unknown keys or values of the wrong type.

    """""

    merged = dict(DEFAULT_SETTINGS)
    for key, value in (settings_dict or {}).items():
        if key not in DEFAULT_SETTINGS:
            raise E.ConfigurationError(f"Unknown setting: {key}", code="3001")

        expected = type(DEFAULT_SETTINGS[key])
        # bool is a subclass of int, so reject it explicitly for numeric settings
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise E.ConfigurationError(f"Invalid setting value: {key}={value!r}", code="3001")
        merged[key] = value

    if merged["decimal_places"] < 0:
        raise E.ConfigurationError(f"Invalid setting value: decimal_places={merged['decimal_places']}", code="3001")

    return merged




def save_setting(settings_dict, path=None):
    settings_dict = validate_settings(settings_dict)
    try:
        with open (path or config_json, 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except (FileNotFoundError, PermissionError):
        return{}
