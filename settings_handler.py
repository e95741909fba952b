import json
from inpututil import get_input, RANGE_INCLUSIVE

SETTINGS_FILE = "settings.json"

DEFAULT_SETTINGS = {
    "tolerance": 1e-10,
    "showValidation": "yes",
    "copySecret": "ask",
    "secretCopyTime": 15,
    "testCaseFile": "test_cases.json",
}

# allowed type and values for each setting
ALLOWED_VALUES = {
    "tolerance": (float, RANGE_INCLUSIVE(0)),
    "showValidation": (str, ("yes", "no")),
    "copySecret": (str, ("yes", "no", "ask")),
    "secretCopyTime": (int, RANGE_INCLUSIVE(0)),
    "testCaseFile": (str, None),
}


def get_settings(path=SETTINGS_FILE):
    try:
        with open(path, "r") as f:
            settings = json.load(f)
    except FileNotFoundError:
        return reset_settings(path)

    # settings files written by older versions may be missing keys
    return {**DEFAULT_SETTINGS, **settings}


def save_settings(settings, path=SETTINGS_FILE):
    with open(path, "w") as f:
        json.dump(settings, f, indent=4)


def change_settings(path=SETTINGS_FILE):
    settings = get_settings(path)

    keys = list(settings.keys())

    # print settings
    print("Settings:")
    for idx, key in enumerate(keys):
        print(f"[{idx}] {key}: {settings[key]}")

    choice = get_input("Select a setting to change (number)\n> ", int, range(len(settings)))

    key = keys[choice]
    if key not in ALLOWED_VALUES:
        print(f"'{key}' is not a known setting and cannot be changed here.")
        return settings
    value_type, allowed_value_range = ALLOWED_VALUES[key]

    print(f"Current value: {settings[key]}")
    if allowed_value_range is not None:
        print(f"Allowed values: {allowed_value_range}")
    new_value = get_input(f"Enter new value for '{key}'\n> ", value_type, allowed_value_range)
    settings[key] = new_value

    save_settings(settings, path)
    print("Settings updated.")
    return settings


def reset_settings(path=SETTINGS_FILE):
    settings = dict(DEFAULT_SETTINGS)
    save_settings(settings, path)
    print("Settings reset to default values.")
    return settings
