import sys
from time import sleep
import pyperclip
from inpututil import get_input, choose_option
from settings_handler import get_settings, change_settings, reset_settings
from recovery import solve_multiple, load_test_cases, SecretRecoveryError
from recovery.examples import EXAMPLE_TEST_CASES


"""
NO SECURITY GUARANTEE
shares are interpolated over plain integers/rationals, not a finite field.
this only recovers secrets split with an integer polynomial and no modulus.
"""


# secrets and share indices can have more digits than the default int/str conversion limit
sys.set_int_max_str_digits(0)

settings = get_settings()


def main_menu():
    global settings
    while True:
        match choose_option({
            "f": "Solve test cases from a file",
            "d": "Run demo on the built-in examples",
            "s": "Change settings",
            "r": "Reset settings",
            "q": "Quit"
        }):
            case "f":
                solve_file()
            case "d":
                run_demo()
            case "s":
                settings = change_settings()
            case "r":
                settings = reset_settings()
            case "q":
                print("Exiting...")
                exit(0)


# given a setting that is either "yes", "no" or "ask", returns True if "yes", False if "no" and asks user if "ask"
def get_setting_bool(setting_name, prompt, trueChar="y"):
    setting_value = settings.get(setting_name, "ask")
    if setting_value == "yes":
        return True
    elif setting_value == "no":
        return False
    elif setting_value == "ask":
        return (choose_option(prompt) == trueChar)
    else:
        raise ValueError(f"Invalid setting value for {setting_name}: {setting_value}. Expected 'yes', 'no' or 'ask'.")


def copy_to_clipboard_and_clear(text, duration):
    pyperclip.copy(text)
    print("Copied to clipboard. Clearing in", duration, "seconds.")
    try:
        sleep(duration)
    except KeyboardInterrupt:
        print("\nClearing clipboard before exit...")
    finally:
        pyperclip.copy("")


def print_validation(validation):
    print(f"Validation: {'PASSED' if validation.all_valid else 'FAILED'} (tolerance {validation.tolerance})")
    if settings.get("showValidation", "yes") == "no":
        return
    for check in validation.results:
        mark = "ok" if check.valid else "MISMATCH"
        print(f"    x={check.point.x}: expected {check.point.y}, polynomial gives {check.predicted_y} "
              f"(difference {check.difference}) {mark}")


def print_result(result):
    print(f"\nTest Case {result['test_case_index'] + 1}:")
    if not result["success"]:
        print(f"Error ({result['error_kind']}): {result['error']}")
        return

    parameters = result["parameters"]
    print(f"Secret: {result['secret']}")
    print(f"Parameters: n={parameters['n']}, k={parameters['k']}, degree={parameters['degree']}")
    print_validation(result["validation"])


def report(test_cases):
    try:
        results = solve_multiple(test_cases, settings.get("tolerance", 1e-10))
    except ValueError as e:
        # only a bad tolerance gets past solve, e.g a hand-edited settings file
        print(f"Invalid tolerance setting: {e}. Change or reset the settings.")
        return

    for result in results:
        print_result(result)

    for result in results:
        if result["success"] and get_setting_bool("copySecret", {
            "y": f"Copy secret of test case {result['test_case_index'] + 1} to clipboard",
            "n": "Do not copy"
        }):
            copy_to_clipboard_and_clear(str(result["secret"]), settings.get("secretCopyTime", 15))


def solve_file():
    default_path = settings.get("testCaseFile", "test_cases.json")
    path = get_input(f"Enter the test case file (leave blank for {default_path})\n> ") or default_path

    try:
        test_cases = load_test_cases(path)
    except FileNotFoundError:
        print(f"File not found: {path}")
        return
    except (OSError, UnicodeDecodeError, SecretRecoveryError) as e:
        print(f"Could not read {path}: {e}")
        return

    report(test_cases)


def run_demo():
    print("=== Shamir's Secret Sharing Demo ===")
    report(EXAMPLE_TEST_CASES)


if __name__ == "__main__":
    main_menu()
