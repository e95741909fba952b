def get_input(prompt, target_type = str, allowed_range = None):
    """
    variation of input() that strips whitespace, casts to target_type (str, int or float)
    and asks again until the value is within allowed_range (anything supporting `in`, e.g range, tuple, RANGE_INCLUSIVE)
    """
    while True:
        inp = input(prompt).strip()
        try:
            casted_input = target_type(inp)
        except ValueError as e:
            print(f"Input must be of type {target_type.__name__}. Error: {e}")
            continue

        if allowed_range is not None and casted_input not in allowed_range:
            print(f"Input must be within {allowed_range}")
        else:
            return casted_input


def choose_option(options, text1="Select an option"):
    """
    prints a menu of options and returns the key the user picked.
        options: dict mapping the key to type (e.g "q") to its description
    """
    print(text1)
    for key, description in options.items():
        print(f"[{key}] {description}")
    return get_input("> ", str, tuple(options.keys()))


# e.g get_input("Enter a tolerance: ", float, RANGE_INCLUSIVE(0))
class RANGE_INCLUSIVE():
    # like range() but inclusive of end, and allows None for inf
    def __init__(self, start, end=None):
        self.start = start
        self.end = end

    def __contains__(self, item):
        return item >= self.start and (self.end is None or item <= self.end)

    def __repr__(self):
        end = "inf" if self.end is None else self.end
        return f"RANGE_INCLUSIVE({self.start}, {end})"
