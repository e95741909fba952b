from .errors import SecretRecoveryError
from .interpolation import reconstruct
from .shares import parse_test_case
from .validation import validate, check_tolerance, DEFAULT_TOLERANCE


def failure(error: SecretRecoveryError):
    return {
        "success": False,
        "secret": None,
        "points": None,
        "parameters": None,
        "validation": None,
        "error": str(error),
        "error_kind": error.kind.value,
    }


def solve(test_case: dict, tolerance=DEFAULT_TOLERANCE) -> dict:
    """
    Complete solution for one test case: parse, reconstruct from the first k shares, validate against all shares.

    Never raises for a bad test case - any SecretRecoveryError is turned into {"success": False, "error": ...}.
    An invalid tolerance is the caller's mistake rather than the test case's, so that still raises ValueError.
    """
    check_tolerance(tolerance)

    try:
        share_set = parse_test_case(test_case)
        result = reconstruct(share_set.points, share_set.k)
        validation = validate(share_set.points, result.basis_points, tolerance)
    except SecretRecoveryError as e:
        return failure(e)

    return {
        "success": True,
        "secret": result.secret,
        "points": list(share_set.points),
        "parameters": {"n": share_set.n, "k": share_set.k, "degree": result.degree},
        "validation": validation,
        "error": None,
        "error_kind": None,
    }


def solve_multiple(test_cases: list[dict], tolerance=DEFAULT_TOLERANCE) -> list[dict]:
    # each case is solved on its own, one bad case does not affect the others
    return [
        {"test_case_index": index, **solve(test_case, tolerance)}
        for index, test_case in enumerate(test_cases)
    ]
