from enum import Enum


class ErrorKind(Enum):
    INVALID_BASE = "invalid_base"
    INVALID_DIGIT = "invalid_digit"
    MALFORMED_TEST_CASE = "malformed_test_case"
    INSUFFICIENT_POINTS = "insufficient_points"
    DUPLICATE_ABSCISSA = "duplicate_abscissa"
    RECONSTRUCTION_INCONSISTENCY = "reconstruction_inconsistency"


class SecretRecoveryError(ValueError):
    """
    base class for everything that can go wrong while recovering a secret.
    subclasses set `kind` so callers can branch on it instead of parsing the message.
    """
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        # key as written in the test case, set by the share-set parser when the error belongs to a specific share
        self.share_key = None

    def __str__(self):
        if self.share_key is None:
            return self.message
        return f"Error decoding share {self.share_key}: {self.message}"


class InvalidBaseError(SecretRecoveryError):
    kind = ErrorKind.INVALID_BASE

    def __init__(self, base):
        self.base = base
        super().__init__(f"Invalid base: {base!r}. Base must be between 2 and 36.")


class InvalidDigitError(SecretRecoveryError):
    kind = ErrorKind.INVALID_DIGIT

    def __init__(self, value, base):
        self.value = value
        self.base = base
        super().__init__(f"Invalid value {value!r} for base {base}")


class MalformedTestCaseError(SecretRecoveryError):
    kind = ErrorKind.MALFORMED_TEST_CASE


class InsufficientPointsError(SecretRecoveryError):
    kind = ErrorKind.INSUFFICIENT_POINTS

    def __init__(self, required, available):
        self.required = required
        self.available = available
        super().__init__(f"Need at least {required} points, but only {available} provided")


class DuplicateAbscissaError(SecretRecoveryError):
    kind = ErrorKind.DUPLICATE_ABSCISSA

    def __init__(self, first, second, x):
        # first and second are 0-based positions in the basis, x is the share index both points carry
        self.first = first
        self.second = second
        self.x = x
        super().__init__(f"Two basis points have share index x={x} (0-based basis positions {first} and {second}), "
                         "interpolation is undefined")


class ReconstructionInconsistencyError(SecretRecoveryError):
    kind = ErrorKind.RECONSTRUCTION_INCONSISTENCY

    def __init__(self, value):
        self.value = value
        super().__init__(f"Interpolated secret {value} is not an integer - shares are inconsistent or corrupted")
