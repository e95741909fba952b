# NO SECURITY GUARANTEE
# plain integer/rational interpolation - only correct for shares made from an integer polynomial without a modulus

from .errors import (ErrorKind, SecretRecoveryError, InvalidBaseError, InvalidDigitError, MalformedTestCaseError,
                     InsufficientPointsError, DuplicateAbscissaError, ReconstructionInconsistencyError)
from .base_decoder import decode, encode
from .shares import Share, Point, ShareSet, parse_test_case
from .interpolation import Interpolator, ReconstructionResult, reconstruct
from .validation import PointCheck, ValidationReport, validate, DEFAULT_TOLERANCE
from .solver import solve, solve_multiple
from .case_parser import parse_test_cases, load_test_cases
