# pip install lark
import json
from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError
from lark.visitors import Transformer
from .base_decoder import decode
from .errors import MalformedTestCaseError


"""
test case files are JSON, holding either one test case object or a list of them.

they are parsed with a grammar rather than json.load because json.load keeps the last of two equal keys,
which would quietly drop a share given twice under the same index.
"""

parser = Lark(r"""
    ?value: object
          | array
          | string
          | NUMBER -> number
          | "true" -> true
          | "false" -> false
          | "null" -> null

    array: "[" (value ("," value)*)? "]"
    object: "{" (pair ("," pair)*)? "}"
    pair: string ":" value

    string: ESCAPED_STRING

    // JSON numbers: no leading +, no leading zeros, digits on both sides of the point
    NUMBER: /-?(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?/

    %import common.ESCAPED_STRING
    %import common.WS
    %ignore WS
    """, start='value', parser='lalr')


class CaseConverter(Transformer):
    def object(self, children):
        result = {}
        for key, value in children:
            if key in result:
                raise MalformedTestCaseError(f"Duplicate key {key!r} in test case")
            result[key] = value
        return result

    def pair(self, children):
        key, value = children
        return (key, value)

    def array(self, children):
        return list(children)

    def string(self, children):
        # the token still has its quotes and escapes
        try:
            return json.loads(children[0])
        except json.JSONDecodeError as e:
            raise MalformedTestCaseError(f"Invalid string {str(children[0])!r}: {e.msg}") from e

    def number(self, children):
        token = str(children[0])
        if any(c in token for c in ".eE"):
            return float(token)
        # integers stay exact however long they are, int() would refuse very long ones
        if token.startswith("-"):
            return -decode(token[1:], 10)
        return decode(token, 10)

    def true(self, children):
        return True

    def false(self, children):
        return False

    def null(self, children):
        return None


def parse_test_cases(text: str) -> list[dict]:
    """
    Parses a JSON document into a list of test case records.
    A single top-level object is treated as a list of one.

    Raises MalformedTestCaseError on a syntax error, a duplicate key, or a top-level value that is not an object/list.
    """
    try:
        tree = parser.parse(text)
    except UnexpectedInput as e:
        raise MalformedTestCaseError(f"Invalid JSON at line {e.line}, column {e.column}") from e

    try:
        document = CaseConverter().transform(tree)
    except VisitError as e:
        # lark wraps errors raised inside transformer callbacks
        if isinstance(e.orig_exc, MalformedTestCaseError):
            raise e.orig_exc from e
        raise MalformedTestCaseError(f"Invalid test case file: {e.orig_exc}") from e

    if isinstance(document, dict):
        return [document]
    if isinstance(document, list):
        return document
    raise MalformedTestCaseError(f"Test case file must hold an object or a list of objects (got {type(document).__name__})")


def load_test_cases(path) -> list[dict]:
    with open(path, "r") as f:
        return parse_test_cases(f.read())
