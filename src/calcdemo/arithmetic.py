from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import Callable, Union

DIVISION_BY_ZERO = "Division by zero"
UNKNOWN_OPERATION = "Unknown operation"
INVALID_NUMBER_FORMAT = "Invalid number format"

OPERATIONS: dict[str, Callable[[float, float], float]] = {
    "add": operator.add,
    "sub": operator.sub,
    "mul": operator.mul,
    "div": operator.truediv,
}

# Characters up to and including the ASCII space, as Java's String.trim
_SPACE = "".join(chr(code) for code in range(0x21))

_NUMBER_RE = re.compile(
    r"""
    (?P<sign>[+-])?
    (?:
        (?P<special>NaN|Infinity)
      | (?P<hex>0[xX](?:[0-9a-fA-F]+\.?|[0-9a-fA-F]*\.[0-9a-fA-F]+)[pP][+-]?[0-9]+)[fFdD]?
      | (?P<decimal>(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?
    )
    """,
    re.ASCII | re.VERBOSE,
)


class InvalidNumberFormat(ValueError):
    """Raised when an operand is present but is not a number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"{INVALID_NUMBER_FORMAT}: {text!r}")
        self.text = text


@dataclass(frozen=True)
class Numeric:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True)
class Literal:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class InvalidInput:
    """The outcome when either operand failed to parse.

    No computation is attempted in this case, whatever the operation.
    """

    message: str = INVALID_NUMBER_FORMAT

    def __str__(self) -> str:
        return self.message


Result = Union[Numeric, Literal]
Outcome = Union[Numeric, Literal, InvalidInput]


def format_number(value: float) -> str:
    """Format using the shortest representation that round-trips."""
    return repr(float(value))


def parse_operand(text: str | None) -> float:
    """Parse a raw operand, treating missing or empty text as ``0.0``.

    The accepted grammar is that of Java's ``Double.parseDouble``, ASCII
    only with surrounding spaces and control characters ignored. It
    allows an optional ``f``/``d`` suffix, hexadecimal floats with a
    binary exponent and the exact spellings ``NaN`` and ``Infinity``.

    Raises:
        InvalidNumberFormat: If the text is present but not a number.
    """
    if text is None or text == "":
        return 0.0
    match = _NUMBER_RE.fullmatch(text.strip(_SPACE))
    if match is None:
        raise InvalidNumberFormat(text)
    sign = match.group("sign") or ""
    if match.group("hex") is not None:
        try:
            return float.fromhex(sign + match.group("hex"))
        except OverflowError:
            return float(sign + "Infinity")
    if match.group("special") is not None:
        return float(sign + match.group("special"))
    return float(sign + match.group("decimal"))


def compute(op: str, a: float, b: float) -> Result:
    """Apply the operation named by *op* to the operands.

    Division by exactly zero and unrecognised operation codes are
    reported as literal texts rather than raised.
    """
    function = OPERATIONS.get(op)
    if function is None:
        return Literal(UNKNOWN_OPERATION)
    if function is operator.truediv and b == 0.0:
        return Literal(DIVISION_BY_ZERO)
    return Numeric(function(a, b))


def calculate(op: str | None, a: str | None, b: str | None) -> Outcome | None:
    """Turn the raw request inputs into an outcome.

    Returns ``None`` when there is nothing to report, i.e. the operands
    parsed and no operation was requested.
    """
    try:
        left = parse_operand(a)
        right = parse_operand(b)
    except InvalidNumberFormat:
        return InvalidInput()

    if op is None:
        return None
    return compute(op, left, right)
