"""
Number parsing and printing for the calculator display.

The display is a string, so every operation round-trips through text. These
helpers follow the browser's rules (parseFloat, Number#toString and
Number#toExponential) so the calculator shows the same thing the web keypad
always showed: "8" rather than "8.0", "Infinity" rather than "inf".
"""
import math
import re
from decimal import ROUND_HALF_UP, Decimal

# Displays longer than this switch to exponent form
MAX_DISPLAY_LENGTH = 12
EXPONENT_DIGITS = 3

_NUMERIC_PREFIX = re.compile(
    r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)'
)


def parse_number(text: str) -> float:
    """
    Parse the longest numeric prefix of text.

    Trailing junk is ignored ('Infinity.' is Infinity, '12.5.' is 12.5).
    Returns NaN when there is no numeric prefix at all.
    """
    match = _NUMERIC_PREFIX.match(text.lstrip())
    if not match:
        return math.nan
    literal = match.group(0)
    if literal.endswith('Infinity'):
        return -math.inf if literal.startswith('-') else math.inf
    return float(literal)


def _digits_and_point(value: float) -> tuple[str, int]:
    """
    Shortest round-trip digits of abs(value) and the decimal point position.

    value == 0.<digits> * 10**point
    """
    exact = Decimal(repr(abs(value))).normalize()
    sign, digit_tuple, exponent = exact.as_tuple()
    digits = ''.join(str(d) for d in digit_tuple)
    return digits, exponent + len(digits)


def number_to_string(value: float) -> str:
    """Format a float the way the browser prints numbers."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == 0:
        return '0'

    sign = '-' if value < 0 else ''
    digits, point = _digits_and_point(value)
    k = len(digits)

    if k <= point <= 21:
        return sign + digits + '0' * (point - k)
    if 0 < point <= 21:
        return sign + digits[:point] + '.' + digits[point:]
    if -6 < point <= 0:
        return sign + '0.' + '0' * -point + digits

    exponent = point - 1
    exp_sign = '+' if exponent >= 0 else '-'
    mantissa = digits if k == 1 else digits[0] + '.' + digits[1:]
    return f"{sign}{mantissa}e{exp_sign}{abs(exponent)}"


def to_exponential(value: float, fraction_digits: int = EXPONENT_DIGITS) -> str:
    """
    Exponent notation with a fixed number of fractional mantissa digits.

    Rounds half-up on the exact binary value and writes the exponent without
    zero padding: 1234567890123 -> '1.235e+12'.
    """
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'

    quantum = Decimal(1).scaleb(-fraction_digits)
    if value == 0:
        return f"{Decimal(0).quantize(quantum)}e+0"

    sign = '-' if value < 0 else ''
    exact = Decimal(abs(value))
    exponent = exact.adjusted()
    mantissa = exact.scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)
    if mantissa >= 10:
        exponent += 1
        mantissa = exact.scaleb(-exponent).quantize(quantum, rounding=ROUND_HALF_UP)

    exp_sign = '+' if exponent >= 0 else '-'
    return f"{sign}{mantissa}e{exp_sign}{abs(exponent)}"


def format_display(display: str) -> str:
    """Text shown on the calculator screen for a raw display value."""
    if len(display) > MAX_DISPLAY_LENGTH:
        return to_exponential(parse_number(display))
    return display
