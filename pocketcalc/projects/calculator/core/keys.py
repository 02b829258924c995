"""
Keypad input for the calculator.
Button labels are parsed once into a Key so the state machine matches on
KeyKind instead of comparing label strings.
"""
import enum
from dataclasses import dataclass


class UnknownKeyError(ValueError):
    """Raised when a label does not correspond to any keypad button."""


class KeyKind(enum.Enum):
    DIGIT = 'digit'
    DECIMAL = 'decimal'
    CLEAR = 'clear'
    TOGGLE_SIGN = 'toggle_sign'
    PERCENT = 'percent'
    OPERATOR = 'operator'
    EQUALS = 'equals'


class Operator(enum.Enum):
    ADD = '+'
    SUBTRACT = '−'
    MULTIPLY = '×'
    DIVIDE = '÷'


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    digit: str | None = None
    operator: Operator | None = None


# Labels as printed on the keypad, in layout order (row by row)
KEYPAD_ROWS = [
    ['AC', '±', '%', '÷'],
    ['7', '8', '9', '×'],
    ['4', '5', '6', '−'],
    ['1', '2', '3', '+'],
    ['0', '.', '='],
]

# Keyboard and ASCII spellings accepted alongside the printed labels
LABEL_ALIASES = {
    '-': '−',
    '*': '×',
    'x': '×',
    '/': '÷',
    '+/-': '±',
    'C': 'AC',
    'Escape': 'AC',
    'Enter': '=',
    ',': '.',
}

_FIXED_KEYS = {
    '.': Key(KeyKind.DECIMAL),
    'AC': Key(KeyKind.CLEAR),
    '±': Key(KeyKind.TOGGLE_SIGN),
    '%': Key(KeyKind.PERCENT),
    '=': Key(KeyKind.EQUALS),
}
_FIXED_KEYS.update({op.value: Key(KeyKind.OPERATOR, operator=op) for op in Operator})


def parse_label(label) -> Key:
    """
    Parse a button label into a Key.

    Args:
        label (str): Keypad label such as '7', '.', 'AC', '±', '%', '+', '−',
                     '×', '÷' or '=' (ASCII aliases like '-', '*', '/' also work)

    Returns:
        Key: The parsed key

    Raises:
        UnknownKeyError: If the label is not a keypad button
    """
    if not isinstance(label, str):
        raise UnknownKeyError(f"Key label must be a string, got {type(label).__name__}")
    label = label.strip()
    label = LABEL_ALIASES.get(label, label)
    if len(label) == 1 and label in '0123456789':
        return Key(KeyKind.DIGIT, digit=label)
    try:
        return _FIXED_KEYS[label]
    except KeyError:
        raise UnknownKeyError(f"Unknown key: {label!r}") from None
