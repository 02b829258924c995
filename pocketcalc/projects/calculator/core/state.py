"""
Calculator state machine.

Four fields describe the calculator: the display string, the pending left-hand
operand, the pending operator and the awaiting-operand flag (the next digit
starts a new number). apply_input is the only thing that changes them.
"""
import math
from dataclasses import dataclass

from pocketcalc.projects.calculator.core.keys import KeyKind, Operator, parse_label
from pocketcalc.projects.calculator.core.numbers import (
    format_display,
    number_to_string,
    parse_number,
)

INITIAL_DISPLAY = '0'


def calculate(left: float, right: float, operator) -> float:
    """
    Apply a binary operator.

    Division by zero gives IEEE results (Infinity, -Infinity or NaN) instead
    of raising. An unrecognised operator returns the right-hand value.
    """
    if operator is Operator.ADD:
        return left + right
    if operator is Operator.SUBTRACT:
        return left - right
    if operator is Operator.MULTIPLY:
        return left * right
    if operator is Operator.DIVIDE:
        if right == 0:
            if left == 0 or math.isnan(left):
                return math.nan
            return math.copysign(math.inf, left) * math.copysign(1.0, right)
        return left / right
    return right


@dataclass
class CalculatorState:
    display: str = INITIAL_DISPLAY
    operand: float | None = None
    operator: Operator | None = None
    awaiting_operand: bool = False

    @property
    def screen(self) -> str:
        """Formatted display text."""
        return format_display(self.display)

    def reset(self):
        self.display = INITIAL_DISPLAY
        self.operand = None
        self.operator = None
        self.awaiting_operand = False

    def apply_input(self, key):
        """Apply one keypad key to the state."""
        kind = key.kind

        if kind is KeyKind.DIGIT:
            if self.awaiting_operand:
                self.display = key.digit
                self.awaiting_operand = False
            elif self.display == INITIAL_DISPLAY:
                self.display = key.digit
            else:
                self.display += key.digit

        elif kind is KeyKind.DECIMAL:
            if self.awaiting_operand:
                self.display = '0.'
                self.awaiting_operand = False
            elif '.' not in self.display:
                self.display += '.'

        elif kind is KeyKind.CLEAR:
            self.reset()

        elif kind is KeyKind.TOGGLE_SIGN:
            self.display = number_to_string(parse_number(self.display) * -1)

        elif kind is KeyKind.PERCENT:
            self.display = number_to_string(parse_number(self.display) / 100)

        elif kind is KeyKind.OPERATOR:
            current = parse_number(self.display)
            if self.operand is not None and self.operator and not self.awaiting_operand:
                # Chained operation: settle the pending one first
                result = calculate(self.operand, current, self.operator)
                self.display = number_to_string(result)
                self.operand = result
            else:
                self.operand = current
            self.operator = key.operator
            self.awaiting_operand = True

        elif kind is KeyKind.EQUALS:
            if self.operand is not None and self.operator:
                result = calculate(self.operand, parse_number(self.display), self.operator)
                self.display = number_to_string(result)
                self.operand = None
                self.operator = None
                self.awaiting_operand = True

        else:
            raise AssertionError(f"Unhandled key kind: {kind}")

    def to_dict(self):
        """Serialize for the session cookie."""
        return {
            'display': self.display,
            'operand': None if self.operand is None else repr(self.operand),
            'operator': self.operator.value if self.operator else None,
            'awaiting_operand': self.awaiting_operand,
        }

    @classmethod
    def from_dict(cls, data):
        """Rebuild a state from to_dict() output; missing fields take initial values."""
        if not data:
            return cls()
        operand = data.get('operand')
        operator = data.get('operator')
        return cls(
            display=data.get('display') or INITIAL_DISPLAY,
            operand=None if operand is None else float(operand),
            operator=Operator(operator) if operator else None,
            awaiting_operand=bool(data.get('awaiting_operand', False)),
        )


def press(state, label):
    """
    Dispatch one button label to the state.

    Raises:
        UnknownKeyError: If the label is not a keypad button
    """
    state.apply_input(parse_label(label))
    return state


def press_sequence(labels, state=None):
    """Feed labels in order to state (a fresh one by default) and return it."""
    if state is None:
        state = CalculatorState()
    for label in labels:
        press(state, label)
    return state
