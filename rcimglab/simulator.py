"""Input handling and execution of RC and RL step-response simulations."""

from __future__ import annotations

import math
import re
from enum import Enum
from typing import Union

from rcimglab.circuits import Waveform, simulate_rc, simulate_rl

Number = Union[str, float, int]

_NUMBER = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class InputError(ValueError):
    """Raised when simulation inputs are not numbers or not positive."""


class CircuitKind(Enum):
    """The two circuits the simulator can run."""

    RC = "RC"
    RL = "RL"

    @property
    def symbol(self) -> str:
        """Symbol of the reactive component: C for a capacitor, L for an inductor."""
        return "C" if self is CircuitKind.RC else "L"

    @property
    def title(self) -> str:
        """Title shown above the result graph."""
        return f"{self.value} 회로 결과"

    @property
    def not_a_number_message(self) -> str:
        if self is CircuitKind.RC:
            return "숫자가 올바르지 않습니다. 예: 10, 2.5, 3.0e-2 형식으로 입력해주세요."
        return "입력값이 숫자가 아닙니다. 예: 10, 1.2, 3.5e-2 같은 형식으로 입력해주세요."

    @property
    def not_positive_message(self) -> str:
        return f"R, {self.symbol}, Vin 값을 모두 양수로 입력해주세요."


def _to_float(value: Number, message: str) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, str):
        raise InputError(message)
    match = _NUMBER.match(value)
    if match is None:
        raise InputError(message)
    token = match.group(1)
    number = float(token)
    if math.isinf(number) and "inf" not in token.lower():
        raise InputError(message)
    return number


def _parse(kind_message: str, resistance: Number, reactive: Number, vin: Number):
    return tuple(_to_float(v, kind_message) for v in (resistance, reactive, vin))


def parse_inputs(
    resistance: Number, reactive: Number, vin: Number
) -> tuple[float, float, float]:
    """Read the three inputs as numbers.

    Text is read like a C ``strtod``: leading whitespace is skipped and the
    longest numeric prefix is used; text with no numeric prefix, or a value out
    of range, raises :class:`InputError`.
    """
    return _parse(CircuitKind.RL.not_a_number_message, resistance, reactive, vin)


def describe_run(
    kind: CircuitKind, resistance: float, reactive: float, vin: float
) -> str:
    """Return the announcement shown before a simulation runs."""
    kind = CircuitKind(kind)
    return (
        f"{kind.value} 시뮬레이션 실행:\n"
        f"R={resistance:.4f}\n"
        f"{kind.symbol}={reactive:.6f}\n"
        f"Vin={vin:.3f}"
    )


def run_simulation(
    kind: CircuitKind, resistance: Number, reactive: Number, vin: Number
) -> Waveform:
    """Validate the inputs and simulate the selected circuit."""
    kind = CircuitKind(kind)
    r, x, v = _parse(kind.not_a_number_message, resistance, reactive, vin)
    if r <= 0 or x <= 0 or v <= 0:
        raise InputError(kind.not_positive_message)
    if kind is CircuitKind.RC:
        return simulate_rc(r, x, v)
    return simulate_rl(r, x, v)