"""Step responses of series RC and RL circuits driven by a DC source."""

from __future__ import annotations

import math
from dataclasses import dataclass

RC_TIME_STEP = 0.005
RL_TIME_STEP = 0.01
DEFAULT_STEPS = 1000


@dataclass(frozen=True)
class Waveform:
    """Sampled time series of a circuit's voltage, current and power."""

    time: tuple[float, ...]
    voltage: tuple[float, ...]
    current: tuple[float, ...]
    power: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.time)


def _require_nonzero(**values: float) -> None:
    for name, value in values.items():
        if value == 0:
            raise ValueError(f"{name} must be non-zero")


def simulate_rc(
    resistance: float,
    capacitance: float,
    vin: float,
    dt: float = RC_TIME_STEP,
    steps: int = DEFAULT_STEPS,
) -> Waveform:
    """Charge a capacitor through a resistor from ``vin`` volts.

    The voltage is taken across the capacitor, the current through the resistor,
    and the power is their product.
    """
    _require_nonzero(resistance=resistance, capacitance=capacitance)
    tau = resistance * capacitance
    times = tuple(i * dt for i in range(steps))
    decay = [math.exp(-t / tau) for t in times]
    voltage = tuple(vin * (1 - d) for d in decay)
    current = tuple((vin / resistance) * d for d in decay)
    power = tuple(v * i for v, i in zip(voltage, current))
    return Waveform(times, voltage, current, power)


def simulate_rl(
    resistance: float,
    inductance: float,
    vin: float,
    dt: float = RL_TIME_STEP,
    steps: int = DEFAULT_STEPS,
) -> Waveform:
    """Energise an inductor through a resistor from ``vin`` volts.

    The voltage is the one across the coil (``vin - i*R``) and the power is the
    power delivered by the source (``vin * i``).
    """
    _require_nonzero(resistance=resistance, inductance=inductance)
    times = tuple(i * dt for i in range(steps))
    current = tuple(
        (vin / resistance) * (1 - math.exp(-resistance * t / inductance)) for t in times
    )
    voltage = tuple(vin - i * resistance for i in current)
    power = tuple(vin * i for i in current)
    return Waveform(times, voltage, current, power)