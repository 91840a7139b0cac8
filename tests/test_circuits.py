import math

import pytest

from rcimglab.circuits import (
    DEFAULT_STEPS,
    RC_TIME_STEP,
    RL_TIME_STEP,
    Waveform,
    simulate_rc,
    simulate_rl,
)


def test_rc_default_sampling():
    wave = simulate_rc(10.0, 0.1, 5.0)
    assert len(wave) == DEFAULT_STEPS
    assert len(wave.voltage) == len(wave.current) == len(wave.power) == DEFAULT_STEPS
    assert wave.time[0] == 0.0
    assert wave.time[1] == pytest.approx(0.005)
    assert wave.time[-1] == pytest.approx((DEFAULT_STEPS - 1) * RC_TIME_STEP)


def test_rl_default_sampling():
    wave = simulate_rl(10.0, 1.0, 5.0)
    assert len(wave) == DEFAULT_STEPS
    assert wave.time[1] == pytest.approx(0.01)
    assert wave.time[-1] == pytest.approx((DEFAULT_STEPS - 1) * RL_TIME_STEP)


def test_rc_initial_state():
    wave = simulate_rc(4.0, 0.5, 12.0)
    assert wave.voltage[0] == 0.0
    assert wave.current[0] == pytest.approx(12.0 / 4.0)
    assert wave.power[0] == 0.0


def test_rl_initial_state():
    wave = simulate_rl(4.0, 2.0, 12.0)
    assert wave.current[0] == 0.0
    assert wave.voltage[0] == pytest.approx(12.0)
    assert wave.power[0] == 0.0


@pytest.mark.parametrize("simulate", [simulate_rc, simulate_rl])
def test_kirchhoff_voltage_law_holds(simulate):
    resistance, vin = 3.0, 9.0
    wave = simulate(resistance, 0.2, vin)
    for v, i in zip(wave.voltage, wave.current):
        assert v + i * resistance == pytest.approx(vin)


def test_rc_power_is_voltage_times_current():
    wave = simulate_rc(2.0, 0.3, 6.0)
    for v, i, p in zip(wave.voltage, wave.current, wave.power):
        assert p == pytest.approx(v * i)


def test_rl_power_is_source_voltage_times_current():
    vin = 6.0
    wave = simulate_rl(2.0, 0.3, vin)
    for i, p in zip(wave.current, wave.power):
        assert p == pytest.approx(vin * i)


def test_rc_is_monotonic_and_settles():
    vin, resistance = 5.0, 10.0
    wave = simulate_rc(resistance, 0.01, vin)
    assert all(a <= b for a, b in zip(wave.voltage, wave.voltage[1:]))
    assert all(a >= b for a, b in zip(wave.current, wave.current[1:]))
    assert wave.voltage[-1] == pytest.approx(vin, rel=1e-6)
    assert wave.current[-1] == pytest.approx(0.0, abs=1e-6)


def test_rl_is_monotonic_and_settles():
    vin, resistance = 5.0, 10.0
    wave = simulate_rl(resistance, 0.1, vin)
    assert all(a <= b for a, b in zip(wave.current, wave.current[1:]))
    assert wave.current[-1] == pytest.approx(vin / resistance, rel=1e-6)
    assert wave.voltage[-1] == pytest.approx(0.0, abs=1e-6)


def test_rc_one_time_constant_matches_exponential():
    resistance, capacitance, vin = 1.0, 0.5, 2.0
    wave = simulate_rc(resistance, capacitance, vin, dt=0.5, steps=3)
    assert wave.voltage[1] / vin == pytest.approx(1 - math.exp(-1))


def test_custom_steps_and_dt():
    wave = simulate_rl(1.0, 1.0, 1.0, dt=0.25, steps=4)
    assert wave.time == (0.0, 0.25, 0.5, 0.75)


def test_zero_steps_gives_empty_waveform():
    wave = simulate_rc(1.0, 1.0, 1.0, steps=0)
    assert wave == Waveform((), (), (), ())


@pytest.mark.parametrize(
    "call",
    [
        lambda: simulate_rc(0.0, 1.0, 1.0),
        lambda: simulate_rc(1.0, 0.0, 1.0),
        lambda: simulate_rl(0.0, 1.0, 1.0),
        lambda: simulate_rl(1.0, 0.0, 1.0),
    ],
)
def test_zero_components_rejected(call):
    with pytest.raises(ValueError):
        call()