import math

import pytest

from rcimglab.circuits import simulate_rc, simulate_rl
from rcimglab.simulator import (
    CircuitKind,
    InputError,
    describe_run,
    parse_inputs,
    run_simulation,
)


def test_parse_plain_numbers():
    assert parse_inputs("10", "2.5", "3") == (10.0, 2.5, 3.0)


def test_parse_scientific_notation_matches_float():
    assert parse_inputs("10", "1.2", "3.5e-2") == (10.0, 1.2, float("3.5e-2"))


def test_parse_skips_whitespace_and_trailing_text():
    assert parse_inputs("  10ohm", "2.5x", "\t3 V") == (10.0, 2.5, 3.0)


def test_parse_accepts_numbers():
    assert parse_inputs(4, 0.5, 9.0) == (4.0, 0.5, 9.0)


@pytest.mark.parametrize("bad", ["", "abc", "   ", "x10", "."])
def test_parse_rejects_non_numeric(bad):
    with pytest.raises(InputError):
        parse_inputs(bad, "1", "1")


def test_parse_rejects_out_of_range():
    with pytest.raises(InputError):
        parse_inputs("1e999", "1", "1")


def test_parse_accepts_infinity_text():
    assert parse_inputs("inf", "1", "1") == (math.inf, 1.0, 1.0)


@pytest.mark.parametrize(
    "values", [("0", "1", "1"), ("1", "-2", "1"), ("1", "1", "0")]
)
def test_run_rejects_non_positive_rl(values):
    with pytest.raises(InputError, match="R, L, Vin"):
        run_simulation(CircuitKind.RL, *values)


def test_run_rejects_non_positive_rc():
    with pytest.raises(InputError, match="R, C, Vin"):
        run_simulation(CircuitKind.RC, "1", "0", "1")


def test_run_non_numeric_message_depends_on_kind():
    with pytest.raises(InputError, match="숫자가 올바르지 않습니다"):
        run_simulation(CircuitKind.RC, "abc", "1", "1")
    with pytest.raises(InputError, match="입력값이 숫자가 아닙니다"):
        run_simulation(CircuitKind.RL, "abc", "1", "1")


def test_run_rc_matches_circuit_model():
    assert run_simulation(CircuitKind.RC, "10", "0.01", "5") == simulate_rc(10, 0.01, 5)


def test_run_rl_matches_circuit_model():
    assert run_simulation(CircuitKind.RL, 10.0, 0.5, 5.0) == simulate_rl(10, 0.5, 5)


def test_run_accepts_kind_value():
    assert run_simulation("RL", "2", "1", "4") == simulate_rl(2, 1, 4)


def test_describe_run_format():
    assert describe_run(CircuitKind.RL, 10, 0.5, 5) == (
        "RL 시뮬레이션 실행:\nR=10.0000\nL=0.500000\nVin=5.000"
    )


def test_describe_run_uses_capacitor_symbol():
    assert describe_run(CircuitKind.RC, 1, 1, 1).splitlines()[2].startswith("C=")


@pytest.mark.parametrize(
    "value, title", [("RC", "RC 회로 결과"), ("RL", "RL 회로 결과")]
)
def test_titles(value, title):
    assert CircuitKind(value).title == title