import inspect
import math

import numpy as np
import pytest

from interpolation import ease
from interpolation.ease import EASING_FUNCTIONS, EaseFunction, get_ease

FAMILIES = [
    "quadratic", "cubic", "quartic", "quintic", "sine",
    "circular", "exponential", "elastic", "back", "bounce",
]
EXACT_FAMILIES = {"quadratic", "cubic", "quartic", "quintic", "exponential"}
ALL_FUNCS = [getattr(ease, f"{fam}_{phase}") for fam in FAMILIES for phase in ("in", "out", "in_out")]
IN_OUT_FUNCS = [getattr(ease, f"{fam}_in_out") for fam in FAMILIES]


def test_concrete_values():
    assert ease.quadratic_in(0.5) == 0.25
    assert ease.quadratic_out(0.5) == 0.75
    assert ease.cubic_in_out(0.25) == 4 * 0.25 ** 3 == 0.0625


@pytest.mark.parametrize("func", ALL_FUNCS, ids=lambda f: f.__name__)
def test_endpoints(func):
    family = func.__name__.split("_")[0]
    if family in EXACT_FAMILIES:
        assert func(0.0) == 0.0
        assert func(1.0) == 1.0
    else:
        assert func(0.0) == pytest.approx(0.0, abs=1e-9)
        assert func(1.0) == pytest.approx(1.0, abs=1e-9)


def test_exponential_special_cases_are_exact():
    assert ease.exponential_in(0.0) == 0.0
    assert ease.exponential_out(1.0) == 1.0
    assert ease.exponential_in_out(0.0) == 0.0
    assert ease.exponential_in_out(1.0) == 1.0
    # the curve jumps straight to 2^-10 just above zero
    assert ease.exponential_in(1e-12) > 0.0


@pytest.mark.parametrize("func", ALL_FUNCS, ids=lambda f: f.__name__)
@pytest.mark.parametrize("low,high", [(-0.5, 1.5), (-1e9, 1e9), (-math.inf, math.inf)])
def test_out_of_range_is_clamped(func, low, high):
    assert func(low) == func(0.0)
    assert func(high) == func(1.0)


@pytest.mark.parametrize("func", IN_OUT_FUNCS, ids=lambda f: f.__name__)
def test_in_out_continuous_at_midpoint(func):
    below = func(0.5 - 1e-9)
    at = func(0.5)
    assert below == pytest.approx(0.5, abs=1e-4)
    assert at == pytest.approx(0.5, abs=1e-6)


def test_bounce_in_mirrors_bounce_out():
    for i in range(101):
        p = i / 100
        assert ease.bounce_in(p) == 1 - ease.bounce_out(1 - p)


def test_bounce_out_breakpoints():
    # each parabola segment touches 1 at its boundary
    assert ease.bounce_out(4 / 11) == pytest.approx(1.0)
    assert ease.bounce_out(8 / 11) == pytest.approx(1.0)
    assert ease.bounce_out(0.9) == pytest.approx(1.0, abs=1e-3)
    assert ease.bounce_out(0.5) == pytest.approx(0.71875)


def test_overshooting_families():
    assert min(ease.back_in(i / 100) for i in range(101)) < 0
    assert max(ease.back_out(i / 100) for i in range(101)) > 1
    assert min(ease.elastic_in(i / 100) for i in range(101)) < 0
    assert max(ease.elastic_out(i / 100) for i in range(101)) > 1


def test_known_curve_samples():
    assert ease.sine_in_out(0.5) == pytest.approx(0.5)
    assert ease.sine_out(0.5) == pytest.approx(math.sqrt(0.5))
    assert ease.circular_out(0.5) == pytest.approx(math.sqrt(0.75))
    assert ease.quartic_out(0.5) == 0.9375
    assert ease.quintic_in_out(0.25) == 16 * 0.25 ** 5
    assert ease.exponential_out(0.5) == pytest.approx(1 - 2 ** -5)


def test_int_input_returns_float():
    assert ease.cubic_in(1) == 1.0
    assert isinstance(ease.cubic_in(1), float)
    assert isinstance(ease.sine_out(0.3), float)


@pytest.mark.parametrize("func", ALL_FUNCS, ids=lambda f: f.__name__)
def test_float32_stays_float32(func):
    result = func(np.float32(0.3))
    assert isinstance(result, np.float32)
    assert float(result) == pytest.approx(func(0.3), abs=1e-5)


def test_nan_passes_through():
    assert math.isnan(ease.quadratic_in(math.nan))


def test_enum_covers_every_function():
    assert len(EaseFunction) == 30
    assert {kind.function for kind in EaseFunction} == set(ALL_FUNCS)


@pytest.mark.parametrize("kind", list(EaseFunction), ids=lambda k: k.value)
def test_calc_matches_named_function(kind):
    func = getattr(ease, kind.name.lower())
    for p in (-1.0, 0.0, 0.2, 0.5, 0.7, 1.0, 2.0):
        assert kind.calc(p) == func(p)
        assert kind(p) == func(p)


def test_easing_functions_table():
    assert EASING_FUNCTIONS["bounce-out"] is ease.bounce_out
    assert list(EASING_FUNCTIONS) == [kind.value for kind in EaseFunction]


def test_get_ease_resolves_names_members_and_callables():
    assert get_ease("elastic-in") is ease.elastic_in
    assert get_ease("ELASTIC_IN") is ease.elastic_in
    assert get_ease(EaseFunction.BACK_OUT) is ease.back_out
    custom = lambda t: t  # noqa: E731
    assert get_ease(custom) is custom


def test_get_ease_unknown_name_raises():
    with pytest.raises(KeyError, match="nope"):
        get_ease("nope")


def test_get_ease_rejects_non_callables():
    with pytest.raises(TypeError):
        get_ease(3)


@pytest.mark.parametrize("func", ALL_FUNCS, ids=lambda f: f.__name__)
def test_functions_are_documented_float_to_float(func):
    assert func.__doc__
    sig = inspect.signature(func)
    assert [p.annotation for p in sig.parameters.values()] == ["float"]
    assert sig.return_annotation == "float"
