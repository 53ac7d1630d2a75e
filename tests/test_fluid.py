from dataclasses import FrozenInstanceError

import pytest

from fluidkit import (ConfigurationError, FluidScaleConfig, compute_fluid_size,
                      fluid_calc, fluid_locks)

config = FluidScaleConfig(min_size=1, max_size=2, min_screen=20, max_screen=88)
widths = [i * 0.5 for i in range(300)]


def test_midpoint():
    # 54 is right between 20 and 88
    assert compute_fluid_size(54, config) == pytest.approx(1.5, abs=1e-9)
    assert compute_fluid_size(37, config) == pytest.approx(1.25, abs=1e-9)


def test_locks():
    assert compute_fluid_size(20, config) == 1
    assert compute_fluid_size(88, config) == 2
    assert compute_fluid_size(20, config, clamp=False) == 1
    assert compute_fluid_size(88, config, clamp=False) == 2
    assert fluid_locks(config) == ((1, 20), (2, 88))


def test_clamped():
    for w in (0, 10, 19.999, 20):
        assert compute_fluid_size(w, config) == 1
    for w in (88, 88.001, 100, 1e6):
        assert compute_fluid_size(w, config) == 2


def test_unclamped():
    assert compute_fluid_size(0, config, clamp=False) == pytest.approx(1 - 20 / 68)
    assert compute_fluid_size(156, config, clamp=False) == pytest.approx(3)
    # inside of the locks both agree
    for w in (21, 54, 87):
        assert compute_fluid_size(w, config, clamp=False) == compute_fluid_size(
            w, config
        )


def test_monotonic():
    sizes = [compute_fluid_size(w, config) for w in widths]
    assert sizes == sorted(sizes)
    assert all(1 <= size <= 2 for size in sizes)

    shrinking = FluidScaleConfig(min_size=2, max_size=1, min_screen=20, max_screen=88)
    sizes = [compute_fluid_size(w, shrinking) for w in widths]
    assert sizes == sorted(sizes, reverse=True)
    assert all(1 <= size <= 2 for size in sizes)


def test_continuous():
    eps = 1e-9
    assert compute_fluid_size(20 + eps, config) == pytest.approx(1, abs=1e-6)
    assert compute_fluid_size(88 - eps, config) == pytest.approx(2, abs=1e-6)


def test_invalid_config():
    with pytest.raises(ConfigurationError):
        FluidScaleConfig(min_size=1, max_size=2, min_screen=88, max_screen=20)
    with pytest.raises(ConfigurationError):
        FluidScaleConfig(min_size=1, max_size=2, min_screen=20, max_screen=20)
    with pytest.raises(ConfigurationError):
        FluidScaleConfig(min_size="1", max_size=2, min_screen=20, max_screen=88)  # type: ignore
    with pytest.raises(ConfigurationError):
        FluidScaleConfig(min_size=float("nan"), max_size=2, min_screen=20, max_screen=88)
    with pytest.raises(ConfigurationError):
        config.replace(max_screen=10)
    # a ConfigurationError is a ValueError
    with pytest.raises(ValueError):
        FluidScaleConfig(1, 2, 88, 20)


def test_immutable():
    with pytest.raises(FrozenInstanceError):
        config.min_size = 3  # type: ignore
    assert config.replace(max_size=3).max_size == 3
    assert config.max_size == 2


def test_invalid_width():
    with pytest.raises(ValueError):
        compute_fluid_size(-1, config)
    for width in (float("inf"), float("-inf"), float("nan")):
        with pytest.raises(ValueError):
            compute_fluid_size(width, config)
        with pytest.raises(ValueError):
            compute_fluid_size(width, config, clamp=False)


def test_linear_form():
    assert config.slope == pytest.approx(1 / 68)
    assert config.intercept == pytest.approx(1 - 20 / 68)
    for w in (20, 54, 88):
        assert config.intercept + config.slope * w == pytest.approx(
            compute_fluid_size(w, config)
        )


def test_fluid_calc():
    assert fluid_calc(config) == "calc(1rem + 1 * (100vw - 20rem) / 68)"
    assert fluid_calc(config, "px") == "calc(1px + 1 * (100vw - 20px) / 68)"
    shrinking = FluidScaleConfig(min_size=2, max_size=1.5, min_screen=20, max_screen=88)
    assert fluid_calc(shrinking) == "calc(2rem - 0.5 * (100vw - 20rem) / 68)"
