"""Colour gradients for simulation overlays."""

from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def lerp_color(a: Color, b: Color, t: float) -> Color:
    """Linear interpolation between two colours, with t clamped to [0, 1]."""
    t = _clamp(t, 0.0, 1.0)
    return Color(*(int(ca + (cb - ca) * t) for ca, cb in zip(a, b)))


_BLUE = Color(0, 100, 255, 200)
_WHITE = Color(255, 255, 255, 200)
_RED = Color(255, 50, 50, 200)


def pressure_to_color(
    density: float, min_rho: float = 0.8, max_rho: float = 1.2
) -> Color:
    """Blue for low density, white in the middle, red for high."""
    normalized = _clamp((density - min_rho) / (max_rho - min_rho), 0.0, 1.0)
    if normalized < 0.5:
        return lerp_color(_BLUE, _WHITE, normalized * 2.0)
    return lerp_color(_WHITE, _RED, (normalized - 0.5) * 2.0)


_TEMP_STOPS = (
    Color(0, 0, 128, 200),
    Color(0, 200, 255, 200),
    Color(0, 255, 100, 200),
    Color(255, 255, 0, 200),
    Color(255, 50, 0, 200),
)


def temperature_to_color(
    temp_k: float, min_temp: float = 200.0, max_temp: float = 600.0
) -> Color:
    """Blue through cyan, green and yellow to red as temperature rises."""
    normalized = _clamp((temp_k - min_temp) / (max_temp - min_temp), 0.0, 1.0)
    segment = min(int(normalized * 4.0), 3)
    t = (normalized - segment * 0.25) * 4.0
    return lerp_color(_TEMP_STOPS[segment], _TEMP_STOPS[segment + 1], t)


def oxygen_to_color(
    o2_fraction: float, danger: float = 0.16, normal: float = 0.21
) -> Color:
    """Red below the danger level, fading to transparent green at normal."""
    if o2_fraction < danger:
        return Color(255, 0, 0, 180)
    if o2_fraction < normal:
        t = (o2_fraction - danger) / (normal - danger)
        return lerp_color(Color(255, 100, 0, 150), Color(100, 200, 100, 100), t)
    return Color(100, 200, 100, 50)