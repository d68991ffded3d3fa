"""Tests for the physical ephemeris of Jupiter."""

from __future__ import annotations

import math

import pytest

from physical_ephemeris import ephemeris
from physical_ephemeris.angle_utils import degrees_from_dms, limit_to_360
from physical_ephemeris.constants import EARTH_ID, JUPITER_ID, LIGHT_TIME_DAYS_PER_AU
from physical_ephemeris.ephemeris import (
    JupiterEphemeris,
    axis_position_angle,
    central_meridian_longitude,
    defect_corrected_longitude,
    eq_semidiameter,
    jupiter_ephemeris,
    jupiter_ephemeris_at,
    light_time_iteration,
    phase_correction,
    planetocentric_declination,
    pol_semidiameter,
    pole_coordinates,
)
from physical_ephemeris.heliocentric import HeliocentricPosition, heliocentric_position
from physical_ephemeris.planets import JUPITER_CONFIG
from physical_ephemeris.util import round_to_digits

REFERENCE_JD = 2448972.50068
REFERENCE_ARGS = (
    REFERENCE_JD,
    math.radians(23.4402069),
    math.radians(degrees_from_dms(0, 0, 16.86)),
    math.radians(degrees_from_dms(0, 0, -1.79)),
)

TWOPI = 2.0 * math.pi


def _assert_reference_values(eph: JupiterEphemeris) -> None:
    assert round_to_digits(math.degrees(eph.earth_latitude), 2) == -2.48
    assert round_to_digits(math.degrees(eph.sun_latitude), 2) == -2.20
    assert round_to_digits(limit_to_360(math.degrees(eph.axis_position_angle)), 2) == 24.80
    assert round_to_digits(math.degrees(eph.system1_longitude), 0) == 268.0
    assert round_to_digits(math.degrees(eph.system2_longitude), 2) == 72.74


def _fixed_positions(earth: HeliocentricPosition, target: HeliocentricPosition):  # type: ignore[no-untyped-def]
    """Stand-in solver returning the same positions at every instant."""

    def _position(body_id: int, jd: float) -> HeliocentricPosition:
        del jd
        return earth if body_id == EARTH_ID else target

    return _position


def test_reference_scenario_1992_dec_16() -> None:
    """Published values for 1992 December 16, 0h UT."""
    _assert_reference_values(jupiter_ephemeris(*REFERENCE_ARGS))


def test_reference_scenario_with_computed_nutation() -> None:
    """IAU 1980 obliquity and nutation reproduce the same rounded values."""
    _assert_reference_values(jupiter_ephemeris_at(REFERENCE_JD))


def test_result_fields_are_named_in_order() -> None:
    eph = jupiter_ephemeris(*REFERENCE_ARGS)
    d_e, d_s, w1, w2, p = eph
    assert d_e == eph.earth_latitude
    assert d_s == eph.sun_latitude
    assert w1 == eph.system1_longitude
    assert w2 == eph.system2_longitude
    assert p == eph.axis_position_angle


def test_ephemeris_is_deterministic() -> None:
    """Identical inputs give bit-identical outputs."""
    assert jupiter_ephemeris(*REFERENCE_ARGS) == jupiter_ephemeris(*REFERENCE_ARGS)


def test_solver_called_twice_for_target_once_for_earth(monkeypatch: pytest.MonkeyPatch) -> None:
    """Light-time loop runs exactly two passes; Earth is evaluated once."""
    calls: list[tuple[int, float]] = []

    def _counting(body_id: int, jd: float) -> HeliocentricPosition:
        calls.append((body_id, jd))
        return heliocentric_position(body_id, jd)

    monkeypatch.setattr('physical_ephemeris.ephemeris.heliocentric_position', _counting)
    jupiter_ephemeris(*REFERENCE_ARGS)

    assert [c[0] for c in calls].count(EARTH_ID) == 1
    jupiter_jds = [jd for body_id, jd in calls if body_id == JUPITER_ID]
    assert len(jupiter_jds) == 2
    assert jupiter_jds[0] == REFERENCE_JD
    # Second pass is about 5.66 AU of light time (~47 minutes) earlier.
    assert 0.031 < REFERENCE_JD - jupiter_jds[1] < 0.034


def test_light_time_iteration_uses_previous_pass_distance(monkeypatch: pytest.MonkeyPatch) -> None:
    """The second pass is evaluated at jd minus the first pass's light time."""
    earth = HeliocentricPosition(0.0, 0.0, 1.0)
    target = HeliocentricPosition(0.0, 0.0, 6.0)
    seen: list[float] = []

    def _position(body_id: int, jd: float) -> HeliocentricPosition:
        assert body_id == JUPITER_ID
        seen.append(jd)
        return target

    monkeypatch.setattr('physical_ephemeris.ephemeris.heliocentric_position', _position)
    solution = light_time_iteration(100.0, earth)

    assert seen[0] == 100.0
    assert seen[1] == pytest.approx(100.0 - 5.0 * LIGHT_TIME_DAYS_PER_AU)
    assert solution.distance == pytest.approx(5.0)
    assert solution.light_time == pytest.approx(5.0 * LIGHT_TIME_DAYS_PER_AU)
    assert tuple(solution.rect) == pytest.approx((5.0, 0.0, 0.0))
    assert solution.position == target


def test_defect_correction_formula() -> None:
    l = defect_corrected_longitude(1.0, 5.0, 4.0, JUPITER_CONFIG.defect_deg)
    assert l == pytest.approx(1.0 - math.radians(0.01299) * 4.0 / 25.0)


def test_pole_coordinates_at_rotation_epoch() -> None:
    asc0, dec0 = pole_coordinates(JUPITER_CONFIG.rotation_epoch_jd)
    assert math.degrees(asc0) == pytest.approx(268.0)
    assert math.degrees(dec0) == pytest.approx(64.5)
    asc0, dec0 = pole_coordinates(JUPITER_CONFIG.rotation_epoch_jd + 36525.0)
    assert math.degrees(asc0) == pytest.approx(268.1061)
    assert math.degrees(dec0) == pytest.approx(64.4836)


def test_planetocentric_declination_limits() -> None:
    """Looking along the pole puts the observer at the planet's south pole."""
    assert planetocentric_declination(1.0, 0.5, 1.0, 0.5) == pytest.approx(-math.pi / 2)
    assert planetocentric_declination(1.0, 0.5, 1.0 + math.pi, -0.5) == pytest.approx(math.pi / 2)
    assert planetocentric_declination(0.0, math.pi / 2, 0.3, 0.0) == pytest.approx(0.0)


def test_axis_position_angle_cardinal_directions() -> None:
    assert axis_position_angle(0.0, math.pi / 2, 1.0, 0.0) == pytest.approx(0.0)
    assert axis_position_angle(math.pi / 2, 0.0, 0.0, 0.0) == pytest.approx(math.pi / 2)
    assert axis_position_angle(-math.pi / 2, 0.0, 0.0, 0.0) == pytest.approx(-math.pi / 2)


@pytest.mark.parametrize('offset', [1e-9, 1e-4, 0.5, 3.0])
def test_phase_correction_sign_flips_at_conjunction_line(offset: float) -> None:
    """C changes sign with sin(l - l0) and keeps its magnitude."""
    l0 = 1.2
    ahead = phase_correction(5.2, 4.6, 1.0, l0 + offset, l0)
    behind = phase_correction(5.2, 4.6, 1.0, l0 - offset, l0)
    assert ahead > 0.0
    assert behind == -ahead


def test_phase_correction_is_sin_squared_half_phase() -> None:
    r, delta, R = 5.2, 4.6, 1.0
    cos_i = (r * r + delta * delta - R * R) / (2.0 * r * delta)
    half = math.acos(cos_i) / 2.0
    c = phase_correction(r, delta, R, 0.1, 0.0)
    assert c == pytest.approx(57.2958 * math.sin(half) ** 2)


def test_central_meridian_longitude_reduces_after_phase_correction() -> None:
    system = JUPITER_CONFIG.rotation_system('I')
    # W lands on 360 (zero); a negative C must wrap to just below 360.
    d = (360.0 - system.w0_deg) / system.rate_deg_day
    w = central_meridian_longitude(system, d, 0.0, 0.0, -0.5)
    assert math.degrees(w) == pytest.approx(359.5)


@pytest.mark.parametrize('jd', [-1.0e7, -12345.678, 0.0, REFERENCE_JD, 5.0e6, 1.0e9])
def test_central_meridians_in_range_for_any_jd(monkeypatch: pytest.MonkeyPatch, jd: float) -> None:
    """Central meridian longitudes are reduced to [0, 2*pi) for extreme day numbers."""
    monkeypatch.setattr(
        'physical_ephemeris.ephemeris.heliocentric_position',
        _fixed_positions(
            HeliocentricPosition(1.47, 0.0, 0.984),
            HeliocentricPosition(3.24, 0.0207, 5.406),
        ),
    )
    eph = jupiter_ephemeris(*(jd,) + REFERENCE_ARGS[1:])
    assert 0.0 <= eph.system1_longitude < TWOPI
    assert 0.0 <= eph.system2_longitude < TWOPI


def test_degenerate_geometry_propagates_non_finite(monkeypatch: pytest.MonkeyPatch) -> None:
    """Zero Earth-target distance yields nan rather than an exception."""
    same = HeliocentricPosition(1.0, 0.0, 1.0)
    monkeypatch.setattr(
        'physical_ephemeris.ephemeris.heliocentric_position', _fixed_positions(same, same)
    )
    eph = jupiter_ephemeris(*REFERENCE_ARGS)
    assert math.isnan(eph.system1_longitude)
    assert math.isnan(eph.system2_longitude)


def test_phase_correction_zero_distance_is_nan() -> None:
    assert math.isnan(phase_correction(5.2, 0.0, 1.0, 0.3, 0.0))
    assert math.isnan(defect_corrected_longitude(0.3, 0.0, 4.0, JUPITER_CONFIG.defect_deg))


def test_semidiameters() -> None:
    assert eq_semidiameter(1.0) == pytest.approx(math.radians(98.44 / 3600.0))
    assert pol_semidiameter(2.0) == pytest.approx(math.radians(92.06 / 3600.0) / 2.0)
    assert eq_semidiameter(4.0) > pol_semidiameter(4.0)


def test_module_exposes_fixed_pass_count() -> None:
    assert ephemeris.LIGHT_TIME_PASSES == 2
