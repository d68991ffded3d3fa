"""Shared fixtures: isolate backend selection and SPICE kernel bookkeeping per test."""

from __future__ import annotations

import pytest

from physical_ephemeris.spice.common import get_state


@pytest.fixture(autouse=True)
def _isolated_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    """Each test starts on the default backend with no SPICE kernels recorded."""
    # Blank selects the default; set (not deleted) so the CLI's own setting is undone.
    monkeypatch.setenv('PHYSICAL_EPHEMERIS_BACKEND', '')
    get_state().reset()
