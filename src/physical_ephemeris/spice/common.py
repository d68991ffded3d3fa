"""Shared state for the SPICE position backend."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class SpiceState:
    """Kernel bookkeeping for the SPICE backend.

    Records which planet's kernel set is furnished so positions can be read
    without reloading. Modified by load_spice_files and reset_state.
    """

    planet_num: int = 0
    version: int = 0
    pool_loaded: bool = False
    kernels: list[str] = field(default_factory=list)

    def reset(self) -> None:
        """Forget loaded kernels (does not unload them from the kernel pool)."""
        self.planet_num = 0
        self.version = 0
        self.pool_loaded = False
        self.kernels = []


# Module-level singleton; the SPICE kernel pool is itself process-global.
_state = SpiceState()


def get_state() -> SpiceState:
    """Return the global SpiceState instance."""
    return _state
