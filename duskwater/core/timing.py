# duskwater/core/timing.py
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class SimulationTime:
    # Simulated seconds added per tick (e.g. 0.0166 for 60hz).
    # Wall-clock time between ticks never enters into it.
    fixed_delta_seconds: float = 1.0 / 60.0

    # Total simulated time; drives the water surface animation phase
    elapsed_seconds: float = 0.0

    # Number of ticks advanced so far
    tick_count: int = 0

    def advanced(self) -> "SimulationTime":
        """Returns the state one fixed step later."""
        return replace(
            self,
            elapsed_seconds=self.elapsed_seconds + self.fixed_delta_seconds,
            tick_count=self.tick_count + 1,
        )
