from .parallel import par, run_par
from .race import race, run_race

__all__ = (
    # Parallel
    "par",
    "run_par",
    # Race
    "race",
    "run_race",
)
