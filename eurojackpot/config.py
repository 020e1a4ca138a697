"""
Game configuration for the EuroJackpot analysis core.

EuroJackpot draws 5 main numbers from 1-50 and 2 euro numbers from 1-12,
every Tuesday and Friday since March 2022. The draw history used here is a
deterministic simulation of that cadence, so every seed below is fixed.
"""
import numbers
from datetime import date


class ConfigurationError(ValueError):
    """Raised for invalid ranges, seeds, weights or history sizes."""


# Number ranges
MAIN_LOW = 1
MAIN_HIGH = 50
MAIN_PICKS = 5
EURO_LOW = 1
EURO_HIGH = 12
EURO_PICKS = 2

# History simulation
TOTAL_DRAWS = 200
RECENT_WINDOW = 20
START_DATE = date(2022, 3, 1)
DRAW_WEEKDAYS = (1, 4)  # Tuesday, Friday
HISTORY_SEED = 20220301
NOISE_SEED = 1337

# Current absence of OVERDUE_SPAN average gaps maps to overdue weight 1.0
OVERDUE_SPAN = 2.0

DEFAULT_WEIGHTS = {
    "frequency": 0.5,
    "momentum": 0.25,
    "overdue": 0.2,
    "randomness": 0.05,
}


def _require_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    return int(value)


class GameConfig:
    """
    Ranges, history size and seeds for one analysis snapshot.

    All values are validated on construction; an invalid configuration never
    reaches the history generator.
    """

    def __init__(self, main_low=MAIN_LOW, main_high=MAIN_HIGH, main_picks=MAIN_PICKS,
                 euro_low=EURO_LOW, euro_high=EURO_HIGH, euro_picks=EURO_PICKS,
                 total_draws=TOTAL_DRAWS, recent_window=RECENT_WINDOW,
                 start_date=START_DATE, history_seed=HISTORY_SEED,
                 noise_seed=NOISE_SEED):
        self.main_low = _require_int("main_low", main_low)
        self.main_high = _require_int("main_high", main_high)
        self.main_picks = _require_int("main_picks", main_picks)
        self.euro_low = _require_int("euro_low", euro_low)
        self.euro_high = _require_int("euro_high", euro_high)
        self.euro_picks = _require_int("euro_picks", euro_picks)
        self.total_draws = _require_int("total_draws", total_draws)
        self.recent_window = _require_int("recent_window", recent_window)
        self.history_seed = _require_int("history_seed", history_seed)
        self.noise_seed = _require_int("noise_seed", noise_seed)
        if not isinstance(start_date, date):
            raise ConfigurationError(f"start_date must be a date, got {start_date!r}")
        self.start_date = start_date

        self._check_pool("main", self.main_low, self.main_high, self.main_picks)
        self._check_pool("euro", self.euro_low, self.euro_high, self.euro_picks)

        if self.total_draws < 1:
            raise ConfigurationError(
                f"total_draws must be at least 1, got {self.total_draws}"
            )
        if not 1 <= self.recent_window <= self.total_draws:
            raise ConfigurationError(
                f"recent_window must be within 1..{self.total_draws}, "
                f"got {self.recent_window}"
            )

    @staticmethod
    def _check_pool(label, low, high, picks):
        if low < 1:
            raise ConfigurationError(f"{label} range must start at 1 or above, got {low}")
        if high <= low:
            raise ConfigurationError(
                f"{label} range is empty or degenerate: {low}..{high}"
            )
        if not 1 <= picks <= high - low + 1:
            raise ConfigurationError(
                f"{label} picks must be within 1..{high - low + 1}, got {picks}"
            )

    @property
    def main_cols(self):
        return [f"main{i}" for i in range(1, self.main_picks + 1)]

    @property
    def euro_cols(self):
        return [f"euro{i}" for i in range(1, self.euro_picks + 1)]

    @property
    def main_size(self):
        return self.main_high - self.main_low + 1

    @property
    def euro_size(self):
        return self.euro_high - self.euro_low + 1

    def __repr__(self):
        return (
            f"GameConfig(main={self.main_picks} of {self.main_low}-{self.main_high}, "
            f"euro={self.euro_picks} of {self.euro_low}-{self.euro_high}, "
            f"draws={self.total_draws}, recent_window={self.recent_window})"
        )


DEFAULT_CONFIG = GameConfig()
