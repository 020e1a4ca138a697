"""
Synthetic EuroJackpot Draw History

No results are fetched from anywhere: the history is a documented simulation
of the twice-weekly draw (Tuesday and Friday) starting March 2022, generated
from a fixed internal seed so every downstream statistic is reproducible.
"""
from datetime import timedelta

import pandas as pd

from eurojackpot.config import DEFAULT_CONFIG, DRAW_WEEKDAYS
from eurojackpot.prng import create_rng

DAY_NAMES = {1: "Tuesday", 4: "Friday"}


def draw_dates(start_date, count):
    """Return the first *count* Tuesday/Friday dates on or after *start_date*."""
    dates = []
    current = start_date
    while len(dates) < count:
        if current.weekday() in DRAW_WEEKDAYS:
            dates.append(current)
        current += timedelta(days=1)
    return dates


def _sample_distinct(rng, low, high, count):
    """Rejection-sample *count* distinct values from low..high."""
    picked = []
    while len(picked) < count:
        n = rng.randint(low, high)
        if n not in picked:
            picked.append(n)
    return sorted(picked)


def generate_draw_history(config=None):
    """
    Build the synthetic draw history, oldest draw first.

    Parameters
    ----------
    config : GameConfig, optional
        Ranges, history size and seed. Defaults to DEFAULT_CONFIG.

    Returns
    -------
    pd.DataFrame with columns draw_number, date, day_of_week,
    main1..mainN, euro1..euroM, is_synthetic.
    """
    config = config or DEFAULT_CONFIG
    rng = create_rng(config.history_seed)
    main_cols = config.main_cols
    euro_cols = config.euro_cols

    rows = []
    for idx, current in enumerate(draw_dates(config.start_date, config.total_draws)):
        main_nums = _sample_distinct(rng, config.main_low, config.main_high, config.main_picks)
        euro_nums = _sample_distinct(rng, config.euro_low, config.euro_high, config.euro_picks)

        row = {
            "draw_number": idx + 1,
            "date": pd.Timestamp(current),
            "day_of_week": DAY_NAMES[current.weekday()],
        }
        row.update(zip(main_cols, main_nums))
        row.update(zip(euro_cols, euro_nums))
        row["is_synthetic"] = True
        rows.append(row)

    df = pd.DataFrame(rows, columns=["draw_number", "date", "day_of_week",
                                     *main_cols, *euro_cols, "is_synthetic"])
    print(f"[History] Simulated {len(df)} draws "
          f"({df['date'].min().date()} to {df['date'].max().date()}, seed {config.history_seed})")
    return df
