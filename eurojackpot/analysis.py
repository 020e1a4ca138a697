"""
EuroJackpot - Per-Number Statistics Engine

Aggregates the draw history into one statistics record per candidate number
(main and euro pools separately), plus descriptive summaries of the history
and the hot / cold / overdue rankings shown on the dashboard.

Data schema expected:
    draw_number, date, day_of_week, main1-main5, euro1-euro2, is_synthetic

Draws are ordered oldest first.
"""

import numpy as np
import pandas as pd
from scipy import stats

from eurojackpot.config import DEFAULT_CONFIG, OVERDUE_SPAN, ConfigurationError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _draw_matrix(df: pd.DataFrame, columns) -> np.ndarray:
    """Return the drawn numbers as an int array of shape (draws, picks)."""
    return df[columns].to_numpy(dtype=np.int64)


def _overdue_weight(last_seen: int, hits: int, total_draws: int) -> float:
    """Current absence relative to the number's own average gap, in [0, 1]."""
    if hits == 0:
        return 1.0
    average_gap = total_draws / hits
    return min(1.0, last_seen / (OVERDUE_SPAN * average_gap))


# ===================================================================
# 1. Number Statistics
# ===================================================================

def number_stats(df: pd.DataFrame, columns, low: int, high: int,
                 recent_window: int) -> list:
    """
    Single pass over the history with per-value running state.

    For every value in low..high computes hits, hit rate, hits within the
    last *recent_window* draws, draws since last seen, the longest run of
    draws without the value (leading and trailing runs included) and the
    normalized overdue weight.

    Returns
    -------
    list of dicts, one per value in ascending order, with keys value, hits, hit_rate,
    recent_hits, recent_weight, last_seen_draws_ago, longest_gap, average_gap,
    overdue_weight.
    """
    total_draws = len(df)
    if total_draws == 0:
        raise ConfigurationError("draw history is empty")
    if not 1 <= recent_window <= total_draws:
        raise ConfigurationError(
            f"recent_window must be within 1..{total_draws}, got {recent_window}"
        )

    draws = _draw_matrix(df, columns)
    if draws.size and (draws.min() < low or draws.max() > high):
        raise ConfigurationError(
            f"history columns {columns} contain values outside {low}..{high}"
        )

    size = high - low + 1
    hits = np.zeros(size, dtype=np.int64)
    recent_hits = np.zeros(size, dtype=np.int64)
    last_index = np.full(size, -1, dtype=np.int64)
    longest_gap = np.zeros(size, dtype=np.int64)
    recent_start = total_draws - recent_window

    for idx, row in enumerate(draws):
        for n in row:
            i = n - low
            # Run of misses since the previous hit (or since the first draw)
            longest_gap[i] = max(longest_gap[i], idx - last_index[i] - 1)
            last_index[i] = idx
            hits[i] += 1
            if idx >= recent_start:
                recent_hits[i] += 1

    results = []
    for i in range(size):
        n_hits = int(hits[i])
        if n_hits:
            last_seen = total_draws - 1 - int(last_index[i])
            gap = max(int(longest_gap[i]), last_seen)
        else:
            last_seen = total_draws
            gap = total_draws
        results.append({
            "value": low + i,
            "hits": n_hits,
            "hit_rate": n_hits / total_draws,
            "recent_hits": int(recent_hits[i]),
            "recent_weight": int(recent_hits[i]) / recent_window,
            "last_seen_draws_ago": last_seen,
            "longest_gap": gap,
            "average_gap": total_draws / max(n_hits, 1),
            "overdue_weight": _overdue_weight(last_seen, n_hits, total_draws),
        })
    return results


def pool_stats(df: pd.DataFrame, config=None) -> dict:
    """Number statistics for both pools under *config*."""
    config = config or DEFAULT_CONFIG
    print(f"[Stats] Aggregating {len(df)} draws "
          f"(recent window {config.recent_window})...")
    return {
        "main": number_stats(df, config.main_cols, config.main_low,
                             config.main_high, config.recent_window),
        "euro": number_stats(df, config.euro_cols, config.euro_low,
                             config.euro_high, config.recent_window),
    }


# ===================================================================
# 2. Distribution Summary
# ===================================================================

def _uniformity_p(df: pd.DataFrame, columns, low: int, high: int) -> float:
    """Chi-square p-value of the observed counts against a uniform draw."""
    flat = _draw_matrix(df, columns).flatten()
    observed = np.bincount(flat - low, minlength=high - low + 1)
    _, p_value = stats.chisquare(observed)
    return float(p_value)


def distribution_summary(df: pd.DataFrame, config=None) -> dict:
    """
    Aggregate descriptive statistics over the whole history.

    Returns
    -------
    dict with keys:
        total_draws       : int
        average_main_sum  : mean sum of the main numbers per draw
        average_main_even : mean count of even main numbers per draw
        average_euro_low  : mean count of euro numbers in the lower half
        recent_window     : size of the momentum window
        first_draw_date, last_draw_date : pd.Timestamp
        main_uniformity_p, euro_uniformity_p : chi-square p-values
    """
    config = config or DEFAULT_CONFIG
    if len(df) == 0:
        raise ConfigurationError("draw history is empty")

    main = df[config.main_cols]
    euro = df[config.euro_cols]
    euro_low_max = config.euro_low + config.euro_size // 2 - 1

    return {
        "total_draws": len(df),
        "average_main_sum": float(main.sum(axis=1).mean()),
        "average_main_even": float((main % 2 == 0).sum(axis=1).mean()),
        "average_euro_low": float((euro <= euro_low_max).sum(axis=1).mean()),
        "recent_window": config.recent_window,
        "first_draw_date": df["date"].min(),
        "last_draw_date": df["date"].max(),
        "main_uniformity_p": _uniformity_p(df, config.main_cols,
                                           config.main_low, config.main_high),
        "euro_uniformity_p": _uniformity_p(df, config.euro_cols,
                                           config.euro_low, config.euro_high),
    }


# ===================================================================
# 3. Hot / Cold / Overdue Rankings
# ===================================================================

def stats_dataframe(number_stat_list) -> pd.DataFrame:
    """Tabular view of a list of number statistics, one row per value."""
    return pd.DataFrame(list(number_stat_list))


def _top(number_stat_list, key, n, descending):
    frame = stats_dataframe(number_stat_list)
    frame["_key"] = key(frame)
    frame = frame.sort_values(["_key", "value"], ascending=[not descending, True],
                              kind="mergesort")
    keep = frame.index[:n]
    return [number_stat_list[i] for i in keep]


def hot_numbers(number_stat_list, n=10):
    """Highest composite score first."""
    return _top(number_stat_list, lambda f: f["composite_score"], n, descending=True)


def cold_numbers(number_stat_list, n=10):
    """Fewest hits over the whole history first."""
    return _top(number_stat_list, lambda f: f["hits"], n, descending=False)


def overdue_numbers(number_stat_list, n=10):
    """Most overdue first; current absence breaks ties between saturated weights."""
    return _top(number_stat_list,
                lambda f: f["overdue_weight"] + f["last_seen_draws_ago"] * 0.01,
                n, descending=True)


def hot_fingerprints(snapshot: dict) -> dict:
    """
    Short descriptive facts about the current hot streaks.

    Returns
    -------
    dict with keys:
        momentum_share      : recent hits of the 5 hottest main numbers per
                              draw in the recent window
        longest_wait        : draws since the most overdue main number hit
        longest_wait_number : that number
        top_euro            : list of (value, recent_hits) for the 2 hottest
                              euro numbers
    """
    recent_window = snapshot["distribution"]["recent_window"]
    hot_main = hot_numbers(snapshot["main_stats"], 5)
    overdue_main = overdue_numbers(snapshot["main_stats"], 1)
    hot_euro = hot_numbers(snapshot["euro_stats"], 2)

    return {
        "momentum_share": sum(s["recent_hits"] for s in hot_main) / recent_window,
        "longest_wait": overdue_main[0]["last_seen_draws_ago"] if overdue_main else 0,
        "longest_wait_number": overdue_main[0]["value"] if overdue_main else None,
        "top_euro": [(s["value"], s["recent_hits"]) for s in hot_euro],
    }
