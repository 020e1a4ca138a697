"""
Ticket Generation for EuroJackpot

Weighted sampling without replacement: each pick is a roulette-wheel draw
over the remaining candidates' composite scores, after which the chosen
number leaves the pool. A pool whose remaining scores are all zero falls back
to a uniform pick from the same generator, so a full ticket is always
produced.
"""

import numpy as np

from eurojackpot.config import MAIN_PICKS, EURO_PICKS, ConfigurationError
from eurojackpot.models.weighted_scoring import score_pool, validate_weights


def _check_pool_size(label, number_stat_list, picks):
    if picks < 1:
        raise ConfigurationError(f"{label} picks must be at least 1, got {picks}")
    if len(number_stat_list) < picks:
        raise ConfigurationError(
            f"{label} pool has {len(number_stat_list)} candidates, "
            f"cannot draw {picks}"
        )


def _roulette_pick(weights, rng):
    """Index of the chosen entry for one draw of *rng*."""
    cumulative = np.cumsum(weights)
    total = cumulative[-1]
    r = rng.next()
    if total <= 0.0:
        return min(int(r * len(weights)), len(weights) - 1)

    idx = int(np.searchsorted(cumulative, r * total, side="right"))
    if idx >= len(weights):
        # r * total rounded up to total: take the last entry with weight
        idx = int(np.flatnonzero(weights > 0.0)[-1])
    return idx


def weighted_sample(values, scores, count, rng):
    """Draw *count* distinct values, weighted by *scores*, sorted ascending."""
    pool_values = np.asarray(values, dtype=np.int64)
    pool_weights = np.asarray(scores, dtype=float)
    picked = []
    for _ in range(count):
        idx = _roulette_pick(pool_weights, rng)
        picked.append(int(pool_values[idx]))
        pool_values = np.delete(pool_values, idx)
        pool_weights = np.delete(pool_weights, idx)
    return sorted(picked)


def generate_ticket(main_stats, euro_stats, weights, rng,
                    main_picks=MAIN_PICKS, euro_picks=EURO_PICKS):
    """
    Generate one ticket from scored statistics.

    Parameters
    ----------
    main_stats, euro_stats : list of dict
        Number statistics (see eurojackpot.analysis.number_stats); not modified.
    weights : dict
        frequency / momentum / overdue / randomness, each in [0, 1].
    rng : Mulberry32
        Caller-owned generator; main numbers are drawn before euro numbers.

    Returns
    -------
    dict with 'main' and 'euro', each a sorted list of distinct ints.
    """
    weights = validate_weights(weights)
    _check_pool_size("main", main_stats, main_picks)
    _check_pool_size("euro", euro_stats, euro_picks)

    main_scores = score_pool(main_stats, weights)
    euro_scores = score_pool(euro_stats, weights)

    return {
        "main": weighted_sample([s["value"] for s in main_stats], main_scores, main_picks, rng),
        "euro": weighted_sample([s["value"] for s in euro_stats], euro_scores, euro_picks, rng),
    }


def selection_probabilities(number_stat_list, weights):
    """
    Probability of each value being the first pick from a full pool.

    Returns
    -------
    dict {value: probability}; uniform when every score is zero.
    """
    scores = np.asarray(score_pool(number_stat_list, weights), dtype=float)
    values = [s["value"] for s in number_stat_list]
    total = scores.sum()
    if total <= 0.0:
        return {v: 1.0 / len(values) for v in values}
    return {v: float(s / total) for v, s in zip(values, scores)}
