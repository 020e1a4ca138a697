"""
Weighted Scoring Model for EuroJackpot

Scores every candidate number as a composite of four signals, each in [0, 1]:
- Frequency:  hit rate, min-max normalized across the pool
- Momentum:   share of the recent window in which the number hit
- Overdue:    current absence relative to the number's own average gap
- Randomness: fixed per-number noise drawn once per snapshot

The weights need not sum to 1; the composite is divided by their total.
All-zero weights score every number 0, which makes ticket sampling uniform.
"""

import math
import numbers

import numpy as np

from eurojackpot.config import ConfigurationError

WEIGHT_KEYS = ("frequency", "momentum", "overdue", "randomness")


def validate_weights(weights):
    """Return *weights* as a dict of floats, or raise ConfigurationError."""
    if weights is None:
        raise ConfigurationError("weights are required")
    missing = [k for k in WEIGHT_KEYS if k not in weights]
    unknown = [k for k in weights if k not in WEIGHT_KEYS]
    if missing or unknown:
        raise ConfigurationError(
            f"weights must have exactly {list(WEIGHT_KEYS)}; "
            f"missing={missing}, unknown={unknown}"
        )

    clean = {}
    for key in WEIGHT_KEYS:
        w = weights[key]
        if isinstance(w, bool) or not isinstance(w, numbers.Real):
            raise ConfigurationError(f"weight {key!r} must be a number, got {w!r}")
        w = float(w)
        if math.isnan(w) or w < 0.0 or w > 1.0:
            raise ConfigurationError(f"weight {key!r} must be within [0, 1], got {w}")
        clean[key] = w
    return clean


def _normalize_hit_rates(number_stat_list):
    """Min-max normalize hit rates to [0, 1]; a flat pool maps to 0.5."""
    rates = np.array([s["hit_rate"] for s in number_stat_list], dtype=float)
    mn, mx = rates.min(), rates.max()
    if mx - mn < 1e-12:
        return [0.5] * len(rates)
    return [float((r - mn) / (mx - mn)) for r in rates]


def composite_score(stat, weights, frequency_signal):
    """
    Weighted average of the four signals for one number.

    *frequency_signal* is the number's normalized hit rate, which depends on
    the whole pool and is therefore computed by the caller.
    """
    total = weights["frequency"] + weights["momentum"] + weights["overdue"] + weights["randomness"]
    if total <= 0.0:
        return 0.0
    score = (weights["frequency"] * frequency_signal
             + weights["momentum"] * stat["recent_weight"]
             + weights["overdue"] * stat["overdue_weight"]
             + weights["randomness"] * stat.get("noise", 0.0))
    return score / total


def score_pool(number_stat_list, weights):
    """Composite score for each stat, in the same order."""
    weights = validate_weights(weights)
    if not number_stat_list:
        return []
    frequency = _normalize_hit_rates(number_stat_list)
    return [composite_score(s, weights, f) for s, f in zip(number_stat_list, frequency)]


def attach_noise(number_stat_list, rng):
    """Copies of the stats carrying one noise draw each, in pool order."""
    return [{**s, "noise": rng.next()} for s in number_stat_list]


def apply_scores(number_stat_list, weights):
    """Copies of the stats with composite_score set under *weights*."""
    scores = score_pool(number_stat_list, weights)
    return [{**s, "composite_score": score} for s, score in zip(number_stat_list, scores)]
