"""
Analysis Snapshot & Recommended Tickets for EuroJackpot

Builds the read-only analysis snapshot (history -> statistics -> scores) and
the three pre-computed example tickets shown next to it.
"""
from eurojackpot.analysis import distribution_summary, pool_stats
from eurojackpot.config import DEFAULT_CONFIG, DEFAULT_WEIGHTS
from eurojackpot.history import generate_draw_history
from eurojackpot.models.ticket_generator import generate_ticket
from eurojackpot.models.weighted_scoring import apply_scores, attach_noise
from eurojackpot.prng import create_rng


RECOMMENDATION_PROFILES = [
    {
        "id": "balanced",
        "title": "Balanced Mix",
        "description": "Long-term hit rates first, with a measured share of "
                       "momentum and overdue pressure.",
        "weights": dict(DEFAULT_WEIGHTS),
        "seed": 101,
    },
    {
        "id": "momentum",
        "title": "Hot Streak",
        "description": "Leans on numbers that hit often in the recent window.",
        "weights": {"frequency": 0.2, "momentum": 0.6, "overdue": 0.1, "randomness": 0.1},
        "seed": 202,
    },
    {
        "id": "overdue",
        "title": "Comeback Candidates",
        "description": "Favors numbers that have paused longer than their "
                       "average gap.",
        "weights": {"frequency": 0.2, "momentum": 0.1, "overdue": 0.6, "randomness": 0.1},
        "seed": 303,
    },
]


def build_recommendations(main_stats, euro_stats, config=None):
    """Generate one ticket per fixed profile, each from its own seed."""
    config = config or DEFAULT_CONFIG
    recommendations = []
    for profile in RECOMMENDATION_PROFILES:
        ticket = generate_ticket(main_stats, euro_stats, profile["weights"],
                                 create_rng(profile["seed"]),
                                 main_picks=config.main_picks,
                                 euro_picks=config.euro_picks)
        recommendations.append({
            "id": profile["id"],
            "title": profile["title"],
            "description": profile["description"],
            "weights": dict(profile["weights"]),
            "seed": profile["seed"],
            "main": ticket["main"],
            "euro": ticket["euro"],
        })
        print(f"[Recommendations] {profile['title']}: "
              f"{ticket['main']} + {ticket['euro']}")
    return recommendations


def build_analysis(config=None):
    """
    Build the analysis snapshot.

    Deterministic: every call with the same config returns equal data.

    Returns
    -------
    dict with:
        'main_stats', 'euro_stats': list of number statistics, each with
            'noise' and 'composite_score' (under DEFAULT_WEIGHTS)
        'distribution': distribution summary of the history
        'recommendations': three pre-computed tickets
        'history': the simulated draw DataFrame
        'config': the GameConfig used
    """
    config = config or DEFAULT_CONFIG
    print("[Analysis] Building snapshot for " + repr(config))

    history = generate_draw_history(config)
    pools = pool_stats(history, config)

    # Noise is drawn once per snapshot from its own generator, main pool first
    noise_rng = create_rng(config.noise_seed)
    main_stats = apply_scores(attach_noise(pools["main"], noise_rng), DEFAULT_WEIGHTS)
    euro_stats = apply_scores(attach_noise(pools["euro"], noise_rng), DEFAULT_WEIGHTS)

    distribution = distribution_summary(history, config)
    print(f"[Analysis] Avg main sum {distribution['average_main_sum']:.1f}, "
          f"avg even mains {distribution['average_main_even']:.2f}, "
          f"avg low euros {distribution['average_euro_low']:.2f}")

    return {
        "main_stats": main_stats,
        "euro_stats": euro_stats,
        "distribution": distribution,
        "recommendations": build_recommendations(main_stats, euro_stats, config),
        "history": history,
        "config": config,
    }
