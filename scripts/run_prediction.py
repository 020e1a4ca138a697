#!/usr/bin/env python3
"""
Standalone analysis script.
Builds the snapshot, prints the rankings and recommended tickets, then
generates one ticket for the given seed (default 7).

Usage: python scripts/run_prediction.py [seed]
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eurojackpot.analysis import cold_numbers, hot_fingerprints, hot_numbers, overdue_numbers
from eurojackpot.config import DEFAULT_WEIGHTS
from eurojackpot.models.ticket_generator import generate_ticket, selection_probabilities
from eurojackpot.predictor import build_analysis
from eurojackpot.prng import create_rng


def _print_ranking(title, stats, extra):
    print(f"\n  {title}:")
    for i, s in enumerate(stats):
        print(f"    {i+1:2d}. Number {s['value']:2d} - hit rate {s['hit_rate']:.1%}, {extra(s)}")


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 7

    print("Building analysis...")
    analysis = build_analysis()
    dist = analysis["distribution"]

    print(f"\n{'='*70}")
    print("HISTORICAL CORE DATA")
    print(f"{'='*70}")
    print(f"  Draws analysed:       {dist['total_draws']} "
          f"({dist['first_draw_date'].date()} to {dist['last_draw_date'].date()}, simulated)")
    print(f"  Avg main number sum:  {dist['average_main_sum']:.1f}")
    print(f"  Avg even main numbers: {dist['average_main_even']:.2f}")
    print(f"  Avg low euro numbers: {dist['average_euro_low']:.2f}")
    print(f"  Uniformity p-value:   main {dist['main_uniformity_p']:.3f}, "
          f"euro {dist['euro_uniformity_p']:.3f}")

    main_stats = analysis["main_stats"]
    euro_stats = analysis["euro_stats"]

    _print_ranking("Hottest main numbers", hot_numbers(main_stats),
                   lambda s: f"score {s['composite_score']:.3f}")
    _print_ranking("Overdue main numbers", overdue_numbers(main_stats),
                   lambda s: f"last seen {s['last_seen_draws_ago']} draws ago")
    _print_ranking("Cold main numbers", cold_numbers(main_stats),
                   lambda s: f"{s['hits']} hits")
    _print_ranking("Hottest euro numbers", hot_numbers(euro_stats, 6),
                   lambda s: f"{s['recent_hits']} recent hits")

    fp = hot_fingerprints(analysis)
    print(f"\n  Momentum: hot numbers hit in {fp['momentum_share']:.2f} of the last draws")
    print(f"  Overdue pressure: number {fp['longest_wait_number']} "
          f"has waited {fp['longest_wait']} draws")

    print(f"\n{'='*70}")
    print("RECOMMENDED TICKETS")
    print(f"{'='*70}")
    for rec in analysis["recommendations"]:
        print(f"\n  {rec['title']} [{rec['id']}]: "
              f"{' - '.join(str(n) for n in rec['main'])} / "
              f"{' - '.join(str(n) for n in rec['euro'])}")
        print(f"    {rec['description']}")

    ticket = generate_ticket(main_stats, euro_stats, DEFAULT_WEIGHTS, create_rng(seed))
    probs = selection_probabilities(main_stats, DEFAULT_WEIGHTS)
    print(f"\n{'='*70}")
    print(f"TICKET FOR SEED #{seed}")
    print(f"{'='*70}")
    print(f"  Main: {' - '.join(f'{n:02d}' for n in ticket['main'])}")
    print(f"  Euro: {' - '.join(f'{n:02d}' for n in ticket['euro'])}")
    print(f"  First-pick probability of chosen mains: "
          f"{', '.join(f'{probs[n]:.3f}' for n in ticket['main'])}")

    print(f"\n{'='*70}")
    print("DISCLAIMER: Lottery draws are random and memoryless. Scores describe")
    print("the simulated history; they do not improve the odds. Play responsibly.")
    print(f"{'='*70}")


if __name__ == "__main__":
    main()
