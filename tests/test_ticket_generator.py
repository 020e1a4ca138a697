"""
Ticket generation tests, including the end-to-end golden fixture.

Golden fixture: 200 simulated draws, main 1-50, euro 1-12, recent window 20,
weights 0.5 / 0.25 / 0.2 / 0.05 and create_rng(7).
"""

from __future__ import annotations

import copy

import pytest

from eurojackpot.analysis import overdue_numbers
from eurojackpot.config import DEFAULT_WEIGHTS, ConfigurationError
from eurojackpot.models.ticket_generator import (
    generate_ticket,
    selection_probabilities,
    weighted_sample,
)
from eurojackpot.predictor import build_analysis
from eurojackpot.prng import create_rng

ZERO = {"frequency": 0.0, "momentum": 0.0, "overdue": 0.0, "randomness": 0.0}


def _assert_valid(ticket: dict) -> None:
    assert len(ticket["main"]) == 5
    assert len(ticket["euro"]) == 2
    assert len(set(ticket["main"])) == 5
    assert len(set(ticket["euro"])) == 2
    assert all(1 <= n <= 50 for n in ticket["main"])
    assert all(1 <= n <= 12 for n in ticket["euro"])
    assert ticket["main"] == sorted(ticket["main"])
    assert ticket["euro"] == sorted(ticket["euro"])


def test_golden_ticket(analysis: dict) -> None:
    ticket = generate_ticket(analysis["main_stats"], analysis["euro_stats"],
                             DEFAULT_WEIGHTS, create_rng(7))
    assert ticket == {"main": [1, 5, 25, 33, 49], "euro": [6, 8]}


def test_golden_ticket_survives_rebuild() -> None:
    rebuilt = build_analysis()
    ticket = generate_ticket(rebuilt["main_stats"], rebuilt["euro_stats"],
                             DEFAULT_WEIGHTS, create_rng(7))
    assert ticket == {"main": [1, 5, 25, 33, 49], "euro": [6, 8]}


@pytest.mark.parametrize("seed", range(50))
def test_tickets_are_valid(analysis: dict, seed: int) -> None:
    _assert_valid(generate_ticket(analysis["main_stats"], analysis["euro_stats"],
                                  DEFAULT_WEIGHTS, create_rng(seed)))


def test_same_rng_state_same_ticket(analysis: dict) -> None:
    weights = {"frequency": 0.1, "momentum": 0.9, "overdue": 0.3, "randomness": 0.7}
    a = generate_ticket(analysis["main_stats"], analysis["euro_stats"], weights, create_rng(555))
    b = generate_ticket(analysis["main_stats"], analysis["euro_stats"], weights, create_rng(555))
    assert a == b


def test_all_zero_weights_fall_back_to_uniform(analysis: dict) -> None:
    ticket = generate_ticket(analysis["main_stats"], analysis["euro_stats"],
                             ZERO, create_rng(7))
    _assert_valid(ticket)
    assert ticket == {"main": [1, 5, 26, 35, 49], "euro": [5, 7]}


def test_zero_weight_candidates_only_after_positive_ones() -> None:
    # Two positive candidates, then the pool collapses to zero weights
    picked = weighted_sample([1, 2, 3, 4, 5], [0.0, 0.7, 0.0, 0.3, 0.0], 4, create_rng(3))
    assert len(picked) == 4
    assert {2, 4} <= set(picked)


def test_single_positive_weight_always_chosen() -> None:
    for seed in range(20):
        picked = weighted_sample([10, 20, 30], [0.0, 1.0, 0.0], 1, create_rng(seed))
        assert picked == [20]


def test_inputs_not_mutated(analysis: dict) -> None:
    main = copy.deepcopy(analysis["main_stats"])
    euro = copy.deepcopy(analysis["euro_stats"])
    generate_ticket(analysis["main_stats"], analysis["euro_stats"],
                    DEFAULT_WEIGHTS, create_rng(1))
    assert analysis["main_stats"] == main
    assert analysis["euro_stats"] == euro


def test_pool_smaller_than_picks_rejected(analysis: dict) -> None:
    rng = create_rng(1)
    with pytest.raises(ConfigurationError):
        generate_ticket(analysis["main_stats"][:4], analysis["euro_stats"],
                        DEFAULT_WEIGHTS, rng)
    with pytest.raises(ConfigurationError):
        generate_ticket(analysis["main_stats"], analysis["euro_stats"],
                        DEFAULT_WEIGHTS, rng, euro_picks=13)
    # Rejected before any randomness was consumed
    assert rng.next() == create_rng(1).next()


def test_negative_weight_rejected(analysis: dict) -> None:
    with pytest.raises(ConfigurationError):
        generate_ticket(analysis["main_stats"], analysis["euro_stats"],
                        {**DEFAULT_WEIGHTS, "overdue": -0.2}, create_rng(1))


def test_overdue_weight_raises_mass_of_most_overdue(analysis: dict) -> None:
    main = analysis["main_stats"]
    target = overdue_numbers(main, 1)[0]["value"]

    baseline = selection_probabilities(main, {**DEFAULT_WEIGHTS, "overdue": 0.0})[target]
    previous = baseline
    for overdue in (0.1, 0.2, 0.5, 1.0):
        p = selection_probabilities(main, {**DEFAULT_WEIGHTS, "overdue": overdue})[target]
        assert p >= previous
        previous = p
    assert previous > baseline


def test_overdue_only_beats_uniform_baseline(analysis: dict) -> None:
    main = analysis["main_stats"]
    target = overdue_numbers(main, 1)[0]["value"]
    uniform = selection_probabilities(main, ZERO)
    overdue_only = selection_probabilities(main, {**ZERO, "overdue": 0.5})
    assert uniform[target] == pytest.approx(1 / 50)
    assert overdue_only[target] >= uniform[target]
    assert overdue_only[target] == max(overdue_only.values())


def test_selection_probabilities_sum_to_one(analysis: dict) -> None:
    probs = selection_probabilities(analysis["euro_stats"], DEFAULT_WEIGHTS)
    assert sum(probs.values()) == pytest.approx(1.0)
    assert set(probs) == set(range(1, 13))


def test_custom_pick_counts(analysis: dict) -> None:
    ticket = generate_ticket(analysis["main_stats"], analysis["euro_stats"],
                             DEFAULT_WEIGHTS, create_rng(3), main_picks=6, euro_picks=1)
    assert len(ticket["main"]) == 6
    assert len(ticket["euro"]) == 1
