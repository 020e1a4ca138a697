"""
EuroJackpot Pro Analysis Core

Per-number statistics over a simulated draw history, a tunable composite
score, and weighted ticket generation. Lottery draws are memoryless; the
output is explainable and reproducible, not predictive.
"""

from eurojackpot.config import DEFAULT_CONFIG, DEFAULT_WEIGHTS, ConfigurationError, GameConfig
from eurojackpot.models.ticket_generator import generate_ticket
from eurojackpot.predictor import build_analysis
from eurojackpot.prng import create_rng

__all__ = [
    "build_analysis",
    "generate_ticket",
    "create_rng",
    "GameConfig",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "DEFAULT_WEIGHTS",
]
