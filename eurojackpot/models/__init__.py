"""
EuroJackpot Scoring and Sampling Models

Available models:
- weighted_scoring: Composite score from frequency, momentum, overdue and noise signals
- ticket_generator: Weighted sampling without replacement into a 5+2 ticket
"""

from . import weighted_scoring
from . import ticket_generator

__all__ = [
    "weighted_scoring",
    "ticket_generator",
]
