from __future__ import annotations

import pandas as pd
import pytest

from eurojackpot.predictor import build_analysis


@pytest.fixture(scope="session")
def analysis() -> dict:
    """Default snapshot, built once for the whole test session."""
    return build_analysis()


@pytest.fixture
def tiny_history() -> pd.DataFrame:
    """
    Five draws of two numbers from 1..5, small enough to check by hand.

    Value 5 never appears; value 4 only in the last draw.
    """
    return pd.DataFrame({
        "main1": [1, 1, 2, 1, 3],
        "main2": [2, 3, 3, 2, 4],
    })
