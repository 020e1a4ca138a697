from __future__ import annotations

from datetime import date

import pandas as pd
import pytest

from eurojackpot.config import DEFAULT_CONFIG, ConfigurationError, GameConfig
from eurojackpot.history import draw_dates, generate_draw_history


def test_default_history_shape() -> None:
    df = generate_draw_history()
    assert len(df) == 200
    assert list(df.columns) == [
        "draw_number", "date", "day_of_week",
        "main1", "main2", "main3", "main4", "main5",
        "euro1", "euro2", "is_synthetic",
    ]
    assert df["draw_number"].tolist() == list(range(1, 201))
    assert df["is_synthetic"].all()


def test_every_draw_is_valid() -> None:
    df = generate_draw_history()
    for _, row in df.iterrows():
        main = [int(row[c]) for c in DEFAULT_CONFIG.main_cols]
        euro = [int(row[c]) for c in DEFAULT_CONFIG.euro_cols]
        assert len(set(main)) == 5
        assert len(set(euro)) == 2
        assert all(1 <= n <= 50 for n in main)
        assert all(1 <= n <= 12 for n in euro)
        assert main == sorted(main)
        assert euro == sorted(euro)


def test_history_is_reproducible() -> None:
    pd.testing.assert_frame_equal(generate_draw_history(), generate_draw_history())


def test_first_draw_pinned() -> None:
    first = generate_draw_history().iloc[0]
    assert [int(first[c]) for c in DEFAULT_CONFIG.main_cols] == [11, 15, 30, 46, 47]
    assert [int(first[c]) for c in DEFAULT_CONFIG.euro_cols] == [9, 12]


def test_twice_weekly_cadence() -> None:
    df = generate_draw_history()
    assert df["date"].iloc[0] == pd.Timestamp("2022-03-01")
    assert df["date"].iloc[-1] == pd.Timestamp("2024-01-26")
    assert set(df["day_of_week"]) == {"Tuesday", "Friday"}
    assert df["date"].is_monotonic_increasing


def test_draw_dates_skips_to_next_draw_day() -> None:
    # 2022-03-02 is a Wednesday
    assert draw_dates(date(2022, 3, 2), 3) == [
        date(2022, 3, 4), date(2022, 3, 8), date(2022, 3, 11),
    ]


def test_custom_config() -> None:
    config = GameConfig(total_draws=12, recent_window=4, main_high=10, euro_high=5,
                        history_seed=7)
    df = generate_draw_history(config)
    assert len(df) == 12
    assert df[config.main_cols].to_numpy().max() <= 10
    assert df[config.euro_cols].to_numpy().max() <= 5


@pytest.mark.parametrize("kwargs", [
    {"total_draws": 0, "recent_window": 1},
    {"recent_window": 0},
    {"recent_window": 201},
    {"main_low": 0},
    {"main_low": 10, "main_high": 10},
    {"euro_high": 1},
    {"main_picks": 51},
    {"euro_picks": 0},
    {"history_seed": 1.5},
    {"start_date": "2022-03-01"},
])
def test_invalid_config_rejected(kwargs) -> None:
    with pytest.raises(ConfigurationError):
        GameConfig(**kwargs)
