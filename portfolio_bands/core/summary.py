"""Summary statistic rows for the results table."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional, Tuple, Union

import pandas as pd

from ..models.results import FinalStats, SummaryRow
from ..utils.numbers import format_currency, format_percent, is_finite_number

CURRENCY_ROWS = (
    ("min", "Min Final Value"),
    ("median", "Median Final Value"),
    ("mean", "Mean Final Value"),
    ("max", "Max Final Value"),
)
CAGR_LABEL = "Simulated CAGR"
SUCCESS_RATE_LABEL = "Success Rate"
CAGR_DECIMALS = 2
SUCCESS_RATE_DECIMALS = 1

StatsLike = Union[FinalStats, Mapping[str, float]]


def _stat(final_stats: StatsLike, key: str) -> Optional[float]:
    if isinstance(final_stats, Mapping):
        return final_stats.get(key)
    return getattr(final_stats, key, None)


def build_summary(
    final_stats: StatsLike,
    success_rate: float,
    simulated_cagr: Optional[float] = None,
) -> Tuple[SummaryRow, ...]:
    """
    Format final-value statistics into ordered table rows.

    Row order is always Min, Median, Mean, Max, Simulated CAGR, Success Rate.
    The CAGR row is left out entirely when the rate is missing or not a
    finite number.
    """
    rows = [
        SummaryRow(label=label, display_value=format_currency(_stat(final_stats, key)))
        for key, label in CURRENCY_ROWS
    ]
    if is_finite_number(simulated_cagr):
        rows.append(
            SummaryRow(
                label=CAGR_LABEL,
                display_value=format_percent(simulated_cagr, decimals=CAGR_DECIMALS),
            )
        )
    rows.append(
        SummaryRow(
            label=SUCCESS_RATE_LABEL,
            display_value=format_percent(success_rate, decimals=SUCCESS_RATE_DECIMALS),
        )
    )
    return tuple(rows)


def simulated_cagr(
    mean_final_value: float,
    initial_value: float,
    periods: int,
) -> Optional[float]:
    """
    Annualised growth from ``initial_value`` to the mean final value.

    A negative mean counts as a total loss (-100%). Returns ``None`` when the
    inputs cannot describe a growth rate.
    """
    if not is_finite_number(mean_final_value) or not is_finite_number(initial_value):
        return None
    if initial_value <= 0 or periods <= 0:
        return None
    years = periods / 12.0
    if mean_final_value < 0:
        return -1.0
    return (mean_final_value / initial_value) ** (1.0 / years) - 1.0


def rows_to_frame(rows: Iterable[SummaryRow]) -> pd.DataFrame:
    """Tabulate summary rows with ``statistic`` and ``value`` columns."""
    return pd.DataFrame(
        [(row.label, row.display_value) for row in rows],
        columns=["statistic", "value"],
    )


__all__ = ["build_summary", "rows_to_frame", "simulated_cagr"]
