"""Future value of an investment under monthly compounding.

All amounts are plain floats; nothing is rounded here. Presentation rounds
to two decimals (see ``core.formatting``).

Order of operations per monthly period:
  - start timing: deposit the contribution, then apply growth
  - end timing:   apply growth, then deposit the contribution
which collapses to the closed-form annuity / annuity-due terms below.
"""

from __future__ import annotations

import math
from typing import Tuple

from compound_interest.schemas.interest import (
    ContributionFrequency,
    ContributionTiming,
    DurationUnit,
    InterestInputs,
    InterestResult,
)

MONTHS_PER_YEAR = 12
DAYS_PER_YEAR = 365.25


def total_periods(duration: float, unit: DurationUnit) -> float:
    """Number of monthly compounding periods in the term."""
    if unit == "years":
        return duration * MONTHS_PER_YEAR
    return duration


def periodic_rate(interest_rate: float) -> float:
    """Nominal annual percentage -> monthly decimal rate."""
    return interest_rate / 100 / MONTHS_PER_YEAR


def monthly_contribution(amount: float, frequency: ContributionFrequency) -> float:
    if frequency == "annual":
        return amount / MONTHS_PER_YEAR
    return amount


def growth_factor(rate: float, periods: float) -> float:
    """(1 + rate) ** periods, saturating to inf instead of raising OverflowError."""
    try:
        return (1 + rate) ** periods
    except OverflowError:
        return math.inf


def annuity_ordinary(contribution: float, rate: float, periods: float) -> float:
    """Future value of equal deposits made at the end of each period."""
    assert rate != 0, "periodic rate must be non-zero"
    return contribution * (growth_factor(rate, periods) - 1) / rate


def annuity_due(contribution: float, rate: float, periods: float) -> float:
    """Future value of equal deposits made at the start of each period."""
    return annuity_ordinary(contribution, rate, periods) * (1 + rate)


def passive_income(balance: float, rate: float) -> Tuple[float, float, float]:
    """Return (daily, monthly, yearly) income the balance yields at ``rate``."""
    monthly = balance * rate
    yearly = monthly * MONTHS_PER_YEAR
    daily = yearly / DAYS_PER_YEAR
    return daily, monthly, yearly


def compute(inputs: InterestInputs) -> InterestResult:
    """Compound the initial capital and contributions over the whole term."""
    periods = total_periods(inputs.investment_duration, inputs.duration_unit)
    rate = periodic_rate(inputs.interest_rate)
    contribution = monthly_contribution(
        inputs.periodic_contribution, inputs.contribution_frequency
    )

    balance = 0.0
    if inputs.initial_capital > 0:
        balance = inputs.initial_capital * growth_factor(rate, periods)

    if contribution > 0:
        if inputs.contribution_timing == "start":
            balance += annuity_due(contribution, rate, periods)
        else:
            balance += annuity_ordinary(contribution, rate, periods)

    daily, monthly, yearly = passive_income(balance, rate)

    return InterestResult(
        future_value=balance,
        daily_income=daily,
        monthly_income=monthly,
        yearly_income=yearly,
    )


def future_value(
    *,
    investment_duration: float,
    interest_rate: float,
    initial_capital: float = 0.0,
    periodic_contribution: float = 0.0,
    contribution_frequency: ContributionFrequency = "monthly",
    duration_unit: DurationUnit = "years",
    contribution_timing: ContributionTiming = "start",
) -> InterestResult:
    """Keyword convenience wrapper around :func:`compute`."""
    inputs = InterestInputs(
        initial_capital=initial_capital,
        periodic_contribution=periodic_contribution,
        contribution_frequency=contribution_frequency,
        investment_duration=investment_duration,
        duration_unit=duration_unit,
        interest_rate=interest_rate,
        contribution_timing=contribution_timing,
    )
    return compute(inputs)


__all__ = [
    "DAYS_PER_YEAR",
    "MONTHS_PER_YEAR",
    "annuity_due",
    "annuity_ordinary",
    "compute",
    "future_value",
    "growth_factor",
    "monthly_contribution",
    "passive_income",
    "periodic_rate",
    "total_periods",
]
