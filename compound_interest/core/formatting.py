"""Presentation helpers: two decimals with a currency prefix."""

from compound_interest.schemas.interest import FormattedResult, InterestResult


def format_currency(value: float, symbol: str = "$") -> str:
    return f"{symbol}{value:.2f}"


def format_result(result: InterestResult, symbol: str = "$") -> FormattedResult:
    return FormattedResult(
        futureValue=format_currency(result.future_value, symbol),
        dailyIncome=format_currency(result.daily_income, symbol),
        monthlyIncome=format_currency(result.monthly_income, symbol),
        yearlyIncome=format_currency(result.yearly_income, symbol),
    )
