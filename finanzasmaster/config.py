from dataclasses import dataclass

APP_NAME = "FinanzasMaster"

LANGUAGES = ("es", "en")
THEMES = ("light", "dark")

# Initial widget values per tool (same units the forms show: money, percent, years)
DEFAULTS = {
    "compound": {
        "initial_amount": 1000.0,
        "monthly_contribution": 200.0,
        "annual_rate_percent": 7.0,
        "years": 10,
    },
    "salary": {
        "gross_annual_salary": 30000.0,
        "num_payments": 12,
        "age": 30,
        "disability_level": 0,
    },
    "fire": {
        "annual_spend": 24000.0,
        "current_savings": 10000.0,
        "monthly_savings": 1000.0,
        "annual_return_percent": 5.0,
        "withdrawal_rate_percent": 4.0,
    },
    "pension": {
        "current_savings": 150000.0,
        "desired_monthly_spend": 2500.0,
        "monthly_pension_income": 1200.0,
        "inflation_percent": 3.0,
        "investment_return_percent": 4.0,
    },
}

DISABILITY_LEVELS = (0, 33, 65)
TAX_YEAR = 2025


@dataclass(frozen=True)
class UISettings:
    theme: str = "light"
    language: str = "es"
