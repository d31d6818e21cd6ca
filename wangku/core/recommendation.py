"""Suggest which account type a goal should be saved in."""

from __future__ import annotations

from typing import Dict, Iterable

from wangku.core.rate_selection import average_rate
from wangku.core.rates import DividendRates

DEFAULT_ACCOUNT = "ASB"

# goals tied to a specific scheme, whatever the user already holds
CATEGORY_ACCOUNTS = {
    "Hajj": "Tabung Haji",
    "Umrah": "Tabung Haji",
    "Retirement": "EPF",
}


def expected_returns(rates: DividendRates) -> Dict[str, float]:
    returns = {
        account_type: average_rate(rates.table_for(account_type) or {})
        for account_type in ("Tabung Haji", "ASB", "EPF")
    }
    returns.update(rates.fixed_rates)
    return returns


def recommend(rates: DividendRates, goal_category: str, held_account_types: Iterable[str]) -> str:
    if goal_category in CATEGORY_ACCOUNTS:
        return CATEGORY_ACCOUNTS[goal_category]

    returns = expected_returns(rates)
    best_account = DEFAULT_ACCOUNT
    highest_rate = 0.0
    for account_type in held_account_types:
        rate = returns.get(account_type, 0.0)
        if rate > highest_rate:
            best_account, highest_rate = account_type, rate
    return best_account
