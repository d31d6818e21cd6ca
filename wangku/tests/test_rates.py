from __future__ import annotations

from math import isclose

import pytest
from pydantic import ValidationError

from wangku.core.rate_selection import RateMethod, average_rate, select_rate
from wangku.core.rates import DividendRates, EPFSavingsType, load_dividend_rates

TABLE = {2020: 4.0, 2021: 5.0, 2022: 6.0, 2023: 7.0, 2024: 8.0, 2019: 3.0}


def test_latest_uses_most_recent_year():
    assert select_rate(TABLE, RateMethod.LATEST) == TABLE[max(TABLE)]
    # insertion order must not matter
    assert select_rate({2024: 5.75, 2017: 7.0}, "latest") == 5.75


def test_trailing_averages():
    assert isclose(select_rate(TABLE, RateMethod.THREE_YEAR_AVERAGE), (6.0 + 7.0 + 8.0) / 3)
    assert isclose(select_rate(TABLE, "5-year-average"), (4.0 + 5.0 + 6.0 + 7.0 + 8.0) / 5)


def test_trailing_average_with_short_table_uses_what_exists():
    assert isclose(select_rate({2023: 5.0, 2024: 6.0}, RateMethod.FIVE_YEAR_AVERAGE), 5.5)


def test_historical_average_covers_every_year():
    assert isclose(select_rate(TABLE, RateMethod.HISTORICAL_AVERAGE), sum(TABLE.values()) / len(TABLE))
    assert isclose(average_rate(TABLE), sum(TABLE.values()) / len(TABLE))


@pytest.mark.parametrize("method", list(RateMethod))
def test_empty_table_gives_zero(method):
    assert select_rate({}, method) == 0.0


def test_unknown_method_is_rejected():
    with pytest.raises(ValueError):
        select_rate(TABLE, "10-year-average")


def test_packaged_rates_load(rates: DividendRates):
    assert rates.asb[2024] == 5.75
    assert rates.hajj_cost == 45000
    assert rates.epf_benchmarks[55] == 500000
    assert rates.epf_table(EPFSavingsType.SYARIAH) is rates.epf_syariah
    assert rates.epf_table("Conventional") is rates.epf_conventional
    for year, detail in rates.asb_detailed.items():
        assert isclose(detail.total, rates.asb[year])


def test_inconsistent_asb_detail_is_rejected():
    with pytest.raises(ValidationError):
        DividendRates.model_validate({"asb_detailed": {2024: {"dividend": 5.0, "bonus": 0.75, "total": 6.0}}})


def test_negative_rate_is_rejected():
    with pytest.raises(ValidationError):
        DividendRates.model_validate({"asb": {2024: -1.0}})


def test_rates_load_from_custom_file(tmp_path):
    path = tmp_path / "rates.yaml"
    path.write_text("asb:\n  2030: 6.5\nhajj_cost: 50000\n", encoding="utf-8")

    rates = load_dividend_rates(path)

    assert rates.asb == {2030: 6.5}
    assert rates.hajj_cost == 50000
    assert rates.tabung_haji == {}
