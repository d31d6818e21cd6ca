from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from wangku.app import create_app
from wangku.config import Settings
from wangku.core.rates import DividendRates, load_dividend_rates


@pytest.fixture(scope="session")
def rates() -> DividendRates:
    return load_dividend_rates()


@pytest.fixture()
def client(rates: DividendRates) -> FlaskClient:
    app = create_app(Settings(), rates=rates)
    with app.test_client() as test_client:
        yield test_client
