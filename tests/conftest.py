"""Shared test fixtures and sample data."""
from __future__ import annotations

import json
import textwrap
from pathlib import Path

import pytest

from oracle_program.config import AppConfig, DataSourceConfig
from oracle_program.models import FetchResponse

BASE_URL = "https://prices.example.com/api/v3/ticker/price"


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_data_source() -> DataSourceConfig:
    return DataSourceConfig(
        base_url=BASE_URL,
        timeout_seconds=5.0,
        headers={"X-API-Key": "test-key"},
    )


@pytest.fixture()
def sample_app_config(sample_data_source: DataSourceConfig) -> AppConfig:
    return AppConfig(data_source=sample_data_source)


SAMPLE_YAML = textwrap.dedent("""\
    data_source:
      base_url: "https://prices.example.com/api/v3/ticker/price"
      timeout_seconds: 5
      headers:
        X-API-Key: "${ORACLE_TEST_API_KEY}"
        X-Client: oracle-tests
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Fake transport
# ---------------------------------------------------------------------------


def json_response(payload: object, status: int = 200) -> FetchResponse:
    return FetchResponse(
        ok=200 <= status < 300,
        status=status,
        body=json.dumps(payload).encode("utf-8"),
    )


class FakeFetcher:
    """Serves canned responses keyed by URL symbol; records every URL fetched."""

    def __init__(self, responses: dict[str, FetchResponse] | None = None) -> None:
        self.responses = dict(responses or {})
        self.urls: list[str] = []

    async def fetch(
        self, url: str, headers: dict[str, str] | None = None
    ) -> FetchResponse:
        self.urls.append(url)
        symbol = url.split("?symbol=", 1)[-1]
        return self.responses.get(
            symbol, FetchResponse(ok=False, status=404, body=b"not found")
        )


@pytest.fixture()
def eur_trade_response() -> FetchResponse:
    return json_response({"Trade": {"EUR/USD": {"price": 1.0821}}})


@pytest.fixture()
def xau_quote_response() -> FetchResponse:
    return json_response(
        {"Quote": {"XAU/USD:BFX": {"bidPrice": 1950.1, "askPrice": 1950.5}}}
    )


@pytest.fixture()
def fake_fetcher(
    eur_trade_response: FetchResponse, xau_quote_response: FetchResponse
) -> FakeFetcher:
    return FakeFetcher(
        {
            "EURUSD": eur_trade_response,
            "XAUUSD": xau_quote_response,
            "AAPLUSD": json_response({"Trade": {"AAPL": {"price": 150.254}}}),
            "USDJPY": json_response(
                {"Quote": {"USD/JPY": {"bidPrice": 149.5, "askPrice": 149.7}}}
            ),
        }
    )


# ---------------------------------------------------------------------------
# Sample reveals
# ---------------------------------------------------------------------------


@pytest.fixture()
def reveal_a() -> bytes:
    return b'[{"symbol":"EUR/USD","price":1.08},{"symbol":"XAU/USD:BFX","price":1950.3}]'


@pytest.fixture()
def reveal_b() -> bytes:
    return b'[{"symbol":"EUR/USD","price":1.09},{"symbol":"XAU/USD:BFX","price":1950.4}]'


# ---------------------------------------------------------------------------
# Factories for tests that need their own canned responses
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_response():
    return json_response


@pytest.fixture()
def make_fetcher():
    return FakeFetcher
