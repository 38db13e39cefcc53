import logging

import pytest
from httpx import ASGITransport, AsyncClient

from unitsum.convert import BestConversion
from unitsum.webapp import _result_payload, create_app


class ListHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def captured_logger():
    logger = logging.getLogger("test_webapp")
    handler = ListHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    yield logger, handler.records
    logger.removeHandler(handler)


def make_client(logger):
    app = create_app(logger)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
async def test_api_convert_concrete_unit(captured_logger):
    logger, records = captured_logger
    async with make_client(logger) as client:
        response = await client.get(
            "/api/convert", params={"value": "1d 12h", "to": "hours"}
        )
    assert response.status_code == 200
    assert response.json() == {
        "value": "1d 12h",
        "to": "hours",
        "quantity": 36.0,
        "unit": "hours",
    }
    assert any(r.levelno == logging.INFO for r in records)


@pytest.mark.asyncio
async def test_api_convert_best_unit(captured_logger):
    logger, _ = captured_logger
    async with make_client(logger) as client:
        response = await client.get("/api/convert", params={"value": "90min"})
    assert response.status_code == 200
    data = response.json()
    assert data["unit"] == "h"
    assert data["quantity"] == pytest.approx(1.5)
    assert data["display"] == "1.5h"


@pytest.mark.asyncio
async def test_api_convert_rejects_bad_input(captured_logger):
    logger, records = captured_logger
    async with make_client(logger) as client:
        empty = await client.get("/api/convert", params={"value": "", "to": "h"})
        unknown = await client.get(
            "/api/convert", params={"value": "1h", "to": "fortnights"}
        )
        mixed = await client.get("/api/convert", params={"value": "1h 2m", "to": "s"})
        kind = await client.get(
            "/api/convert", params={"value": "1h", "kind": "whole"}
        )
    assert empty.status_code == 400
    assert unknown.status_code == 400
    assert unknown.json()["detail"] == "Unknown unit: 'fortnights'"
    assert mixed.status_code == 400
    assert kind.status_code == 400
    assert [r.levelno for r in records] == [logging.WARNING] * 4


@pytest.mark.asyncio
async def test_api_ms(captured_logger):
    logger, _ = captured_logger
    async with make_client(logger) as client:
        ok = await client.get("/api/ms", params={"value": "1d 2h 30min"})
        bad = await client.get("/api/ms", params={"value": "later"})
    assert ok.json() == {"value": "1d 2h 30min", "ms": 95400000.0}
    assert bad.status_code == 400


@pytest.mark.asyncio
async def test_api_units(captured_logger):
    logger, _ = captured_logger
    async with make_client(logger) as client:
        everything = await client.get("/api/units")
        length = await client.get("/api/units", params={"measure": "length"})
        missing = await client.get("/api/units", params={"measure": "volume"})
    assert set(everything.json()) == {"time", "length", "mass", "data"}
    assert list(length.json()) == ["length"]
    assert "mi" in length.json()["length"]
    assert missing.status_code == 404


def test_result_payload_shapes():
    assert _result_payload("1h", "min", 60.0) == {
        "value": "1h",
        "to": "min",
        "quantity": 60.0,
        "unit": "min",
    }
    payload = _result_payload("1h", "best", BestConversion(1.0, "h"))
    assert payload["display"] == "1h"


def test_create_app_defaults_to_package_logger():
    app = create_app()
    assert app.state.logger.name == "unitsum"


@pytest.mark.asyncio
async def test_api_rejects_non_finite_results(captured_logger):
    logger, records = captured_logger
    huge = "9" * 400
    async with make_client(logger) as client:
        converted = await client.get(
            "/api/convert", params={"value": f"{huge}s", "to": "ms"}
        )
        best = await client.get("/api/convert", params={"value": f"{huge}s"})
        millis = await client.get("/api/ms", params={"value": f"{huge}h"})
    for response in (converted, best, millis):
        assert response.status_code == 400
        assert response.json()["detail"] == "Result out of range: inf"
    assert [r.levelno for r in records] == [logging.WARNING] * 3
