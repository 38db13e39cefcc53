"""Web application server for unitsum."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from .convert import BEST, BestConversion
from .convert_many import convert_many, ms
from .errors import UnitsumError
from .units import KINDS, list_units


def _result_payload(value: str, to: str, result: Any) -> Dict[str, Any]:
    if isinstance(result, BestConversion):
        return {
            "value": value,
            "to": to,
            "quantity": result.quantity,
            "unit": result.unit,
            "display": str(result),
        }
    return {"value": value, "to": to, "quantity": result, "unit": to}


def create_app(logger: Optional[logging.Logger] = None) -> FastAPI:
    log = logger or logging.getLogger("unitsum")

    app = FastAPI(title="unitsum Web API")
    app.state.logger = log

    def _reject(exc: Exception, value: str) -> HTTPException:
        log.warning(f"[api] rejected {value!r}: {exc}")
        return HTTPException(status_code=400, detail=str(exc))

    @app.get("/api/convert")
    async def api_convert(
        value: str, to: str = BEST, kind: Optional[str] = None
    ) -> JSONResponse:
        if kind is not None and kind not in KINDS:
            raise _reject(ValueError(f"Unknown best unit kind: {kind!r}"), value)
        try:
            result = convert_many(value).to(to, kind)
        except UnitsumError as exc:
            raise _reject(exc, value) from exc
        quantity = result.quantity if isinstance(result, BestConversion) else result
        if not math.isfinite(quantity):
            raise _reject(ValueError(f"Result out of range: {quantity}"), value)
        log.info(f"[api] {value!r} -> {result} ({to})")
        return JSONResponse(_result_payload(value, to, result))

    @app.get("/api/ms")
    async def api_ms(value: str) -> JSONResponse:
        try:
            result = ms(value)
        except UnitsumError as exc:
            raise _reject(exc, value) from exc
        if not math.isfinite(result):
            raise _reject(ValueError(f"Result out of range: {result}"), value)
        log.info(f"[api] {value!r} -> {result}ms")
        return JSONResponse({"value": value, "ms": result})

    @app.get("/api/units")
    async def api_units(measure: Optional[str] = None) -> JSONResponse:
        units = list_units(measure)
        if measure is not None and not units:
            raise HTTPException(status_code=404, detail=f"Unknown measure: {measure}")
        return JSONResponse(units)

    return app
