import asyncio
import logging
import sys
from typing import List, Optional

import uvicorn

from .cli import parse_args
from .convert import BEST, BestConversion
from .convert_many import convert_many, ms
from .durations import parse_duration
from .logging_async import get_logger, log_worker
from .units import list_units
from .webapp import create_app


def format_quantity(quantity: float, decimals: Optional[int] = None) -> str:
    if decimals is None:
        return f"{quantity:.15g}"
    return f"{quantity:.{decimals}f}"


def convert_expression(
    value: str,
    unit: str = BEST,
    kind: Optional[str] = None,
    decimals: Optional[int] = None,
) -> str:
    result = convert_many(value).to(unit, kind)
    if isinstance(result, BestConversion):
        return result.to_string(decimals)
    return f"{format_quantity(result, decimals)}{unit}"


async def serve_async(params):
    host = getattr(params, "host", "0.0.0.0")
    port = getattr(params, "port", 8000)
    log_level = getattr(params, "log_level", "info")

    log_queue: asyncio.Queue = asyncio.Queue()
    stop_event = asyncio.Event()
    log_task = asyncio.create_task(
        log_worker(log_queue, stop_event, level=getattr(logging, log_level.upper()))
    )
    logger = get_logger(log_queue)

    app = create_app(logger)
    config = uvicorn.Config(app, host=host, port=port, loop="asyncio", log_level=log_level)
    server = uvicorn.Server(config)

    logger.info(f"[serve] listening on http://{host}:{port}")
    try:
        await server.serve()
    finally:
        stop_event.set()
        await log_queue.join()
        await log_task


def main(argv: Optional[List[str]] = None):
    params = parse_args(argv or sys.argv[1:])
    try:
        if params.command == "convert":
            print(
                convert_expression(
                    params.value, params.unit, params.kind, params.decimals
                )
            )
        elif params.command == "ms":
            print(format_quantity(ms(params.value), params.decimals))
        elif params.command == "duration":
            print(parse_duration(params.value))
        elif params.command == "units":
            for measure, names in list_units(params.measure).items():
                print(f"{measure:>8}: {' '.join(names)}")
        elif params.command == "serve":
            try:
                asyncio.run(serve_async(params))
            except KeyboardInterrupt:
                print("\n[interrupt] server exiting…")
        else:
            raise ValueError(f"Unknown command: {params.command}")
    except ValueError as exc:
        print(f"[error] {exc}")
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover - exercised via CLI invocation
    main(sys.argv[1:])
