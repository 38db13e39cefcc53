import argparse

from .units import KINDS, list_units


def add_conversion_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "value", help="Expression to convert, e.g. '1d 12h 30min' (quote it)"
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=None,
        help="Round the printed quantity to this many decimals",
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unitsum", description="Sum mixed-unit quantities into one unit"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    convert = subparsers.add_parser(
        "convert", help="Convert an expression into a unit or the best unit"
    )
    add_conversion_arguments(convert)
    convert.add_argument(
        "--to",
        dest="unit",
        default="best",
        help="Target unit (default: best)",
    )
    convert.add_argument(
        "--kind",
        choices=KINDS,
        help="Unit family used when choosing the best unit",
    )

    ms = subparsers.add_parser("ms", help="Convert a duration to milliseconds")
    add_conversion_arguments(ms)

    duration = subparsers.add_parser(
        "duration", help="Show a duration expression as days, hours and seconds"
    )
    duration.add_argument("value", help="Duration expression, e.g. '1d 2h'")

    units = subparsers.add_parser("units", help="List known units")
    units.add_argument(
        "--measure",
        choices=sorted(list_units()),
        help="Only list units of this measure",
    )

    serve = subparsers.add_parser("serve", help="Run the unitsum web API")
    serve.add_argument("--host", default="0.0.0.0", help="Host interface for the API")
    serve.add_argument(
        "--port", type=int, default=8000, help="Port to bind the HTTP server"
    )
    serve.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Log level for the server and request log",
    )

    return parser


def parse_args(argv):
    parser = create_parser()
    return parser.parse_args(argv)
