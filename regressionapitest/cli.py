"""
Command line entry point.

    regressionapitest --serveraddress 192.168.11.23 --apicalls api/v1/trades --logfile stdout

Exits 0 once every call has been checked (failed checks are only logged),
1 if the log file cannot be opened or a request fails, 2 without a server
address.
"""
from __future__ import annotations
import argparse
import sys

from . import __version__
from .common import config, http
from .common.logging import setup_logging
from .common.validators import validate_server_address
from .runner import RegressionApiTestError, build_server_url, parse_api_calls, run

PROMPT = "Please enter the web address you want to test (e.g.: 192.168.11.23): "


def positive_float(value: str) -> float:
    v = float(value)
    if not v > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return v


def non_negative_int(value: str) -> int:
    v = int(value)
    if v < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {value}")
    return v


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="regressionapitest",
                                 description="Smoke-test JSON API calls against a server.")
    ap.add_argument("--serveraddress", default=config.SERVER_ADDRESS,
                    help="the server address under test (e.g.: 192.168.11.23)")
    ap.add_argument("--apicalls", default=config.API_CALLS,
                    help="comma separated list of api calls to test")
    ap.add_argument("--logfile", default=config.LOG_FILE,
                    help="specify log file or set to 'stdout' to write to standard output")
    ap.add_argument("--loglevel", default=config.LOG_LEVEL,
                    help="set loglevel to 'Trace' to log API response")
    ap.add_argument("--logformat", choices=("text", "json"), default=config.LOG_FORMAT.lower())
    ap.add_argument("--timeout", type=positive_float, default=config.HTTP_TIMEOUT,
                    help="per-request timeout in seconds")
    ap.add_argument("--retries", type=non_negative_int, default=config.HTTP_RETRIES,
                    help="retries on connection errors and 429/5xx answers")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def ask_server_address() -> str:
    # no server address was given, so we ask the user
    print(PROMPT, flush=True)
    return sys.stdin.readline()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        log = setup_logging(args.loglevel, args.logfile, args.logformat)
    except OSError as e:
        print(f"Failed to open log file: {args.logfile}: {e}", file=sys.stderr)
        return 1

    address = args.serveraddress or ask_server_address()
    err = validate_server_address(address)
    if err:
        log.error(err)
        return 2

    http.configure(timeout=args.timeout, retries=args.retries)
    try:
        run(build_server_url(address), parse_api_calls(args.apicalls))
    except RegressionApiTestError as e:
        log.error("Aborting: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
