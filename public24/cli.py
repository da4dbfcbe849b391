"""CLI for dispatching a single agent intent against the Privat24 API."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from typing import Sequence

from public24 import Public24, Public24Error
from public24.agent import to_fulfillment
from public24.config import Privat24Settings
from public24.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["parse_args", "parse_params", "main"]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "intent",
        help="Intent name, e.g. current-exchange-rate, exchange-rate-history, infrastructure-location",
    )
    parser.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Request parameter (repeatable), e.g. --param ccy=USD",
    )
    parser.add_argument("--api-url", dest="api_url", help="Override the Privat24 API base URL")
    return parser.parse_args(argv)


def parse_params(pairs: Sequence[str]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a parameter mapping."""

    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Parameters must look like KEY=VALUE, got {pair!r}")
        params[key.strip()] = value
    return params


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        params = parse_params(args.params)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    settings = Privat24Settings.from_env()
    if args.api_url:
        settings = replace(settings, url=args.api_url)
    with Public24(settings) as app:
        try:
            message_list = app.dispatch(args.intent, params)
        except Public24Error as exc:
            LOGGER.error("Intent %s failed: %s", args.intent, exc)
            print(str(exc), file=sys.stderr)
            return 2
    print(json.dumps(to_fulfillment(message_list), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
