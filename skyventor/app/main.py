"""Console entrypoint for the SkyVentor client.

Runs the startup sequence, then one conversion and the rates table for the
requested pair, printing the resolved texts.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from ..utils import logging as logging_utils
from .config import AppConfig, parse_multipliers
from .controller import AppController
from .intents import IntentDispatcher, SelectPair, SelectRatesPair, SetAmount, SetLanguage

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert currencies with the SkyVentor backend.")
    parser.add_argument("amount", nargs="?", default="1")
    parser.add_argument("from_code", nargs="?", default=None, metavar="FROM")
    parser.add_argument("to_code", nargs="?", default=None, metavar="TO")
    parser.add_argument("--backend-url", default=None)
    parser.add_argument("--offline", action="store_true", help="Use the built-in offline backend.")
    parser.add_argument("--language", choices=("ru", "en"), default=None)
    parser.add_argument("--multipliers", default=None, help="Comma-separated ladder multipliers.")
    parser.add_argument("--settings-dir", default=None)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def _config_from_args(args: argparse.Namespace) -> AppConfig:
    config = AppConfig.from_env()
    updates = {}
    if args.backend_url:
        updates["backend_url"] = args.backend_url
    if args.offline:
        updates["offline"] = True
    if args.multipliers:
        updates["ladder_multipliers"] = parse_multipliers(args.multipliers)
    if args.settings_dir:
        updates["settings_dir"] = args.settings_dir
    return replace(config, **updates) if updates else config


async def run(args: argparse.Namespace) -> int:
    config = _config_from_args(args)
    controller = AppController(
        config,
        on_toast=lambda kind, message: print(f"[{kind}] {message}", file=sys.stderr),
    )
    dispatcher = IntentDispatcher(controller)
    await controller.settings.initialize()
    await controller.load_catalog()
    if args.language:
        await dispatcher.dispatch(SetLanguage(args.language))

    default_from, default_to = controller.catalog.default_pair(config.default_from, config.default_to)
    from_code = (args.from_code or default_from).upper()
    to_code = (args.to_code or default_to).upper()
    await dispatcher.dispatch(SelectPair(from_code, to_code))
    result = await dispatcher.dispatch(SetAmount(args.amount))

    converter = controller.converter
    if result is None or not result.ok:
        return 1
    print(f"{args.amount} {from_code} = {converter.result_text} {to_code}")
    print(converter.rate_text)
    print(converter.updated_text)

    await dispatcher.dispatch(SelectRatesPair(from_code, to_code))
    print()
    print("\t".join(controller.rates.headers))
    for row in controller.rates.display_rows():
        print("\t".join(row))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint."""
    args = _parse_args(argv)
    level = logging_utils.configure_root(args.log_level)
    LOGGER.debug("Log level %s", logging_utils.level_name(level))
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
