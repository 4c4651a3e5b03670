"""Command-line entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Sequence

from l10n_client.config import get_settings
from l10n_client.i18n.service import L10nService
from l10n_client.logging import configure_logging, logger
from l10n_client.services.exceptions import L10nError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="l10n-client")
    parser.add_argument("--locale", help="Override the ambient locale, e.g. fr-CA.")
    commands = parser.add_subparsers(dest="command", required=True)

    text = commands.add_parser("text", help="Fetch a text dictionary and print it as JSON.")
    text.add_argument("--packages", nargs="*", default=[])
    text.add_argument("--url", default=None)

    script = commands.add_parser("script", help="Load a localized script.")
    script.add_argument("template", help="Script URL containing the locale marker.")
    return parser


async def run(args: argparse.Namespace, service: L10nService) -> int:
    if args.locale:
        service.culture.use(args.locale)
    try:
        if args.command == "text":
            text = await service.get_text(url=args.url, packages=args.packages)
            print(json.dumps(text.raw, ensure_ascii=False, indent=2))
        else:
            loaded = await service.get_script(args.template)
            print(loaded.url)
    except L10nError as exc:
        logger.error("l10n_command_failed", command=args.command, error=str(exc))
        return 1
    return 0


async def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings.log_level, stream=sys.stderr)
    args = build_parser().parse_args(argv)
    async with L10nService.from_settings(settings) as service:
        return await run(args, service)


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
