"""
TranslateMe - Main Entry Point

Translate a line of text through MyMemory and keep a history of translations.
"""

import argparse
import asyncio
import logging
from typing import Sequence

import structlog

from translateme.adapters.screen import TranslatorScreen
from translateme.config import Settings, get_settings
from translateme.services.sync_client import create_sync_client


def setup_logging(settings: Settings) -> None:
    """Configure structured logging."""
    log_level = getattr(logging, settings.log_level)

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Route stdlib records (all of our modules) through the same renderer
    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )
    logging.basicConfig(level=log_level, handlers=[handler], force=True)

    # Set third-party loggers to WARNING
    for logger_name in ["aiohttp", "sqlalchemy", "google", "grpc"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def ensure_data_dir(settings: Settings) -> None:
    """Ensure the SQLite data directory exists."""
    if settings.history_backend != "sql" or not settings.database_url.startswith("sqlite"):
        return
    data_dir = settings.data_dir
    if not data_dir.exists():
        data_dir.mkdir(parents=True, exist_ok=True)
        logging.info(f"Created data directory: {data_dir}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translateme",
        description="Translate text and keep a history of translations.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="override LOG_LEVEL",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    translate = commands.add_parser("translate", help="translate text and save it")
    translate.add_argument("text", nargs="+", help="text to translate")

    commands.add_parser("history", help="show saved translations")
    commands.add_parser("erase", help="erase all saved translations")
    return parser


async def main(args: argparse.Namespace, settings: Settings) -> None:
    """Run one command against the configured provider and store."""
    client = create_sync_client(settings)
    screen = TranslatorScreen(client)

    try:
        if args.command == "translate":
            outcome = await screen.translate(" ".join(args.text))
            print(f"Translated: {screen.translated_text}")
            if outcome.succeeded and not outcome.saved:
                print("(not saved to history)")

        elif args.command == "history":
            records = await screen.open_history()
            if screen.history_error:
                print("Could not load saved translations")
            elif not records:
                print("No saved translations")
            for record in records:
                print(f"Original: {record.original}")
                print(f"Translated: {record.translated}")

        elif args.command == "erase":
            report = await screen.erase_history()
            if screen.erase_error:
                print("Could not erase saved translations")
            else:
                print(f"Erased {report.deleted} of {report.attempted} saved translations")
                if report.failed:
                    print(f"{report.failed} could not be deleted")
    finally:
        await client.close()


def cli(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})

    setup_logging(settings)
    ensure_data_dir(settings)

    try:
        asyncio.run(main(args, settings))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli()
