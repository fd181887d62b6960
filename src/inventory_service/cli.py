import argparse
from collections.abc import Sequence
from pathlib import Path

import uvicorn

from inventory_service.__about__ import __version__
from inventory_service.config import Settings
from inventory_service.utils import logging

logger = logging.get_logger(__name__)


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    # -h is the host flag, so help is only available as --help.
    parser = argparse.ArgumentParser(prog="inventory-service", description="Inventory service", add_help=False)
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("--version", action="store_true", help="print the version and exit")
    parser.add_argument("-h", "--host", default=defaults.host, help="server host")
    parser.add_argument("-p", "--port", type=int, default=defaults.port, help="server port")
    parser.add_argument("-c", "--cache", type=Path, default=defaults.cache_dir, help="cache directory")
    return parser


def parse_settings(argv: Sequence[str] | None = None) -> Settings | None:
    """Turn command-line options into :class:`Settings`; ``None`` means only the version was requested."""
    defaults = Settings.from_env()
    args = build_parser(defaults).parse_args(argv)
    if args.version:
        return None
    return Settings(host=args.host, port=args.port, cache_dir=args.cache.resolve(), log_level=defaults.log_level)


def main(argv: Sequence[str] | None = None) -> None:
    settings = parse_settings(argv)
    if settings is None:
        print(f"inventory-service v{__version__}")
        return
    serve(settings)


def serve(settings: Settings) -> None:
    from inventory_service.server.api import create_app

    settings.photos_dir.mkdir(parents=True, exist_ok=True)
    logging.set_level(settings.log_level)
    app = create_app(settings)
    logger.info("Server running at %s", settings.url)
    logger.info("Cache directory: %s", settings.cache_dir)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)

