# storefront/cli.py
import argparse
import logging
import sys

from werkzeug.serving import make_server

from storefront import create_app
from storefront.config import settings
from storefront.db import init_db
from storefront.errors import StorageInitError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="storefront", description="eBay-like demo web server")
    parser.add_argument("--preload", action="store_true", default=settings.PRELOAD,
                        help="Preload the database with mock users")
    parser.add_argument("--db", default=settings.DATABASE_PATH, help="SQLite database file")
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    return parser


def configure_logging(level: str = settings.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(argv=None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        storage = init_db(args.db, preload=args.preload)
    except StorageInitError as e:
        logger.critical("%s", e)
        sys.exit(1)

    app = create_app(storage)
    try:
        # werkzeug reports a failed bind itself and calls sys.exit(1)
        try:
            server = make_server(args.host, args.port, app, threaded=True)
        except OSError as e:
            logger.critical("failed to start server on %s:%d: %s", args.host, args.port, e)
            sys.exit(1)
        except SystemExit:
            logger.critical("failed to start server: cannot bind %s:%d", args.host, args.port)
            sys.exit(1)

        logger.info("Listening on %s:%d", args.host, args.port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down")
        finally:
            server.server_close()
    finally:
        storage.close()
