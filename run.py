import logging
import sys

import uvicorn
from sqlalchemy.exc import SQLAlchemyError
from fortune.app import app
from fortune.db import make_engine, bind_engine, init_db
from fortune.settings import load_settings, ConfigError

logger = logging.getLogger("fortune")


def main():
    try:
        settings = load_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("configuration error: %s", e)
        sys.exit(1)

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    engine = make_engine(settings.database_url)
    bind_engine(engine)
    logger.info("using database %s@%s:%s/%s", settings.DB_USER,
                settings.DB_HOST, settings.DB_PORT, settings.DB_NAME)
    try:
        init_db(engine)
    except SQLAlchemyError as e:
        logger.error("database unavailable: %s", e)
        sys.exit(1)

    config = uvicorn.Config(app, host=settings.HOST, port=settings.PORT,
                            log_level=settings.LOG_LEVEL.lower())
    server = uvicorn.Server(config)
    server.run()


def cli():
    try:
        main()
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli()
