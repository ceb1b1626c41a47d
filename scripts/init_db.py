from app.core.config import settings
from app.core.logging import configure_logging
from app.db.engine import get_engine
from app.db.schema import metadata
import logging

logger = logging.getLogger(__name__)


def main():
    configure_logging(settings.log_level)
    engine = get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("DB schema created at %s", engine.url)

if __name__ == "__main__":
    main()
