import logging
from rich.logging import RichHandler
from transcript_pro.config import settings

PACKAGE = __name__.split(".")[0]

def setup_logger(name: str = PACKAGE) -> logging.Logger:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, markup=False, show_path=False)]
    )
    # urllib3 logs every connection the source chain opens
    if logging.getLogger().getEffectiveLevel() > logging.DEBUG:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
    return logging.getLogger(name)

logger = setup_logger()
