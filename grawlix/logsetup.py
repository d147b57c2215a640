import sys

from loguru import logger

LOG_FORMAT = "{level}:{name}:{message}"


def setup_logging(level: str = "INFO", sink=sys.stderr) -> int:
    """Route grawlix logs to ``sink``; returns the loguru handler id.

    The library keeps its logger disabled until this is called.
    """
    handler_id = logger.add(sink, level=level.upper(), format=LOG_FORMAT,
                            filter=lambda record: record["name"].startswith("grawlix"))
    logger.enable("grawlix")
    return handler_id


def teardown_logging(handler_id: int) -> None:
    logger.remove(handler_id)
    logger.disable("grawlix")
