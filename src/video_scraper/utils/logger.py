import logging

from rich.logging import RichHandler

LOGGER_NAME = "video_scraper"


def setup_cli_logging(*, verbosity: int = 0, level: str | None = None) -> None:
    """Attach a RichHandler to the ``video_scraper`` logger.

    Called from CLI entry-points only.

    *verbosity* mapping:
    - ``-1`` (quiet) → WARNING
    - ``0``          → INFO, or *level* when given
    - ``1+`` (verbose) → DEBUG
    """
    if verbosity == 0 and level:
        handler_level = logging.getLevelName(level.upper())
        if not isinstance(handler_level, int):
            handler_level = logging.INFO
    else:
        level_map = {-1: logging.WARNING, 0: logging.INFO}
        handler_level = level_map.get(verbosity, logging.DEBUG)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Avoid duplicate Rich handlers on repeated calls
    for h in logger.handlers:
        if isinstance(h, RichHandler):
            h.setLevel(handler_level)
            return

    handler = RichHandler(rich_tracebacks=True, markup=False)
    handler.setLevel(handler_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
