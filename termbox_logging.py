import logging

LIBRARY_LOGGERS = ('termbox', 'terminal_channel', 'position_query', 'size_probe')

_handler: logging.Handler | None = None

def setup_file_logger(path: str, level: int = logging.DEBUG) -> logging.Handler:
    """
    Sends the library's log records to a file.

    Stderr shares the terminal being drawn on, so logs go to a file instead.
    Calling this again replaces the handler installed by the previous call.
    Records stop propagating to the root logger, whose handlers usually write
    to stderr.

    Args:
        path: The log file, opened in append mode.
        level: The level applied to the library's loggers.

    Returns:
        The installed handler.
    """
    global _handler

    handler = logging.FileHandler(path, encoding='utf-8')
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    handler.setFormatter(formatter)

    for name in LIBRARY_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False
        if _handler is not None:
            logger.removeHandler(_handler)
        logger.addHandler(handler)

    if _handler is not None:
        _handler.close()
    _handler = handler

    return handler
