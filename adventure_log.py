import logging

FILE_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
CONSOLE_FORMAT = '%(message)s'


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """Quiet console logger plus a detailed file log when a path is given."""
    root = logging.getLogger()
    if root.handlers:
        # Someone (a test runner, an embedding app) already configured logging
        return root
    root.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level, logging.WARNING))
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(file_handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return root
