import logging
import os
from pathlib import Path

from fast_entity.config import LOG_FILE_NAME

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_handler: logging.Handler | None = None
_log_file_path: Path | None = None


def setup_logging(log_file_name: str | None = None) -> Path:
    """
    Route validation logs (`[UNIQUE]`, `[ENTITY VALIDATOR]`, `[MONGO LOOKUP]`) to `log/<file>`.

    The directory is resolved from `PROJECT_ROOT` (or the working directory) and the
    level from `LOG_LEVEL`. Calling again with another file swaps the handler;
    handlers installed by the host application are left alone. With `ENV=debug`
    records are echoed to the console as well.
    """
    global _handler, _log_file_path

    log_dir = Path(os.getenv("PROJECT_ROOT") or os.getcwd()) / "log"
    log_file = log_dir / (log_file_name or os.getenv('LOG_FILE_NAME', LOG_FILE_NAME))

    if _handler is not None and _log_file_path == log_file:
        return log_file

    log_dir.mkdir(exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(os.getenv('LOG_LEVEL', 'DEBUG').upper())

    if _handler is not None:
        root_logger.removeHandler(_handler)
        _handler.close()

    _handler = logging.FileHandler(str(log_file), mode='a')
    _handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(_handler)

    if os.getenv('ENV') == 'debug' and not any(type(h) is logging.StreamHandler for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter('%(levelname)s - %(name)s - %(message)s'))
        root_logger.addHandler(console_handler)

    _log_file_path = log_file
    logging.debug(f"Logging to {log_file}")
    return log_file


def get_log_file_path() -> Path | None:
    return _log_file_path
