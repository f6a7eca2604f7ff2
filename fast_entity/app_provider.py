from typing import Optional

from fast_entity.utils.env_utils import configure_env
from fast_entity.utils.logging import setup_logging

_booted = False


def boot(*,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Sets up the process before validating entities.
    - Loads environment variables from dotenv files
    - Sets up logging

    Args:
        env_file_name: Explicit env file. If None, `.env.<ENV>` then `.env` are tried.
        log_file_name: Log file name inside the `log/` directory.
        force: Re-run even if already booted.
    """
    global _booted
    if _booted and not force:
        return

    configure_env(env_file_name)
    setup_logging(log_file_name)

    _booted = True


def is_booted() -> bool:
    return _booted
