"""
Logging setup
"""
import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure application-wide logging.

    Always logs to the console; also logs to ``log_file`` when given
    (parent directories are created).

    Args:
        level: Logging level name or number
        log_file: Optional path of a log file
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    handlers = [logging.StreamHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    logging.getLogger(__name__).debug(
        f"Logging configured: level={logging.getLevelName(level)}, file={log_file}"
    )
