import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
CONSOLE_FORMAT = "textsplit: %(levelname)s: %(message)s"


def setup_logging(
    log_dir: Path,
    log_name: str = "textsplit.log",
    *,
    level: int = logging.WARNING,
    console_level: int = logging.WARNING,
    force: bool = False,
) -> None:
    """Configure root logging.

    Parts are printed on stdout (and may be JSON), so console logging goes to
    stderr in a short format and never below ``console_level``. The rotating
    file gets everything at ``level``.

    Args:
        log_dir: directory for log file
        log_name: file name
        level: file log level (DEBUG with --verbose)
        console_level: minimum level echoed to stderr
        force: if True, existing handlers are removed and reconfigured
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / log_name

    logger = logging.getLogger()
    if logger.handlers and not force:
        return
    if force:
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()
    logger.setLevel(min(level, console_level))

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(max(level, console_level))
    ch.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(ch)

    fh = RotatingFileHandler(log_file, maxBytes=2 * 1024 * 1024, backupCount=3, encoding="utf-8")
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(fh)


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    """Translate a level name such as 'info' into a logging constant."""
    value = logging.getLevelName(str(name).upper())
    return value if isinstance(value, int) else default
