"""Logging configuration with console and rotating file handlers"""
import glob
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

KEEP_SESSION_LOGS = 5


def setup_logging(log_file: Optional[str] = None, console_level: int = logging.WARNING, file_level: int = logging.DEBUG) -> Optional[Path]:
    """
    Configure logging with up to two destinations:
    - Console (stderr): Brief logs (WARNING by default, stdout carries stems)
    - File: Detailed logs (DEBUG by default) with rotation, only if log_file is set

    Rotation policy:
    - New log file per run (timestamp-based naming)
    - Keep last 5 log files (auto-cleanup on startup)
    - Auto-rotate when file reaches 10MB

    Args:
        log_file: Base path to log file, e.g. "logs/english-stem.log" (optional)
        console_level: Console logging level
        file_level: File logging level

    Returns:
        Path of the session log file, or None when logging to console only
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, filter in handlers

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    root_logger.addHandler(console_handler)

    if not log_file:
        return None

    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # Cleanup old log files - keep only the newest KEEP_SESSION_LOGS - 1 plus this run
    log_pattern = str(log_path.parent / f"{log_path.stem}_*.log")
    existing_logs = sorted(glob.glob(log_pattern), reverse=True)  # Newest first
    for old_log in existing_logs[KEEP_SESSION_LOGS - 1:]:
        try:
            Path(old_log).unlink()
        except OSError as e:
            logger.warning(f"Could not remove old log file {old_log}: {e}")

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    session_log = log_path.parent / f"{log_path.stem}_{timestamp}.log"

    file_handler = RotatingFileHandler(
        session_log,
        mode='a',
        maxBytes=10*1024*1024,  # 10MB
        backupCount=10,
        encoding='utf-8'
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root_logger.addHandler(file_handler)

    logging.info(f"Logging configured: console={logging.getLevelName(console_level)}, file={session_log} ({logging.getLevelName(file_level)})")
    return session_log
