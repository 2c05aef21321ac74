"""
Filename:       log_helper.py
Author:         jole
Created:        02.10.2025

Description:    Logger setup. Everything goes to the log file, NOTICE and above also to stdout.

Notes:          While curses owns the screen anything written to stdout would scribble over the UI, so MapManager
                raises the stdout threshold for the duration of the curses session.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import os
import sys

from typing import Optional
# --- END OF Import section --------------------------------------------------------------------------------------------



LOGGER_NAME = "carrion_manager"

# --- Custom level: NOTICE (between INFO=20 and WARNING=30)
NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

# --- Above everything, used to silence a handler
SILENT = logging.CRITICAL + 1



def notice(self: logging.Logger, message, *args, **kwargs):
    if self.isEnabledFor(NOTICE):
        self._log(NOTICE, message, args, **kwargs)

# --- Add as a real method on Logger
logging.Logger.notice = notice  # type: ignore[attr-defined]



def _has_file_handler(_logger: logging.Logger, _filename: str) -> bool:
    for handler in _logger.handlers:
        if isinstance(handler, logging.FileHandler) and getattr(handler, "baseFilename", None) == _filename:
            return True
    return False
# --- END OF _has_file_handler() ---------------------------------------------------------------------------------------



def _get_stream_handler(_logger: logging.Logger) -> Optional[logging.Handler]:
    for handler in _logger.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "_is_cm_stdout", False):
            return handler
    return None
# --- END OF _get_stream_handler() -------------------------------------------------------------------------------------



def setup_logger(filename: Optional[str],
                 *,
                 file_level:    int = logging.DEBUG,
                 stream_level:  int = NOTICE
                 ) -> logging.Logger:
    """
    Configure the application logger. Writes everything from file_level up to filename (skipped when filename is
    None) and only emits stream_level and above to stdout. Calling it again doesn't add duplicate handlers.

    :param filename:        Log file, None for no file logging
    :param file_level:      Threshold for the file
    :param stream_level:    Threshold for stdout

    :return:                The "carrion_manager" logger, parent of every module logger in the package
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(min(file_level, stream_level))

    # --- File handler: add once
    if filename is not None:
        filename = os.path.abspath(filename)
        if not _has_file_handler(logger, filename):
            fh = logging.FileHandler(filename, encoding="utf-8")
            fh.setLevel(file_level)
            fh.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s"))
            logger.addHandler(fh)

    # --- Stream handler: add once
    if _get_stream_handler(logger) is None:
        sh = logging.StreamHandler(sys.stdout)
        sh.setLevel(stream_level)
        sh.setFormatter(logging.Formatter("%(message)s"))
        # --- Mark so we can find it later
        setattr(sh, "_is_cm_stdout", True)
        logger.addHandler(sh)

    return logger
# --- END OF setup_logger() --------------------------------------------------------------------------------------------



def set_stdout_threshold(_logger: logging.Logger, _level: int = NOTICE) -> int:
    """
    Change what goes to stdout at runtime, without touching file logging.

    :return:    The previous threshold, so it can be restored
    """
    sh = _get_stream_handler(_logger)
    if sh is None:
        return _level
    previous = sh.level
    sh.setLevel(_level)
    return previous
# --- END OF set_stdout_threshold() ------------------------------------------------------------------------------------
