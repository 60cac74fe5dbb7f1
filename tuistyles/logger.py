# logger.py

import os, sys, logging
from typing import Optional
from functools import partial

PACKAGE_LOGGER = 'tuistyles'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

def _has_target(logger: logging.Logger, log_file: Optional[str]) -> bool:
    """True if ``logger`` already writes to the destination named by ``log_file``."""
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler):
            if log_file not in (None, '-') and handler.baseFilename == os.path.abspath(log_file):
                return True
        elif isinstance(handler, logging.StreamHandler) and log_file in (None, '', '-'):
            stream = sys.stdout if log_file == '-' else sys.stderr
            if handler.stream is stream:
                return True
    return False

class Logger:
    """
    Thin wrapper around a named stdlib logger.

    Library modules create ``Logger(__name__)`` and stay silent. An application
    turns output on once with ``Logger(name, logging_enabled=True, log_file=...)``;
    the handler is attached to the package logger so every module's records
    reach it. Use ``"-"`` as ``log_file`` for stdout, ``None`` for stderr.
    """
    def __init__(self, name: str, logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            self._enable(log_file)
        elif not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    @property
    def name(self) -> str:
        return self._logger.name

    def _enable(self, log_file: Optional[str]) -> None:
        root = logging.getLogger(PACKAGE_LOGGER)
        root.setLevel(logging.DEBUG)
        if _has_target(root, log_file):
            return
        if log_file == '-':
            handler = logging.StreamHandler(sys.stdout)
        elif log_file:
            directory = os.path.dirname(os.path.abspath(log_file))
            os.makedirs(directory, exist_ok=True)
            handler = logging.FileHandler(log_file)
        else:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
