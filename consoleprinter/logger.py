import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        if logging_enabled:
            self._logger.setLevel(logging.DEBUG)
            # Replace handlers left by an earlier enabled Logger of the same name
            for old in [h for h in self._logger.handlers if isinstance(h, logging.StreamHandler)]:
                self._logger.removeHandler(old)
                old.close()
            if log_file == '-':
                # stdout carries rendered documents
                handler = logging.StreamHandler(sys.stderr)
            else:
                if log_file is None:
                    project_root = os.path.dirname(os.path.dirname(__file__))
                    os.makedirs(os.path.join(project_root, 'logs'), exist_ok=True)
                    log_file = os.path.join(project_root, 'logs', 'console_debug.log')
                handler = logging.FileHandler(log_file)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)
        elif not any(isinstance(h, logging.NullHandler) for h in self._logger.handlers):
            # One per named logger; renderers are created per call
            self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
