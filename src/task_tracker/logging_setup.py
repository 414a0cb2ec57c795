from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _ThirdPartyNoiseFilter(logging.Filter):
    """
    Keep task_tracker and uvicorn.error logs; other libraries, uvicorn.access
    included, only from WARNING. Requests are already logged by the API middleware.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if name.startswith("task_tracker") or name == "uvicorn.error":
            return True
        return record.levelno >= logging.WARNING


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


# PUBLIC_INTERFACE
def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[Union[str, Path]] = None) -> None:
    """
    Configure the root logger with a stderr handler and an optional file handler.

    Call this once at process start, before the first log record is emitted.
    Calling it again replaces the handlers installed by the previous call.
    """
    root = logging.getLogger()
    root.setLevel(_coerce_level(level))

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.addFilter(_ThirdPartyNoiseFilter())
    root.addHandler(ch)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
