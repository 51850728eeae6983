"""
File appender with size-based rotation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from hierlog.appenders.base import Appender
from hierlog.diagnostics import get_logger
from hierlog.exceptions import InvalidOrMissingParameter
from hierlog.formatters import Formatter
from hierlog.levels import LogLevel


class FileAppender(Appender):
    """Appends records to a local file, rotating it when it grows too large.

    Rotated files are named ``<stem>.<n><suffix>`` (``app.1.log`` is the most
    recent backup). ``max_bytes=0`` disables rotation.

    Args:
        identifier: Appender identifier
        path: Log file path; can also be given later through ``FilePath``
        max_bytes: Size above which the file is rotated
        backup_count: Number of rotated files kept
    """

    FILE_PATH_KEY = "FilePath"

    def __init__(
        self,
        identifier: str,
        path: str | Path | None = None,
        *,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
    ) -> None:
        super().__init__(identifier)
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        self._path: Optional[Path] = Path(path) if path is not None else None
        self._file = None

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def update_with_dictionary(
        self,
        options: Mapping[str, Any],
        formatters: Iterable[Formatter] = (),
    ) -> None:
        super().update_with_dictionary(options, formatters)

        if self.FILE_PATH_KEY not in options:
            get_logger(__name__).warning("appender_missing_parameter", appender=self.identifier, key=self.FILE_PATH_KEY)
            raise InvalidOrMissingParameter(component=self.identifier, key=self.FILE_PATH_KEY)

        raw_path = options[self.FILE_PATH_KEY]
        if not raw_path or not isinstance(raw_path, str):
            get_logger(__name__).warning(
                "appender_invalid_parameter", appender=self.identifier, key=self.FILE_PATH_KEY, value=raw_path
            )
            raise InvalidOrMissingParameter(component=self.identifier, key=self.FILE_PATH_KEY, value=raw_path)

        new_path = Path(raw_path).expanduser()
        with self._lock:
            if new_path != self._path:
                self._close_file()
                self._path = new_path

    def perform_log(self, message: str, level: LogLevel, info: Mapping[str, Any]) -> None:
        with self._lock:
            if self._path is None:
                raise InvalidOrMissingParameter(component=self.identifier, key=self.FILE_PATH_KEY)
            if self._file is None:
                self._open_file()
            self._file.write(message + "\n")
            self._file.flush()
            self._maybe_rotate()

    def _open_file(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self._path, "a", encoding="utf-8")

    def _close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _backup_path(self, index: int) -> Path:
        return self._path.with_name(f"{self._path.stem}.{index}{self._path.suffix}")

    def _maybe_rotate(self) -> None:
        if self._max_bytes <= 0 or self._path.stat().st_size <= self._max_bytes:
            return

        self._close_file()
        if self._backup_count > 0:
            for i in range(self._backup_count - 1, 0, -1):
                src = self._backup_path(i)
                if src.exists():
                    src.replace(self._backup_path(i + 1))
            self._path.replace(self._backup_path(1))
        else:
            self._path.unlink()
        self._open_file()

    def close(self) -> None:
        with self._lock:
            self._close_file()
