from __future__ import annotations
import os
from datetime import datetime, timedelta
from pathlib import Path
from filedates.exceptions import MetadataWriteError
from filedates.lib.file_times import FileTimes, from_timestamp
from filedates.lib.types import TimestampField

class MemoryFileTimes(FileTimes):
    """
    Keeps creation times in memory so tests behave the same on every platform.
    Modification times are written to disk for real.
    """

    def __init__(self, fail_on: tuple[TimestampField, ...] = (), skew: timedelta | None = None) -> None:
        self.created: dict[Path, datetime] = {}
        self.fail_on = set(fail_on)
        self.skew = skew
        self.writes: list[tuple[TimestampField, datetime]] = []

    def supports_creation_time(self) -> bool:
        return True

    def get_creation_timestamp(self, stat: os.stat_result) -> float | None:
        return stat.st_mtime

    def read_created(self, path: Path) -> datetime:
        stat = self.stat(path)
        return self.created.get(Path(path), from_timestamp(stat.st_mtime))

    def write_created(self, path: Path, instant: datetime) -> None:
        if TimestampField.CREATED in self.fail_on or not Path(path).exists():
            raise MetadataWriteError(f"Cannot set creation time of {path}")
        self.writes.append((TimestampField.CREATED, instant))
        self.created[Path(path)] = instant

    def write_modified(self, path: Path, instant: datetime) -> None:
        if TimestampField.MODIFIED in self.fail_on:
            raise MetadataWriteError(f"Cannot set modification time of {path}")
        self.writes.append((TimestampField.MODIFIED, instant))
        if self.skew:
            # Only the first write lands off target
            instant, self.skew = instant + self.skew, None
        super().write_modified(path, instant)

def touch_file(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"test")
    return path
