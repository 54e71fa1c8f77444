"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    file_times.py                                                                                        *
*        Project: filedates                                                                                            *
*        Version: 0.1.0                                                                                                *
*        Created: 2026-10-18                                                                                           *
*        Author:  Jess Mann                                                                                            *
*        Email:   jess.a.mann@gmail.com                                                                                *
*        Copyright (c) 2026 Jess Mann                                                                                  *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    LAST MODIFIED:                                                                                                    *
*                                                                                                                      *
*        2026-10-18     By Jess Mann                                                                                   *
*                                                                                                                      *
*********************************************************************************************************************"""
from __future__ import annotations
from abc import ABC, abstractmethod
import os
import shutil
import subprocess
import sys
import logging
from datetime import datetime
from pathlib import Path
from win32_setctime import setctime
from filedates.exceptions import MetadataReadError, MetadataWriteError, UnsupportedAttributeError
from filedates.lib.types import TimestampField, TimestampPair

logger = logging.getLogger(__name__)

def to_ns(instant: datetime) -> int:
    return round(instant.timestamp() * 1_000_000) * 1_000

def from_timestamp(timestamp: float) -> datetime:
    return datetime.fromtimestamp(timestamp).astimezone()


class FileTimes(ABC):
    """
    Strategy interface to read and write a file's creation and modification times.
    """

    @abstractmethod
    def supports_creation_time(self) -> bool:
        """
        Whether this platform can set a file's creation time.
        """
        raise NotImplementedError

    @abstractmethod
    def get_creation_timestamp(self, stat: os.stat_result) -> float | None:
        raise NotImplementedError

    @abstractmethod
    def write_created(self, path: Path, instant: datetime) -> None:
        raise NotImplementedError

    def stat(self, path: Path) -> os.stat_result:
        try:
            return os.stat(path)
        except OSError as e:
            raise MetadataReadError(f"Cannot read timestamps of {path}: {e.strerror or e}") from e

    def read_created(self, path: Path) -> datetime:
        timestamp = self.get_creation_timestamp(self.stat(path))
        if timestamp is None:
            raise MetadataReadError(f"Creation time of {path} is not available on {sys.platform}")
        return from_timestamp(timestamp)

    def read_modified(self, path: Path) -> datetime:
        return from_timestamp(self.stat(path).st_mtime)

    def read(self, path: Path) -> TimestampPair:
        return TimestampPair(created=self.read_created(path), modified=self.read_modified(path))

    def write_modified(self, path: Path, instant: datetime) -> None:
        """
        Set the modification time, leaving the access time as it was.
        """
        try:
            atime_ns = os.stat(path).st_atime_ns
            os.utime(path, ns=(atime_ns, to_ns(instant)))
        except (OSError, OverflowError, ValueError) as e:
            raise MetadataWriteError(f"Cannot set modification time of {path}: {e}") from e

    def read_time(self, path: Path, field: TimestampField) -> datetime:
        if field == TimestampField.CREATED:
            return self.read_created(path)
        return self.read_modified(path)

    def write_time(self, path: Path, field: TimestampField, instant: datetime) -> None:
        if field == TimestampField.CREATED:
            self.write_created(path, instant)
        else:
            self.write_modified(path, instant)


class PosixFileTimes(FileTimes):
    """
    Linux and other POSIX systems. The kernel offers no call to set a birth time.
    """

    def supports_creation_time(self) -> bool:
        return False

    def get_creation_timestamp(self, stat: os.stat_result) -> float | None:
        # Only the BSDs expose this through stat()
        return getattr(stat, 'st_birthtime', None)

    def write_created(self, path: Path, instant: datetime) -> None:
        raise UnsupportedAttributeError(f"Creation time cannot be set on {sys.platform}")


class MacFileTimes(PosixFileTimes):
    """
    macOS. Uses SetFile from the Xcode command line tools when it is installed.
    """

    def __init__(self) -> None:
        self._setfile = shutil.which('SetFile')

    @property
    def has_setfile(self) -> bool:
        return self._setfile is not None

    def supports_creation_time(self) -> bool:
        return True

    def write_created(self, path: Path, instant: datetime) -> None:
        if self.has_setfile:
            self._write_created_setfile(path, instant)
        else:
            self._write_created_utime(path, instant)

    def _write_created_setfile(self, path: Path, instant: datetime) -> None:
        # SetFile wants mm/dd/yyyy in local time
        local_str = instant.astimezone().strftime('%m/%d/%Y %H:%M:%S')
        command = [self._setfile, '-d', local_str, str(path)]
        logger.debug("Running SetFile: %s", " ".join(command))
        try:
            result = subprocess.run(command, capture_output=True, text=True, timeout=60)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise MetadataWriteError(f"SetFile failed for {path}: {e}") from e
        if result.returncode != 0:
            raise MetadataWriteError(f"SetFile failed for {path}: {result.stderr.strip()}")

    def _write_created_utime(self, path: Path, instant: datetime) -> None:
        """
        Without SetFile, an mtime earlier than the birth time drags the birth time back with it.
        The previous mtime is put back afterwards.
        """
        try:
            stat = self.stat(path)
        except MetadataReadError as e:
            raise MetadataWriteError(f"Cannot set creation time of {path}: {e}") from e
        if instant.timestamp() > stat.st_birthtime:
            raise UnsupportedAttributeError(
                f"Creation time of {path} can only be moved later with SetFile, which is not installed"
            )
        try:
            os.utime(path, ns=(stat.st_atime_ns, to_ns(instant)))
            os.utime(path, ns=(stat.st_atime_ns, stat.st_mtime_ns))
        except (OSError, OverflowError, ValueError) as e:
            raise MetadataWriteError(f"Cannot set creation time of {path}: {e}") from e


class WindowsFileTimes(FileTimes):

    def supports_creation_time(self) -> bool:
        return True

    def get_creation_timestamp(self, stat: os.stat_result) -> float | None:
        # st_ctime is the creation time on Windows; st_birthtime replaces it from 3.12
        return getattr(stat, 'st_birthtime', stat.st_ctime)

    def write_created(self, path: Path, instant: datetime) -> None:
        try:
            setctime(str(path), instant.timestamp())
        except (OSError, OverflowError, ValueError) as e:
            raise MetadataWriteError(f"Cannot set creation time of {path}: {e}") from e


def get_file_times(platform: str | None = None) -> FileTimes:
    """
    Pick the backend for the running platform.
    """
    match platform or sys.platform:
        case 'win32':
            return WindowsFileTimes()
        case 'darwin':
            return MacFileTimes()
        case _:
            return PosixFileTimes()
