"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    editor.py                                                                                            *
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
import logging
import os
from datetime import datetime
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr
from filedates.exceptions import MetadataError, MetadataReadError, ParseError
from filedates.lib.codec import DateCodec
from filedates.lib.file_times import FileTimes, get_file_times
from filedates.lib.types import ApplyResult, TimestampField, TimestampPair

logger = logging.getLogger(__name__)

class EditorConfig(BaseModel):
    """Configuration for the timestamp editor."""
    rollback: bool = Field(True, description="Restore the previous timestamps when an apply fails partway.")
    verify: bool = Field(True, description="Re-read the file after writing and compare against the input.")
    dry_run: bool = Field(False, description="If True, parse the input but do not write anything.")
    verbose: bool = Field(False, description="Enable debug logging.")

    def model_post_init(self, __context: dict) -> None:  # pydantic v2 hook
        if self.verbose:
            logging.getLogger('filedates').setLevel(logging.DEBUG)


class TimestampEditor(BaseModel):
    """
    Reads and rewrites the creation and modification dates of one selected file.

    Dates are exchanged as text in the 'dd/mm/yyyy hh:mm:ss' format. Every failure is
    reported through the return value, so callers only need to react to what comes back.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: EditorConfig = Field(default_factory=EditorConfig)
    file_times: FileTimes = Field(default_factory=get_file_times)

    _current_file: Path | None = PrivateAttr(default=None)

    @property
    def current_file(self) -> Path | None:
        return self._current_file

    def select_file(self, path: str | os.PathLike | None) -> None:
        """
        Replace the selected file. The path is not checked until it is read or written.
        """
        self._current_file = Path(path) if path is not None else None
        logger.debug('Selected file: %s', self._current_file)

    def read_created(self) -> str | None:
        """
        The selected file's creation date, or None if there is no file or it cannot be read.
        """
        return self._read_formatted(TimestampField.CREATED)

    def read_modified(self) -> str | None:
        """
        The selected file's last modification date, or None if there is no file or it cannot be read.
        """
        return self._read_formatted(TimestampField.MODIFIED)

    def read_dates(self) -> TimestampPair | None:
        if self._current_file is None:
            return None
        try:
            return self.file_times.read(self._current_file)
        except MetadataReadError as e:
            logger.debug('Unable to read dates: %s', e)
            return None

    def apply_dates(self, created_text: str, modified_text: str) -> ApplyResult:
        """
        Write new creation and modification dates to the selected file.

        Both dates are parsed before anything is written. Once written, the file is read again
        and must format back to exactly the text that was given. If anything fails after the first
        write, the previous dates are restored on a best-effort basis (see EditorConfig.rollback).

        Args:
            created_text: The new creation date, as 'dd/mm/yyyy hh:mm:ss'.
            modified_text: The new modification date, as 'dd/mm/yyyy hh:mm:ss'.

        Returns:
            ApplyResult.NO_FILE if no file is selected, SUCCESS if the file now has both dates,
            FAILURE otherwise.
        """
        path = self._current_file
        if path is None:
            logger.warning('No file selected')
            return ApplyResult.NO_FILE

        try:
            targets = {
                TimestampField.CREATED: DateCodec.parse(created_text),
                TimestampField.MODIFIED: DateCodec.parse(modified_text),
            }
        except ParseError as e:
            logger.warning('Not updating %s: %s', path.name, e)
            return ApplyResult.FAILURE

        if self.config.dry_run:
            logger.info('Dry run: would set %s to created %s, modified %s', path, created_text, modified_text)
            return ApplyResult.SUCCESS

        previous = self._snapshot(path)
        written: list[TimestampField] = []
        try:
            for field, instant in targets.items():
                self.file_times.write_time(path, field, instant)
                written.append(field)
        except MetadataError as e:
            logger.warning('Failed to update %s: %s', path.name, e)
            self._rollback(path, previous, written)
            return ApplyResult.FAILURE

        if self.config.verify and not self._verify(path, created_text, modified_text):
            self._rollback(path, previous, written)
            return ApplyResult.FAILURE

        logger.info('Updated %s: created %s, modified %s', path.name, created_text, modified_text)
        return ApplyResult.SUCCESS

    def _read_formatted(self, field: TimestampField) -> str | None:
        if self._current_file is None:
            return None
        try:
            return DateCodec.format(self.file_times.read_time(self._current_file, field))
        except MetadataReadError as e:
            logger.debug('Unable to read %s date: %s', field, e)
            return None

    def _snapshot(self, path: Path) -> dict[TimestampField, datetime | None]:
        snapshot: dict[TimestampField, datetime | None] = {}
        for field in (TimestampField.CREATED, TimestampField.MODIFIED):
            try:
                snapshot[field] = self.file_times.read_time(path, field)
            except MetadataReadError:
                snapshot[field] = None
        return snapshot

    def _verify(self, path: Path, created_text: str, modified_text: str) -> bool:
        expected = {TimestampField.CREATED: created_text, TimestampField.MODIFIED: modified_text}
        for field, text in expected.items():
            try:
                actual = DateCodec.format(self.file_times.read_time(path, field))
            except MetadataReadError as e:
                logger.warning('Unable to verify %s date of %s: %s', field, path.name, e)
                return False
            if actual != text:
                logger.warning('Verification failed for %s: %s date is "%s", expected "%s"', path.name, field, actual, text)
                return False
        return True

    def _rollback(self, path: Path, previous: dict[TimestampField, datetime | None], written: list[TimestampField]) -> None:
        """
        Best-effort restore of the dates that were overwritten. Never raises.
        """
        if not written:
            return

        if not self.config.rollback:
            logger.warning('Rollback disabled; %s left with new %s date(s)', path.name, ', '.join(str(f) for f in written))
            return

        for field in written:
            instant = previous.get(field)
            if instant is None:
                logger.warning('Cannot restore %s date of %s: it was not readable before the update', field, path.name)
                continue
            try:
                self.file_times.write_time(path, field, instant)
                logger.debug('Restored %s date of %s', field, path.name)
            except MetadataError as e:
                logger.warning('Failed to restore %s date of %s: %s', field, path.name, e)
