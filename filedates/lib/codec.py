"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    codec.py                                                                                             *
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
import re
from datetime import datetime
from typing import Final, TypeAlias
from filedates.exceptions import ParseError

DATE_PATTERN_HINT: Final[str] = 'dd/mm/yyyy hh:mm:ss (24-hour)'

Instant: TypeAlias = datetime | int | float


class DateCodec:
    """
    Converts between an instant and its fixed textual form.

    Text is always read and written in the host's local time. Precision is whole seconds.
    """
    _re_date: Final[re.Pattern[str]] = re.compile(
        r"^(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{4}) (?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})$",
        re.ASCII,
    )

    @classmethod
    def format(cls, instant: Instant) -> str:
        """
        Render an instant as 'dd/mm/yyyy hh:mm:ss' in local time.

        Args:
            instant: An aware datetime, a naive datetime (taken as local time) or a POSIX timestamp.

        Returns:
            The formatted date. Sub-second precision is truncated, never rounded.

        Examples:
            >>> DateCodec.format(datetime(2023, 7, 15, 18, 45, 10, 999999))
            '15/07/2023 18:45:10'
        """
        if isinstance(instant, datetime):
            local = instant.astimezone() if instant.tzinfo else instant
        else:
            local = datetime.fromtimestamp(instant)
        # strftime('%Y') does not zero-pad years before 1000 on every platform
        return f"{local:%d/%m}/{local.year:04d} {local:%H:%M:%S}"

    @classmethod
    def parse(cls, text: str) -> datetime:
        """
        Parse 'dd/mm/yyyy hh:mm:ss' into a timezone-aware local datetime.

        Raises:
            ParseError: If the text does not match the format exactly, or names a date or time that does not exist.

        Examples:
            >>> DateCodec.parse('01/06/2022 08:30:00').strftime('%Y-%m-%d %H:%M:%S')
            '2022-06-01 08:30:00'
        """
        if not isinstance(text, str):
            raise ParseError(f"Expected a string, got {type(text).__name__}")

        if not (match := cls._re_date.fullmatch(text)):
            raise ParseError(f'"{text}" does not match {DATE_PATTERN_HINT}')

        try:
            naive = datetime(
                year=int(match.group('year')),
                month=int(match.group('month')),
                day=int(match.group('day')),
                hour=int(match.group('hour')),
                minute=int(match.group('minute')),
                second=int(match.group('second')),
            )
            return naive.astimezone()
        except (ValueError, OverflowError, OSError) as e:
            raise ParseError(f'"{text}" is not a valid date: {e}') from e

    @classmethod
    def is_valid(cls, text: str) -> bool:
        try:
            cls.parse(text)
        except ParseError:
            return False
        return True
