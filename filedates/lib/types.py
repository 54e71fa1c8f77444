"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    types.py                                                                                             *
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
from datetime import datetime
from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict


class Choices(Enum):
	"""
	Enum whose members compare equal to their string values.
	"""

	def __eq__(self, value: Any) -> bool:
		"""
		Allow comparisons with strings.
		"""
		if isinstance(value, str):
			return self.value == value
		return super().__eq__(value)

	def __str__(self) -> str:
		return self.value

	def __hash__(self) -> int:
		"""
		Allow the enum to be used as a key in a dict.
		"""
		return hash(self.value)


class ApplyResult(Choices):
	"""
	Outcome of applying new dates to the selected file.
	"""
	NO_FILE = 'no_file'
	SUCCESS = 'success'
	FAILURE = 'failure'

	@property
	def message(self) -> str:
		"""
		The text shown to the user for this outcome.
		"""
		match self:
			case ApplyResult.NO_FILE:
				return 'No file selected.'
			case ApplyResult.SUCCESS:
				return 'File was updated successfully.'
			case _:
				return 'An Error Occurred. Check Date Format.'


class TimestampField(Choices):
	CREATED = 'created'
	MODIFIED = 'modified'


class TimestampPair(BaseModel):
	"""
	The creation and modification times of a single file.
	"""
	model_config = ConfigDict(frozen=True)

	created: datetime
	modified: datetime


# Styles
RESET = '\033[0m'
BOLD = '\033[1m'
DIM = '\033[2m'

ANSI_RED = '\033[91m'
ANSI_GREEN = '\033[92m'
ANSI_YELLOW = '\033[93m'

YELLOW = f'{RESET}{DIM}{ANSI_YELLOW}'
RED2 = f'{RESET}{BOLD}{ANSI_RED}'
GREEN2 = f'{RESET}{BOLD}{ANSI_GREEN}'
