"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    __init__.py                                                                                          *
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
import colorlog
import logging

__version__ = "0.1.0"

LOG_COLORS = {
	'DEBUG': 'green',
	'INFO': 'blue',
	'WARNING': 'yellow',
	'ERROR': 'red',
	'CRITICAL': 'red,bg_white',
}

class LevelFormatter(colorlog.ColoredFormatter):
	"""
	Colored formatter that can print INFO records as the bare message.
	"""

	def __init__(self, fmt: str, suppress_info: bool = False) -> None:
		super().__init__(fmt, log_colors=LOG_COLORS)
		self.suppress_info = suppress_info

	def format(self, record: logging.LogRecord) -> str:
		if self.suppress_info and record.levelno == logging.INFO:
			return record.getMessage()
		return super().format(record)

def setup_logging(verbose: bool = False, suppress_info: bool = False) -> logging.Logger:
	"""
	Send colored log output to stderr. Verbose mode adds DEBUG records and the logger name.
	"""
	level = logging.DEBUG if verbose else logging.INFO
	fmt = '(%(log_color)s%(levelname)s%(reset)s) %(name)s: %(message)s' if verbose else '(%(log_color)s%(levelname)s%(reset)s) %(message)s'

	handler = colorlog.StreamHandler()
	handler.setFormatter(LevelFormatter(fmt, suppress_info=suppress_info))

	root_logger = logging.getLogger()
	root_logger.handlers = []  # Clear existing handlers
	root_logger.addHandler(handler)
	root_logger.setLevel(level)

	return root_logger
