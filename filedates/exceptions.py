"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    exceptions.py                                                                                        *
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
class AppError(Exception):
	pass

class ParseError(AppError, ValueError):
	"""
	Text does not match the date format, or names a date that does not exist.
	"""

class MetadataError(AppError, OSError):
	pass

class MetadataReadError(MetadataError):
	pass

class MetadataWriteError(MetadataError):
	pass

class UnsupportedAttributeError(MetadataWriteError):
	"""
	The platform has no way to set this attribute.
	"""
