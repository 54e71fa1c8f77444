"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    __main__.py                                                                                          *
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
from filedates.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
