"""*********************************************************************************************************************
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
*                                                                                                                      *
* -------------------------------------------------------------------------------------------------------------------- *
*                                                                                                                      *
*    METADATA:                                                                                                         *
*                                                                                                                      *
*        File:    cli.py                                                                                               *
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
import argparse
import logging
import os
import sys
from dotenv import load_dotenv
from filedates import setup_logging
from filedates.editor import EditorConfig, TimestampEditor
from filedates.lib.codec import DATE_PATTERN_HINT
from filedates.lib.types import ApplyResult, GREEN2, RED2, RESET, YELLOW

logger = logging.getLogger(__name__)

EXIT_CODES = {
    ApplyResult.SUCCESS: 0,
    ApplyResult.FAILURE: 1,
    ApplyResult.NO_FILE: 2,
}

def env_flag(name: str) -> bool:
    return os.getenv(name, '').strip().lower() in ('1', 'true', 'yes', 'on')

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='filedates',
        description=f"Show or change a file's creation and modification dates. Date format: {DATE_PATTERN_HINT}",
    )
    parser.add_argument('-v', '--verbose', action='store_true', default=env_flag('FILEDATES_VERBOSE'), help='Verbose logging.')
    subparsers = parser.add_subparsers(dest='action', required=True)

    show = subparsers.add_parser('show', help='Print the current dates of a file.')
    show.add_argument('path', help='The file to inspect.')

    update = subparsers.add_parser('set', help='Change the dates of a file.')
    update.add_argument('path', help='The file to update.')
    update.add_argument('-c', '--created', help=f'New creation date ({DATE_PATTERN_HINT}). Defaults to the current value.')
    update.add_argument('-m', '--modified', help=f'New modification date ({DATE_PATTERN_HINT}). Defaults to the current value.')
    update.add_argument(
        '--no-rollback', action='store_true', default=env_flag('FILEDATES_NO_ROLLBACK'),
        help='Leave the file partially updated if one of the dates cannot be written.'
    )
    update.add_argument('--no-verify', action='store_true', help='Do not re-read the file after writing.')
    update.add_argument('--dry-run', action='store_true', help='Check the dates without writing them.')
    return parser

def show_dates(editor: TimestampEditor) -> int:
    created = editor.read_created()
    modified = editor.read_modified()
    print(f"File:              {editor.current_file}")
    print(f"File First Created {created or f'{YELLOW}unavailable{RESET}'}")
    print(f"File Last Modified {modified or f'{YELLOW}unavailable{RESET}'}")
    return 1 if created is None and modified is None else 0

def set_dates(editor: TimestampEditor, created: str | None, modified: str | None) -> int:
    # Omitted dates keep their current value
    if created is None:
        created = editor.read_created()
    if modified is None:
        modified = editor.read_modified()

    if created is None or modified is None:
        missing = 'creation' if created is None else 'modification'
        logger.error("The current %s date of %s cannot be read; pass it explicitly.", missing, editor.current_file)
        return 2

    result = editor.apply_dates(created, modified)
    color = GREEN2 if result == ApplyResult.SUCCESS else RED2
    print(f"{color}{result.message}{RESET}")
    return EXIT_CODES[result]

def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    # The result line is the output; plain INFO lines read as part of it
    setup_logging(args.verbose, suppress_info=not args.verbose)

    try:
        config = EditorConfig(
            rollback=not getattr(args, 'no_rollback', False),
            verify=not getattr(args, 'no_verify', False),
            dry_run=getattr(args, 'dry_run', False),
            verbose=args.verbose,
        )
        editor = TimestampEditor(config=config)
        editor.select_file(args.path)

        match args.action:
            case 'show':
                return show_dates(editor)
            case 'set':
                return set_dates(editor, args.created, args.modified)
            case _:
                logger.error("Invalid action: %s", args.action)
                return 2

    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130

if __name__ == "__main__":
    sys.exit(main())
