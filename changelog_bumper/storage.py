""" Reading and writing of the changelog file. The document is handled as a
    list of lines without their line terminators.

"""
from os.path import exists as file_exists, isfile
from typing import Iterable, List

from changelog_bumper.exceptions import (ChangelogNotFoundError,
                                         ChangelogReadError,
                                         ChangelogWriteError)


def changelog_exists(changelog_path: str) -> bool:
    """ Check that the changelog exists and is a regular file. """
    return isfile(changelog_path)


def read_changelog_lines(changelog_path: str) -> List[str]:
    """ Read the whole changelog into memory. Both "\\n" and "\\r\\n" line
        endings are accepted, and removed from the returned lines. Lines are
        only split on "\\n", so a lone "\\r" is kept as part of its line.

    """
    if not file_exists(changelog_path):
        raise ChangelogNotFoundError(changelog_path)
    elif not isfile(changelog_path):
        raise ChangelogNotFoundError(changelog_path, 'is not a file')

    try:
        with open(changelog_path, 'r', encoding='utf-8',
                  newline='\n') as file_handler:
            return [_strip_line_ending(line) for line in file_handler]
    except (OSError, UnicodeDecodeError) as exception:
        raise ChangelogReadError(changelog_path, exception) from exception


def write_changelog_lines(changelog_path: str, lines: Iterable[str]) -> None:
    """ Overwrite the changelog, terminating every line with "\\n". There is
        no rollback: a failure part way through can leave the file truncated.

    """
    try:
        with open(changelog_path, 'w', encoding='utf-8',
                  newline='\n') as file_handler:
            file_handler.writelines(f'{line}\n' for line in lines)
    except OSError as exception:
        raise ChangelogWriteError(changelog_path, exception) from exception


def _strip_line_ending(line: str) -> str:
    """ Remove a single trailing "\\r\\n" or "\\n". Any other "\\r" is content. """
    if line.endswith('\r\n'):
        return line[:-2]
    elif line.endswith('\n'):
        return line[:-1]

    return line
