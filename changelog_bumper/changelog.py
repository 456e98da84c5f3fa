"""
==================
changelog.py
==================

Promotes the "Unreleased" section of a changelog to a new, dated release.

The work happens in two passes over the lines of the document:

* `scan_changelog` walks the lines above the first existing release heading,
  extracting the latest released version and recording which of the
  Changed, Added and Fixed categories have at least one bullet entry.
* `rewrite_changelog` builds a new list of lines, replacing the
  "## Unreleased" marker with a fresh Unreleased block and the new release
  heading, and dropping category headings with no entries.

Both passes are pure functions of their inputs. `bump_changelog` reads the
file, runs them and writes the result back.
"""
from datetime import date
from logging import Logger
from re import compile as compile_regex
from typing import List, NamedTuple, Optional, Sequence

from changelog_bumper.config import BumperConfig
from changelog_bumper.exceptions import MissingReleaseError
from changelog_bumper.log_wrapper import get_logger, log_elapsed
from changelog_bumper.storage import (changelog_exists, read_changelog_lines,
                                      write_changelog_lines)
from changelog_bumper.versioning import BumpKind, get_new_version


UNRELEASED_HEADING = '## Unreleased'
RELEASE_HEADING_PREFIX = '## ['
CHANGED_HEADING = '### Changed'
ADDED_HEADING = '### Added'
FIXED_HEADING = '### Fixed'
CATEGORY_HEADINGS = (CHANGED_HEADING, ADDED_HEADING, FIXED_HEADING)
BULLET_MARKER = '-'

# Dots in the version group are unescaped, so "1-2-3" also matches.
RELEASE_PATTERN = compile_regex(r'## \[(\d+.\d+.\d+)\] -.*')


class CategoryState(NamedTuple):
    """ Whether each category of the Unreleased section has entries. """
    changed: bool = False
    added: bool = False
    fixed: bool = False

    def has_entries(self, heading: str) -> bool:
        """ Look up the flag for a category heading line, e.g. "### Added". """
        return {CHANGED_HEADING: self.changed,
                ADDED_HEADING: self.added,
                FIXED_HEADING: self.fixed}[heading]


class ScanResult(NamedTuple):
    """ The outcome of `scan_changelog`. `prior_version` is None when no
        release heading was found.

    """
    prior_version: Optional[str]
    categories: CategoryState


class _ScanState:
    """ Mutable state threaded through a single scan of a document. """

    def __init__(self):
        self.last_line = ''
        self.prior_version = None
        self.populated = set()

    def observe(self, line: str) -> bool:
        """ Update the state with the next line. Returns False once the first
            release heading has been reached, at which point the scan stops.

        """
        if self.last_line in CATEGORY_HEADINGS and line.startswith(BULLET_MARKER):
            self.populated.add(self.last_line)

        release_match = RELEASE_PATTERN.search(line)
        if release_match is not None:
            self.prior_version = release_match.group(1)

        if line.startswith(RELEASE_HEADING_PREFIX):
            return False

        self.last_line = line
        return True

    def result(self) -> ScanResult:
        return ScanResult(
            self.prior_version,
            CategoryState(changed=CHANGED_HEADING in self.populated,
                          added=ADDED_HEADING in self.populated,
                          fixed=FIXED_HEADING in self.populated)
        )


def scan_changelog(lines: Sequence[str]) -> ScanResult:
    """ Walk the document from the top until the first line starting with
        "## [". A category only counts as populated when a bullet line
        directly follows its heading.

    """
    state = _ScanState()
    for line in lines:
        if not state.observe(line):
            break

    return state.result()


def rewrite_changelog(lines: Sequence[str], scan_result: ScanResult,
                      new_version: str, release_date: str) -> List[str]:
    """ Build the rewritten document. Every "## Unreleased" line is replaced
        by a fresh, empty Unreleased block followed by the new release
        heading. Above the first pre-existing release heading, category
        headings without entries are dropped. All other lines, including
        bullets, are passed through unchanged.

    """
    output_lines = []
    passed_last_release = False

    for line in lines:
        if line == UNRELEASED_HEADING:
            output_lines.extend([UNRELEASED_HEADING, CHANGED_HEADING,
                                 ADDED_HEADING, FIXED_HEADING, ''])
            output_lines.append(f'{RELEASE_HEADING_PREFIX}{new_version}] - '
                                f'{release_date}')
        elif not passed_last_release and line in CATEGORY_HEADINGS:
            if scan_result.categories.has_entries(line):
                output_lines.append(line)
        elif line.startswith(RELEASE_HEADING_PREFIX):
            passed_last_release = True
            output_lines.append(line)
        else:
            output_lines.append(line)

    return output_lines


def format_release_date(release_date: date) -> str:
    return release_date.strftime('%Y-%m-%d')


@log_elapsed
def bump_changelog(bump_kind: BumpKind, bumper_config: BumperConfig,
                   release_date: date = None,
                   logger: Logger = None) -> Optional[str]:
    """ Cut a new release in the configured changelog, returning the new
        version string.

        If the changelog does not exist and `require_changelog` is not set,
        nothing is changed and None is returned. If no prior release is
        found and `require_release` is set, a `MissingReleaseError` is raised
        before anything is written. With `dry_run`, the rewritten document is
        printed to standard output instead of being written to the file.

        Parameters:
        ___________
        bump_kind: the version component to increment.
        bumper_config: the runtime configuration.
        release_date: the date for the new release heading, defaulting to
            today's local date.
        logger: a Logger for progress messages.

    """
    if logger is None:
        logger = get_logger()

    changelog_path = bumper_config.changelog_path

    if not bumper_config.require_changelog and not changelog_exists(changelog_path):
        logger.warning(f'{changelog_path} not found, nothing to do.')
        return None

    lines = read_changelog_lines(changelog_path)

    scan_result = scan_changelog(lines)

    if scan_result.prior_version is None:
        if bumper_config.require_release:
            raise MissingReleaseError(changelog_path)

        logger.info('No prior release found, starting from 0.0.0')

    if UNRELEASED_HEADING not in lines:
        logger.warning(f'{changelog_path} has no "{UNRELEASED_HEADING}" '
                       'section, no release heading will be added.')

    new_version = get_new_version(bump_kind, scan_result.prior_version)

    if release_date is None:
        release_date = date.today()

    output_lines = rewrite_changelog(lines, scan_result, new_version,
                                     format_release_date(release_date))

    if bumper_config.dry_run:
        print('\n'.join(output_lines))
    else:
        write_changelog_lines(changelog_path, output_lines)

    logger.info(f'Bumped {changelog_path} from '
                f'{scan_result.prior_version or "0.0.0"} to {new_version} '
                f'({bump_kind.value})')

    return new_version
