"""
=========
__main__.py
=========

Runs the changelog-bumper CLI
"""

import sys

if sys.version_info[0] != 3 or sys.version_info[1] < 8:
    raise Exception('You must use Python 3.8 or later')

import argparse
from importlib.metadata import PackageNotFoundError, version as package_version

from dateutil.parser import parse as parse_datetime

from changelog_bumper.changelog import bump_changelog
from changelog_bumper.config import config as bumper_config_from_env, validate_config
from changelog_bumper.exceptions import CustomError
from changelog_bumper.log_wrapper import get_logger
from changelog_bumper.versioning import BumpKind


def _release_date(value):
    """ argparse type for `--date`, accepting anything `dateutil` parses. """
    try:
        return parse_datetime(value).date()
    except (ValueError, OverflowError) as exception:
        raise argparse.ArgumentTypeError(
            f'invalid release date: {value!r}') from exception


def _get_version():
    try:
        return package_version('changelog-bumper')
    except PackageNotFoundError:
        return 'unknown'


def build_parser():
    """ Create the argument parser, with one subcommand per `BumpKind`. """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--changelog', dest='changelog_path', default=None,
                        help='Path of the changelog to update, for example '
                             'CHANGELOG.md or docs/CHANGELOG.md.')
    common.add_argument('--require-release', action='store_true',
                        default=False,
                        help='Fail if the changelog has no prior release, '
                             'instead of starting from 0.0.0.')
    common.add_argument('--allow-missing-changelog', action='store_true',
                        default=False,
                        help='Do nothing, rather than fail, if the changelog '
                             'does not exist.')
    common.add_argument('--date', dest='release_date', type=_release_date,
                        default=None,
                        help='Date of the new release, defaults to today.')
    common.add_argument('--dry-run', action='store_true', default=False,
                        help='Print the updated changelog instead of '
                             'writing it.')

    parser = argparse.ArgumentParser(
        prog='changelog-bumper',
        description='Automated changelog version bumping tool.')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {_get_version()}')

    subparsers = parser.add_subparsers(dest='command')
    subparsers.add_parser(BumpKind.MAJOR.value, parents=[common],
                          help='Major version bump')
    subparsers.add_parser(BumpKind.MINOR.value, parents=[common],
                          help='Minor version bump')
    subparsers.add_parser(BumpKind.PATCH.value, parents=[common],
                          help='Patch version bump')

    return parser


def _apply_overrides(config, args):
    """ Command line options take precedence over environment settings. """
    overrides = {}
    if args.changelog_path is not None:
        overrides['changelog_path'] = args.changelog_path
    if args.require_release:
        overrides['require_release'] = True
    if args.allow_missing_changelog:
        overrides['require_changelog'] = False
    if args.dry_run:
        overrides['dry_run'] = True

    return config._replace(**overrides)


def main(argv, **kwargs):
    """
    Parses command line arguments and invokes the appropriate method to respond to them

    Returns
    -------
    int
        The process exit status: 0 on success, 1 if the changelog could not
        be updated.
    """
    logger = get_logger()

    parser = build_parser()
    args = parser.parse_args(argv[1:])

    if args.command is None:
        print('Invalid command, try --help.')
        return 0

    try:
        # Optional: a BumperConfig and the current date are injectable for tests
        config = kwargs.get('config') or bumper_config_from_env(validate=False)
        config = _apply_overrides(config, args)
        validate_config(config)

        release_date = args.release_date or kwargs.get('today')

        bump_changelog(BumpKind(args.command), config,
                       release_date=release_date, logger=logger)
    except CustomError as exception:
        logger.error(f'{exception.exception_type}: {exception.message}')
        return 1

    return 0


def cli():
    """ Console script entry point. """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
