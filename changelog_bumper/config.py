""" Runtime configuration for the changelog bumper. Values are read from
    environment variables, and may then be overridden by command line
    options via `BumperConfig._replace`.

    The strict and lenient behaviours of the tool are expressed as flags on
    this single configuration, rather than as separate code paths:

    * `require_release`: a changelog with no prior release heading is an
      error, instead of implicitly starting from version 0.0.0.
    * `require_changelog`: a missing changelog file is an error, instead of
      a logged no-op.

"""
from os import environ
from typing import NamedTuple

from changelog_bumper.exceptions import ConfigurationError


DEFAULT_CHANGELOG_PATH = 'CHANGELOG.md'
DOCS_CHANGELOG_PATH = 'docs/CHANGELOG.md'


class BumperConfig(NamedTuple):
    """ Settings for a single invocation of the changelog bumper. """
    changelog_path: str = DEFAULT_CHANGELOG_PATH
    require_release: bool = False
    require_changelog: bool = True
    dry_run: bool = False


def _bool_from_env(name: str, default: bool) -> bool:
    """ Interpret an environment variable as a boolean. Only 'true' and
        'false' (case-insensitive) are recognised, any other value falls
        back to the default.

    """
    value = environ.get(name, '').strip().lower()
    if value == 'true':
        return True
    elif value == 'false':
        return False

    return default


def config(validate: bool = True) -> BumperConfig:
    """ Build a `BumperConfig` from the environment. If `validate` is set, an
        empty changelog path raises a `ConfigurationError`.

    """
    bumper_config = BumperConfig(
        changelog_path=environ.get('CHANGELOG_PATH', DEFAULT_CHANGELOG_PATH),
        require_release=_bool_from_env('CHANGELOG_REQUIRE_RELEASE', False),
        require_changelog=_bool_from_env('CHANGELOG_REQUIRE_FILE', True),
        dry_run=_bool_from_env('CHANGELOG_DRY_RUN', False),
    )

    if validate:
        validate_config(bumper_config)

    return bumper_config


def validate_config(bumper_config: BumperConfig) -> None:
    """ Ensure the configuration can be used to run the tool. """
    if not bumper_config.changelog_path or not bumper_config.changelog_path.strip():
        raise ConfigurationError('The changelog path must not be empty.')
