""" This module contains custom exceptions specific to the changelog bumper.
    These exceptions are intended to allow for easier reporting of the
    expected errors that may occur during an invocation of the tool. Every
    one of them is terminal for that invocation and results in a non-zero
    exit status.

"""


class CustomError(Exception):
    """ Base class for exceptions in the changelog bumper. The
        `exception_type` is included in the log message emitted by the CLI
        before it exits.

    """
    def __init__(self, exception_type, message):
        self.exception_type = exception_type
        self.message = message
        super().__init__(self.message)


class ChangelogNotFoundError(CustomError):
    """ This exception is raised when the configured changelog path does not
        exist, or exists but is not a regular file.

    """
    def __init__(self, changelog_path, reason='does not exist'):
        super().__init__('ChangelogNotFoundError',
                         f'{changelog_path} {reason}.')


class ChangelogReadError(CustomError):
    """ This exception is raised when the changelog exists, but its contents
        could not be read, for example due to permissions or an invalid
        encoding.

    """
    def __init__(self, changelog_path, cause):
        super().__init__('ChangelogReadError',
                         f'Could not read {changelog_path}: {cause}')


class ChangelogWriteError(CustomError):
    """ This exception is raised when writing the rewritten changelog fails.
        No rollback is attempted, so the file may be left partially written.

    """
    def __init__(self, changelog_path, cause):
        super().__init__('ChangelogWriteError',
                         f'Could not write {changelog_path}: {cause}')


class MissingReleaseError(CustomError):
    """ This exception is raised when a prior release heading is required,
        but none was found above the Unreleased section contents.

    """
    def __init__(self, changelog_path):
        super().__init__('MissingReleaseError',
                         (f'{changelog_path} has no prior release heading '
                          'matching "## [X.Y.Z] - <date>".'))


class ConfigurationError(CustomError):
    """ This exception is raised when the runtime configuration is invalid. """
    def __init__(self, message):
        super().__init__('ConfigurationError', message)
