""" Semantic version handling for changelog releases. Only the selected
    component of a version is ever incremented: lower-order components are
    not reset when a major or minor bump is made.

"""
from enum import Enum
from re import compile as compile_regex
from typing import NamedTuple, Optional


VERSION_PATTERN = compile_regex(r'(\d+)\.(\d+)\.(\d+)')


class BumpKind(Enum):
    """ The component of a version to increment. """
    MAJOR = 'major'
    MINOR = 'minor'
    PATCH = 'patch'


class ReleaseVersion(NamedTuple):
    major: int = 0
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, version_text: Optional[str]) -> 'ReleaseVersion':
        """ Search for the first "<major>.<minor>.<patch>" triple anywhere in
            the input text. If there is no match, or no text at all, the
            version is 0.0.0.

        """
        if version_text is None:
            return cls()

        match = VERSION_PATTERN.search(version_text)
        if match is None:
            return cls()

        return cls(*(int(component) for component in match.groups()))

    def bump(self, bump_kind: BumpKind) -> 'ReleaseVersion':
        """ Increment the requested component by one. """
        if bump_kind == BumpKind.MAJOR:
            return self._replace(major=self.major + 1)
        elif bump_kind == BumpKind.MINOR:
            return self._replace(minor=self.minor + 1)
        else:
            return self._replace(patch=self.patch + 1)

    def __str__(self) -> str:
        return f'{self.major}.{self.minor}.{self.patch}'


def get_new_version(bump_kind: BumpKind, prior_version: Optional[str]) -> str:
    """ Parse the prior version string, bump it and return the formatted
        result. Malformed prior versions degrade to 0.0.0 before the bump.

    """
    return str(ReleaseVersion.parse(prior_version).bump(bump_kind))
