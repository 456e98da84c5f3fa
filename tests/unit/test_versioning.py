""" Unit tests for the `changelog_bumper.versioning` module. """
from unittest import TestCase

from changelog_bumper.versioning import BumpKind, ReleaseVersion, get_new_version


class TestVersioning(TestCase):
    def test_parse(self):
        """ Ensure the first version triple is found anywhere in the input,
            and that anything without one defaults to 0.0.0.

        """
        with self.subTest('A plain version string'):
            self.assertTupleEqual(ReleaseVersion.parse('1.2.3'), (1, 2, 3))

        with self.subTest('A version surrounded by other text'):
            self.assertTupleEqual(ReleaseVersion.parse('v10.20.30-beta'),
                                  (10, 20, 30))

        with self.subTest('Only the first triple is used'):
            self.assertTupleEqual(ReleaseVersion.parse('1.2.3 then 4.5.6'),
                                  (1, 2, 3))

        with self.subTest('An incomplete version defaults to zero'):
            self.assertTupleEqual(ReleaseVersion.parse('1.2'), (0, 0, 0))

        with self.subTest('Non-dot separators default to zero'):
            self.assertTupleEqual(ReleaseVersion.parse('1-2-3'), (0, 0, 0))

        with self.subTest('No input defaults to zero'):
            self.assertTupleEqual(ReleaseVersion.parse(None), (0, 0, 0))
            self.assertTupleEqual(ReleaseVersion.parse(''), (0, 0, 0))

    def test_bump_only_increments_selected_component(self):
        """ Bumping a component never resets the lower-order components. """
        version = ReleaseVersion(2, 9, 9)

        self.assertTupleEqual(version.bump(BumpKind.MAJOR), (3, 9, 9))
        self.assertTupleEqual(version.bump(BumpKind.MINOR), (2, 10, 9))
        self.assertTupleEqual(version.bump(BumpKind.PATCH), (2, 9, 10))

        # The original instance is unchanged.
        self.assertTupleEqual(version, (2, 9, 9))

    def test_str(self):
        self.assertEqual(str(ReleaseVersion(1, 0, 12)), '1.0.12')
        self.assertEqual(str(ReleaseVersion()), '0.0.0')

    def test_get_new_version(self):
        """ Ensure the prior version string is parsed, bumped and formatted,
            including when the prior version is missing or malformed.

        """
        test_args = [
            ['Major bump', BumpKind.MAJOR, '2.9.9', '3.9.9'],
            ['Minor bump', BumpKind.MINOR, '2.9.9', '2.10.9'],
            ['Patch bump', BumpKind.PATCH, '1.2.3', '1.2.4'],
            ['No prior version', BumpKind.PATCH, None, '0.0.1'],
            ['Malformed prior version', BumpKind.MINOR, 'latest', '0.1.0'],
        ]

        for description, bump_kind, prior_version, expected in test_args:
            with self.subTest(description):
                self.assertEqual(get_new_version(bump_kind, prior_version),
                                 expected)

    def test_bump_kind_values(self):
        """ The enumeration values are the CLI subcommand names. """
        self.assertEqual(BumpKind('major'), BumpKind.MAJOR)
        self.assertEqual(BumpKind('minor'), BumpKind.MINOR)
        self.assertEqual(BumpKind('patch'), BumpKind.PATCH)

        with self.assertRaises(ValueError):
            BumpKind('micro')
