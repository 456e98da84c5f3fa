""" Unit tests for the `changelog_bumper.log_wrapper` module. """
from logging import getLogger
from unittest import TestCase

from changelog_bumper.log_wrapper import get_logger, log_elapsed


@log_elapsed
def add_numbers(first, second, logger=None):
    """ Add two numbers. """
    return first + second


@log_elapsed
def raise_error(logger=None):
    raise ValueError('Bad value')


class TestLogWrapper(TestCase):
    @classmethod
    def setUpClass(cls):
        """ Set test fixtures that can be defined once for all tests. """
        cls.logger = getLogger('test')

    def test_get_logger(self):
        logger = get_logger()

        self.assertEqual(logger.name, 'changelog-bumper')
        self.assertFalse(logger.propagate)

    def test_log_elapsed(self):
        """ Entry and completion are logged to the logger passed to the
            wrapped function, and the return value is unchanged.

        """
        with self.assertLogs('test', 'INFO') as logs:
            self.assertEqual(add_numbers(1, 2, logger=self.logger), 3)

        self.assertEqual(len(logs.output), 2)
        self.assertIn('Entered add_numbers', logs.output[0])
        self.assertIn('Function add_numbers executed in', logs.output[1])

    def test_log_elapsed_exception(self):
        """ Exceptions are logged and then re-raised. """
        with self.assertLogs('test', 'INFO') as logs:
            with self.assertRaises(ValueError):
                raise_error(logger=self.logger)

        self.assertIn('raise_error excepted in', logs.output[-1])

    def test_log_elapsed_default_logger(self):
        with self.assertLogs(get_logger(), 'INFO') as logs:
            add_numbers(3, 4)

        self.assertIn('Entered add_numbers', logs.output[0])

    def test_log_elapsed_keeps_metadata(self):
        self.assertEqual(add_numbers.__name__, 'add_numbers')
        self.assertEqual(add_numbers.__doc__, ' Add two numbers. ')
        self.assertEqual(add_numbers.__qualname__, 'add_numbers')
        self.assertEqual(add_numbers.__wrapped__(1, 1), 2)
