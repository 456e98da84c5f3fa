"""Simple wrapper to add a harmony logger to the changelog bumper."""

from functools import wraps
from logging import INFO
from time import time

from harmony.util import config
from harmony.logging import build_logger

c = config(validate=False)
c = c._replace(text_logger=True, app_name="changelog-bumper")
logger = build_logger(c, name='changelog-bumper', stream=None)
logger.propagate = False
logger.setLevel(INFO)


def get_logger():
    """Return a logger to use in the changelog bumper."""
    return logger


def log_elapsed(func):
    """Wrap function with a logging timer.

    A `logger` keyword argument of the wrapped call takes precedence over
    the module logger, so timings land wherever the call itself logs.
    """
    @wraps(func)
    def wrap_func(*args, **kwargs):
        funcname = func.__name__ if func.__name__ else 'unknown function'
        func_logger = kwargs.get('logger') or logger

        t1 = time()
        func_logger.info(f'Entered {funcname}')
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            func_logger.info(f'{funcname} excepted in {(time()-t1):.4f}s')
            raise e
        t2 = time()
        func_logger.info(f'Function {funcname} executed in {(t2-t1):.4f}s')
        return result

    return wrap_func
