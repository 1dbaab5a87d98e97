import sys
import functools


class FatalError(Exception):
    """Unrecoverable error. The caller at the process boundary decides what to do with it."""


def error(msg: str):
    raise FatalError(msg)


def exit_on_fatal(func):
    """
    Wrap an entry point so a FatalError prints its message to stderr
    and ends the process with status 1.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FatalError as err:
            print(repr(str(err)), file=sys.stderr)
            sys.exit(1)
    return wrapper
