import functools
import inspect
import logging


logger = logging.getLogger('utils')


def log_errors(func):
    """
    A decorator that logs exceptions raised by the wrapped function and re-raises them.

    The acting user is taken from the 'user_id' argument when the wrapped function
    has one, whether it was passed positionally or by keyword, so the log line
    carries the same 'user' field as regular use case logs.

    :param func: The function to be wrapped.
    :return: The wrapped function with error logging.
    """
    signature = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            try:
                user = signature.bind_partial(*args, **kwargs).arguments.get('user_id')
            except TypeError:
                user = None
            logger.error(f"Error in {func.__name__}: {e}", exc_info=True, extra={'user': user or 'SYSTEM'})
            raise
    return wrapper
