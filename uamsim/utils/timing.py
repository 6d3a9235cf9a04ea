import logging
from functools import wraps
from time import perf_counter
from uamsim.simulation.params import FUNCTION_TIMING

logger = logging.getLogger(__name__)

def timing(f):
    """Logs the wall time of each call when FUNCTION_TIMING is set."""
    @wraps(f)
    def wrap(*args, **kw):
        if not FUNCTION_TIMING:
            return f(*args, **kw)

        start = perf_counter()
        result = f(*args, **kw)
        logger.info(f'func:{f.__qualname__} took: {perf_counter() - start:2.4f} secs')
        return result
    return wrap
