import time
from functools import wraps

from logger import get_logger

logger = get_logger(__name__)


def timing_decorator(func):
    """Decorator to log how long a coroutine function took, including
    when it raises."""

    @wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            return await func(*args, **kwargs)
        finally:
            elapsed = time.perf_counter() - start_time
            logger.debug(f"[TIME] {func.__qualname__} took {elapsed:.4f} seconds")

    return wrapper
