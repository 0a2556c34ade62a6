# app/utils/decorators.py
import inspect
from functools import wraps
from time import time
from app.core.logging import get_logger

logger = get_logger(__name__)


def log_request(func):
    """
    Decorator to log incoming requests and processing time.
    Works with both `def` and `async def` endpoints. Sync endpoints keep a
    sync wrapper so FastAPI still runs them in its threadpool.
    """

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            start_time = time()
            logger.info(f"Request started for endpoint: {func.__name__}")
            response = await func(*args, **kwargs)
            _log_finished(func, start_time)
            return response

        return async_wrapper

    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time()
        logger.info(f"Request started for endpoint: {func.__name__}")
        response = func(*args, **kwargs)
        _log_finished(func, start_time)
        return response

    return wrapper


def _log_finished(func, start_time: float) -> None:
    process_time = time() - start_time
    logger.info(
        f"Request to endpoint {func.__name__} finished in {process_time:.4f} seconds"
    )
