import functools
from logger import get_logger

logger = get_logger()


def transactional(func):
    """Commits the service's session when the coroutine returns, rolls back if it raises."""
    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs):
        try:
            result = await func(self, *args, **kwargs)
            await self.session.commit()
            return result
        except Exception:
            logger.debug(f"Rolling back {func.__qualname__}")
            await self.session.rollback()
            raise
    return wrapper
