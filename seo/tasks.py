from functools import wraps

from celery import shared_task
from celery.utils.log import get_task_logger
from django.core.cache import cache

from seo.export import write_sitemaps

logger = get_task_logger(__name__)


def task_lock(timeout=60 * 10):
    """
    Decorator that prevents a task from being executed concurrently.
    Uses Django's cache to hold a lock keyed on the task name and its
    string/int arguments.

    Args:
        timeout: Lock timeout in seconds (default: 10 minutes)
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            lock_args = [str(arg) for arg in args if isinstance(arg, (int, str))]
            lock_kwargs = [
                f"{key}:{value}"
                for key, value in kwargs.items()
                if isinstance(value, (int, str))
            ]
            lock_key = f"task_lock:{func.__name__}:{':'.join(lock_args)}:{':'.join(lock_kwargs)}"

            if not cache.add(lock_key, "locked", timeout):
                logger.info(f"Task {func.__name__} is already running. Skipping.")
                return None
            try:
                return func(*args, **kwargs)
            finally:
                cache.delete(lock_key)
        return wrapper
    return decorator


@shared_task
@task_lock(timeout=60 * 30)
def regenerate_sitemaps(output_dir=None):
    """
    Regenerate every sitemap file. Meant to be scheduled with celery beat.

    Returns:
        Names of the written files.
    """
    logger.info("Regenerating sitemaps")
    paths = write_sitemaps(output_dir)
    logger.info(f"Regenerated {len(paths)} sitemaps")
    return [path.name for path in paths]
