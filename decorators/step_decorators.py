import functools
import inspect
import logging

logger = logging.getLogger("steps")


def run_step(title: str, func, *args, level: int = logging.INFO, **kwargs):
    """
    Run ``func(*args, **kwargs)`` as a named step.

    Logs the step title on entry, a completion line on success and
    a failure line on error. Only the innermost failing step logs the
    traceback. The exception is re-raised.
    """
    logger.log(level, "=== Step: %s ===", title)
    try:
        result = func(*args, **kwargs)
    except Exception as e:
        logged = getattr(e, "_step_traceback_logged", False)
        logger.error("=== Step: %s - Failed ===", title, exc_info=not logged)
        e._step_traceback_logged = True
        raise
    logger.log(level, "=== Step: %s - Completed ===", title)
    return result


def _step_title(message, method, instance, args, kwargs) -> str:
    if not callable(message):
        return message

    bound = inspect.signature(method).bind(instance, *args, **kwargs)
    bound.apply_defaults()
    arguments = dict(bound.arguments)
    arguments.pop("self", None)
    return message(**arguments)


def step(message, level: int = logging.INFO):
    """
    Method decorator that traces a page-object operation as a step.

    Args:
        message: Static title, or a callable receiving the method's
            arguments by name (without ``self``) and returning the title.
        level: Log level for the entry and completion lines.

    Example:
        @step(lambda locator, **_: f"Click on locator: {locator}")
        def click(self, locator, **options): ...
    """
    def decorator(method):

        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            title = _step_title(message, method, self, args, kwargs)
            return run_step(title, method, self, *args, level=level, **kwargs)

        return wrapper

    return decorator
