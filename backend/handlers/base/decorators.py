"""
Decorators for AI function methods on handlers.
"""

import inspect
from functools import wraps
from typing import Any, Callable, Optional
import logging

_log = logging.getLogger(__name__)


def _record(handler: Any, name: str, result: Any) -> None:
    """Hand the result to the handler's tracker; tracking problems never reach the caller."""
    tracker = getattr(handler, "_track_tool_output", None)
    if tracker is None:
        return
    try:
        tracker(name, result)
    except Exception as e:
        _log.warning(f"Failed to track tool output for {name}: {e}")


def track_tool_output(func: Optional[Callable] = None, *, tool_name: Optional[str] = None) -> Callable:
    """
    Record every result of the decorated method on its handler.

    Place it directly under @ai_function. Usable bare or with a custom name:

        @ai_function(desc="...")
        @track_tool_output
        async def get_molar_mass(self, formula): ...

        @ai_function(desc="...")
        @track_tool_output(tool_name="units")
        async def list_supported_units(self): ...

    Coroutine functions get an async wrapper, plain functions a sync one.
    Objects without _track_tool_output (BaseHandler provides it) are left
    alone.
    """
    def decorator(fn: Callable) -> Callable:
        name = tool_name or fn.__name__

        if inspect.iscoroutinefunction(fn):
            @wraps(fn)
            async def async_wrapper(self, *args, **kwargs):
                result = await fn(self, *args, **kwargs)
                _record(self, name, result)
                return result
            return async_wrapper

        @wraps(fn)
        def sync_wrapper(self, *args, **kwargs):
            result = fn(self, *args, **kwargs)
            _record(self, name, result)
            return result
        return sync_wrapper

    return decorator(func) if func is not None else decorator
