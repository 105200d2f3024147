"""
Base handler class shared by all handlers.
"""

import logging
from typing import Any, Dict, List

_log = logging.getLogger(__name__)


class BaseHandler:
    """
    Base class for all handlers.

    Keeps a bounded log of recent AI function outputs so the chat layer can
    show which tools ran and what they returned.
    """

    max_tracked_outputs = 50

    def __init__(self, **kwargs):
        self.recent_tool_outputs: List[Dict[str, Any]] = []
        for key, value in kwargs.items():
            setattr(self, key, value)

    def _track_tool_output(self, tool_name: str, result: Any) -> None:
        """Record a tool result, dropping the oldest entries past the cap."""
        self.recent_tool_outputs.append({
            "tool_name": tool_name,
            "result": result,
        })
        overflow = len(self.recent_tool_outputs) - self.max_tracked_outputs
        if overflow > 0:
            del self.recent_tool_outputs[:overflow]
        _log.debug(f"Tracked output for {tool_name} ({len(self.recent_tool_outputs)} stored)")

    def clear_tool_outputs(self) -> None:
        self.recent_tool_outputs.clear()
