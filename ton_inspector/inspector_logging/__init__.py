"""
Structured logging for the TON inspector.

JSON logs with timestamp, address, event_type. Use get_logger() in all modules.
"""

from ton_inspector.inspector_logging.logger import bind_address, get_logger

__all__ = ["bind_address", "get_logger"]
