"""
Core primitives for tutor: errors, logging, settings, protocols.

Everything the lesson framework and the CLI share lives here; nothing in
``tutor.core`` imports from ``tutor.framework`` or ``tutor.cli``.
"""

from tutor.core.errors import (
    ErrorCategory,
    RegistryError,
    SelectionNotFoundError,
    TutorError,
)
from tutor.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from tutor.core.protocols import FunctionRunnable, LessonRunnable
from tutor.core.settings import TutorSettings, clear_settings_cache, get_settings

__all__ = [
    # errors
    "ErrorCategory",
    "TutorError",
    "SelectionNotFoundError",
    "RegistryError",
    # logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
    # protocols
    "LessonRunnable",
    "FunctionRunnable",
    # settings
    "TutorSettings",
    "get_settings",
    "clear_settings_cache",
]
