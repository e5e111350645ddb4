"""
Utility functions and decorators.
"""

from .error_handlers import handle_api_errors, register_exception_handlers

__all__ = ["handle_api_errors", "register_exception_handlers"]
