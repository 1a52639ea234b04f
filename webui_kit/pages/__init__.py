"""
Reusable page objects.
"""

from .login_page import GenericLoginPage

__all__ = ["GenericLoginPage"]
