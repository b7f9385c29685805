# courier/models/__init__.py
"""Data models for delivery orders"""

from .order import Order, FormatError

__all__ = ['Order', 'FormatError']
