# courier/io/__init__.py
"""Input/Output operations"""

from .loader import DataLoader
from .saver import ResultSaver

__all__ = ['DataLoader', 'ResultSaver']
