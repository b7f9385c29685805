# courier/processing/__init__.py
"""Order processing logic"""

from .processor import OrderProcessor
from .validator import OrderValidator
from .pipeline import OrderPipeline

__all__ = ['OrderProcessor', 'OrderValidator', 'OrderPipeline']
