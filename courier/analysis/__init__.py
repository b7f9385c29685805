# courier/analysis/__init__.py
"""Analysis and metrics"""

from .analyzer import OrderAnalyzer

__all__ = ['OrderAnalyzer']
