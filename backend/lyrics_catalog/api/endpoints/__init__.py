"""
API endpoints package initialization
"""
from . import songs, health

__all__ = ['songs', 'health']
