"""
Core abstractions for Snake Arcade.

Provides the interface every presentation layer implements.
"""

from .presenter_interface import PresenterInterface, RenderFrame, format_score

__all__ = [
    'PresenterInterface',
    'RenderFrame',
    'format_score',
]
