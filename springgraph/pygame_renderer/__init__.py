"""
Pygame Renderer for spring-graph layouts.

Main classes:
- Renderer: draws springs and nodes from the layout read-out arrays
"""

from .renderer import Renderer

__all__ = ['Renderer']
