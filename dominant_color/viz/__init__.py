"""
Módulo de visualización de paletas.
"""

from .palette import plot_palette

__all__ = ['plot_palette']
