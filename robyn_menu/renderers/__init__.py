from .base import BaseRenderer, ListRenderer, OrderedListRenderer, DivRenderer, get_renderer

__all__ = [
    'BaseRenderer',
    'ListRenderer',
    'OrderedListRenderer',
    'DivRenderer',
    'get_renderer'
]
