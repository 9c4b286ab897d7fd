from .core import (
    Menu, MenuManager, MenuItem, MenuConfig, ActiveElement, ItemCollection, Link,
    UrlResolver, RequestContext, MenuError, MenuConfigError, LinkResolutionError,
    ParentCycleError, MenuNotFoundError
)
from .renderers import get_renderer

__version__ = '0.1.0'

__all__ = [
    'Menu',
    'MenuManager',
    'MenuItem',
    'MenuConfig',
    'ActiveElement',
    'ItemCollection',
    'Link',
    'UrlResolver',
    'RequestContext',
    'MenuError',
    'MenuConfigError',
    'LinkResolutionError',
    'ParentCycleError',
    'MenuNotFoundError',
    'get_renderer'
]
