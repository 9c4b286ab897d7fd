from .config import MenuConfig, ActiveElement
from .exceptions import (
    MenuError, MenuConfigError, LinkResolutionError, ParentCycleError, MenuNotFoundError
)
from .request import RequestContext
from .routing import UrlResolver
from .link import Link
from .item import MenuItem
from .collection import ItemCollection
from .menu import Menu, MenuManager

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
    'MenuNotFoundError'
]
