from typing import Any, Dict, Optional

from .attributes import HasAttributes
from .exceptions import LinkResolutionError
from .routing import UrlResolver
from .utils import add_html_class, is_absolute_url, join_url

LINK_SOURCES = ('url', 'route', 'action')


class Link(HasAttributes):
    """菜单项的链接"""

    def __init__(
        self,
        path: Optional[Dict[str, Any]] = None,
        active_class: str = 'active',
        resolver: Optional[UrlResolver] = None,
        root: str = ''
    ):
        """
        :param path: 最多包含 url / route / action 其中之一, 可选 prefix
        :param active_class: 激活时添加的 CSS 类
        :param resolver: 用于解析 route / action
        :param root: 相对链接的根地址
        """
        self.path = dict(path or {})
        self.active_class = active_class
        self.resolver = resolver or UrlResolver()
        self.root = root or ''
        self.is_active = False
        self.attributes: Dict[str, Any] = {}
        # URL 只在创建时解析一次
        self._url = self._resolve()

    def _resolve(self) -> Optional[str]:
        sources = [key for key in LINK_SOURCES if self.path.get(key) is not None]
        if not sources:
            return None
        if len(sources) > 1:
            raise LinkResolutionError(f"链接只能指定一个来源, 收到: {', '.join(sources)}")

        source = sources[0]
        target = self.path[source]
        if source == 'url':
            return self._resolve_url(str(target), self.path.get('prefix'))

        params = None
        if isinstance(target, (list, tuple)):
            target, params = target[0], (target[1] if len(target) > 1 else None)
        if source == 'route':
            return self.resolver.route(target, params, root=self.root)
        return self.resolver.action(target, params, root=self.root)

    def _resolve_url(self, url: str, prefix: Optional[str]) -> str:
        if is_absolute_url(url):
            return url
        if prefix:
            leading = '/' if str(prefix).startswith('/') else ''
            url = leading + join_url('', prefix, url)
        if self.root:
            return join_url(self.root, url)
        return url

    def url(self) -> Optional[str]:
        return self._url

    @property
    def href(self) -> Optional[str]:
        return self._url

    def activate(self) -> 'Link':
        """标记链接为激活状态"""
        self.attributes['class'] = add_html_class(self.attributes.get('class'), self.active_class)
        self.is_active = True
        return self

    def __repr__(self) -> str:
        return f"Link(url={self._url!r}, is_active={self.is_active})"
