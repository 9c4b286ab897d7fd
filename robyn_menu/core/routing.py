import re
import logging
from typing import Any, Callable, Dict, Optional, Union
from urllib.parse import quote, urlencode

from .exceptions import LinkResolutionError
from .utils import is_absolute_url, join_url

logger = logging.getLogger(__name__)

# Robyn 路由中的路径参数, 例如 /articles/:id
_PARAM_RE = re.compile(r':([A-Za-z_][A-Za-z0-9_]*)')

Action = Union[str, Callable]


def action_name(action: Action) -> str:
    """处理函数的注册名称"""
    if isinstance(action, str):
        return action
    module = getattr(action, '__module__', None)
    qualname = getattr(action, '__qualname__', None) or getattr(action, '__name__', None)
    if qualname is None:
        raise LinkResolutionError(f"无法识别的处理函数: {action!r}")
    return f"{module}.{qualname}" if module else qualname


class UrlResolver:
    """根据路由名称或处理函数生成 URL"""

    def __init__(self, routes: Optional[Dict[str, str]] = None):
        self.routes: Dict[str, str] = dict(routes or {})
        self.actions: Dict[str, str] = {}

    def add_route(self, name: str, path: str) -> 'UrlResolver':
        """注册命名路由, path 使用 Robyn 的 :param 语法"""
        if name in self.routes:
            logger.warning("Route '%s' is registered twice, keeping %s", name, path)
        self.routes[name] = path
        return self

    def add_action(self, action: Action, path: str) -> 'UrlResolver':
        """注册处理函数对应的路径"""
        self.actions[action_name(action)] = path
        # 同时允许用函数名查找
        if callable(action):
            self.actions.setdefault(action.__name__, path)
        return self

    def to(self, path: str, root: str = '') -> str:
        if is_absolute_url(path) or not root:
            return path
        return join_url(root, path)

    def route(self, name: str, params: Optional[Dict[str, Any]] = None, root: str = '') -> str:
        if name not in self.routes:
            raise LinkResolutionError(f"路由 '{name}' 未注册")
        return self.to(self._fill(self.routes[name], params, name), root)

    def action(self, action: Action, params: Optional[Dict[str, Any]] = None, root: str = '') -> str:
        path = self.actions.get(action_name(action))
        if path is None:
            raise LinkResolutionError(f"处理函数 '{action_name(action)}' 未注册")
        return self.to(self._fill(path, params, action_name(action)), root)

    @staticmethod
    def _fill(template: str, params: Optional[Dict[str, Any]], name: str) -> str:
        """替换路径参数, 多余的参数作为查询字符串"""
        remaining = dict(params or {})

        def substitute(match):
            key = match.group(1)
            if key not in remaining:
                raise LinkResolutionError(f"路由 '{name}' 缺少参数 '{key}'")
            return quote(str(remaining.pop(key)), safe='')

        path = _PARAM_RE.sub(substitute, template)
        if remaining:
            path = f"{path}?{urlencode(remaining, doseq=True)}"
        return path
