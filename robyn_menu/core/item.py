import logging
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

from .attributes import HasAttributes
from .collection import ItemCollection
from .config import ActiveElement, MenuConfig
from .exceptions import ParentCycleError
from .link import Link
from .utils import add_html_class, comparable_url, url_pattern_to_regex

if TYPE_CHECKING:
    from .menu import Menu

logger = logging.getLogger(__name__)

# 这些选项不会出现在渲染属性中
RESERVED_OPTIONS = ('route', 'action', 'url', 'prefix', 'parent')
LINK_OPTIONS = ('url', 'route', 'action', 'prefix')

Options = Union[str, Dict[str, Any], None]


def normalize_options(options: Options) -> Dict[str, Any]:
    """选项可以是字典, 也可以直接是 URL 字符串"""
    if options is None:
        return {}
    if isinstance(options, dict):
        return dict(options)
    return {'url': options}


class MenuItem(HasAttributes):
    """
    菜单项

    菜单项只保存父级引用, 子级通过在菜单的扁平列表中按父级名称过滤得到.
    不要直接实例化, 请使用 Menu.add_item 或 MenuItem.add_sub_item.
    """

    def __init__(self, menu: 'Menu', name: str, title: str, options: Options = None):
        options = normalize_options(options)
        self.name = name
        self.title = title
        self.parent: Optional['MenuItem'] = options.get('parent')
        self.is_active = False
        self.attributes: Dict[str, Any] = {
            key: value for key, value in options.items() if key not in RESERVED_OPTIONS
        }
        self.active_url_pattern: Optional[str] = None
        # 配置按值保存, 之后修改菜单配置不会影响已创建的菜单项
        self.config: MenuConfig = menu.config.copy()
        self._menu = menu
        self._data: Dict[str, Any] = {}

        path = {key: options[key] for key in LINK_OPTIONS if key in options}
        self.link = Link(path, self.config.active_class, menu.resolver, menu.root)

    @property
    def menu(self) -> 'Menu':
        return self._menu

    def add_sub_item(self, name: str, title: str, options: Options = None) -> 'MenuItem':
        """创建子菜单项"""
        options = normalize_options(options)
        options['parent'] = self
        return self._menu.add_item(name, title, options)

    def url(self) -> Optional[str]:
        if self.link is None:
            return None
        return self.link.url()

    def prepend(self, html: str) -> 'MenuItem':
        self.title = f"{html}{self.title}"
        return self

    def append(self, html: str) -> 'MenuItem':
        self.title = f"{self.title}{html}"
        return self

    def has_children(self) -> bool:
        return len(self.children()) > 0

    def children(self) -> ItemCollection:
        """直接子级, 每次调用都重新计算, 顺序与加入菜单的顺序一致"""
        return self._menu.items.where_parent(self.name)

    def has_parent(self) -> bool:
        return self.parent is not None

    def all(self) -> ItemCollection:
        """所有后代"""
        return self._menu.where_parent(self.name, recursive=True)

    # ---- 激活 ----

    def activate(self) -> 'MenuItem':
        """激活菜单项, 启用 activate_parents 时逐级激活父级"""
        seen = set()
        item: Optional[MenuItem] = self
        while item is not None:
            if id(item) in seen:
                raise ParentCycleError(item.name)
            seen.add(id(item))
            item._set_to_active()
            if not self.config.activate_parents:
                break
            item = item.parent
        return self

    def _set_to_active(self):
        if self.config.active_element is ActiveElement.ITEM:
            self.attributes['class'] = add_html_class(
                self.attributes.get('class'), self.config.active_class
            )
            self.is_active = True
        else:
            self.link.activate()
        logger.debug("Menu item '%s' activated", self.name)

    def activate_on_url(self, pattern: str) -> 'MenuItem':
        """
        设置激活用的 URL 模式, 例如 'articles/*'

        启用 auto_activate 时会立即用当前请求检查一次
        """
        self.active_url_pattern = pattern
        self.check_activation()
        return self

    def check_activation(self) -> bool:
        """当前请求匹配时自动激活"""
        if self.config.auto_activate and self.current_url_matches():
            self.activate()
            return True
        return False

    def current_url_matches(self) -> bool:
        """当前请求是否匹配本菜单项的 URL 或 URL 模式"""
        request = self._menu.request
        if request is None:
            return False
        if self.active_url_pattern:
            return url_pattern_to_regex(self.active_url_pattern).match(request.path) is not None
        url = self.url()
        if url is None or not request.url:
            return False
        return comparable_url(url) == comparable_url(request.url)

    # ---- 元数据 ----

    def data(self, *args):
        """
        元数据读写:

        data()              -> 全部元数据
        data({'k': 'v'})    -> 合并
        data('k', 'v')      -> 设置
        data('k')           -> 读取, 不存在时返回 None
        """
        if not args:
            return self.all_data()
        if len(args) == 1:
            if isinstance(args[0], dict):
                return self.merge_data(args[0])
            return self.get_data(args[0])
        if len(args) == 2:
            return self.set_data(args[0], args[1])
        raise TypeError(f"data() 最多接受 2 个参数, 收到 {len(args)} 个")

    def all_data(self) -> Dict[str, Any]:
        return dict(self._data)

    def merge_data(self, values: Dict[str, Any]) -> 'MenuItem':
        normalized = {str(key).lower(): value for key, value in values.items()}
        self._data.update(normalized)
        if self.config.cascade_data:
            self._cascade(normalized)
        return self

    def set_data(self, key: str, value: Any) -> 'MenuItem':
        return self.merge_data({key: value})

    def get_data(self, key: str, default: Any = None) -> Any:
        return self._data.get(str(key).lower(), default)

    def has_data(self, key: str) -> bool:
        return str(key).lower() in self._data

    def _cascade(self, values: Dict[str, Any]):
        for item in self._descendants():
            item._data.update(values)

    def _descendants(self) -> List['MenuItem']:
        result: List[MenuItem] = []
        seen = {id(self)}
        queue = list(self.children())
        while queue:
            item = queue.pop(0)
            if item is self:
                raise ParentCycleError(self.name)
            if id(item) in seen:
                continue
            seen.add(id(item))
            result.append(item)
            queue.extend(item.children())
        return result

    # ---- 属性查找 ----

    def has_property(self, name: str) -> bool:
        """是否存在同名字段、HTML 属性或元数据"""
        return self._is_field(name) or self.has_attribute(name) or self.has_data(name)

    def get(self, name: str, default: Any = None) -> Any:
        """读取字段, 字段不存在时读取元数据"""
        if self._is_field(name):
            return getattr(self, name)
        return self.get_data(name, default)

    def _is_field(self, name: str) -> bool:
        if name.startswith('_'):
            return False
        return name in vars(self) or isinstance(getattr(type(self), name, None), property)

    def __getattr__(self, name: str) -> Any:
        # 只有在常规属性查找失败时才会调用, 用于读取元数据 (例如 item.icon)
        if name.startswith('_'):
            raise AttributeError(name)
        data = self.__dict__.get('_data', {})
        key = name.lower()
        if key in data:
            return data[key]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent is not None else None
        return f"MenuItem(name={self.name!r}, parent={parent!r}, is_active={self.is_active})"
