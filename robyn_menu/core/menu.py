import logging
from typing import Any, Callable, Dict, Iterator, Optional, Union

from markupsafe import Markup

from .attributes import HasAttributes
from .collection import ItemCollection
from .config import MenuConfig
from .exceptions import MenuNotFoundError
from .item import MenuItem, Options
from .request import RequestContext
from .routing import UrlResolver

logger = logging.getLogger(__name__)


class Menu(HasAttributes):
    """菜单: 持有全部菜单项 (扁平列表) 和配置"""

    def __init__(
        self,
        name: str,
        config: Optional[Union[MenuConfig, Dict[str, Any]]] = None,
        request=None,
        resolver: Optional[UrlResolver] = None,
        attributes: Optional[Dict[str, Any]] = None
    ):
        """
        :param name: 菜单名称
        :param config: MenuConfig 或配置字典
        :param request: RequestContext 或 Robyn Request, 为 None 时不会自动激活
        :param resolver: 解析 route / action 的 UrlResolver
        :param attributes: 菜单容器的 HTML 属性
        """
        if not isinstance(config, MenuConfig):
            config = MenuConfig.from_dict(config)
        self.name = name
        self.config = config
        self.request: Optional[RequestContext] = RequestContext.coerce(request)
        self.resolver = resolver or UrlResolver()
        self.attributes: Dict[str, Any] = dict(attributes or {})
        self.items = ItemCollection()

    @property
    def root(self) -> str:
        """相对链接的根地址: 配置的 base_url, 否则使用当前请求的 scheme + host"""
        if self.config.base_url:
            return self.config.base_url
        if self.request is not None:
            return self.request.root
        return ''

    def add_item(self, name: str, title: str, options: Options = None) -> MenuItem:
        """创建菜单项并加入菜单"""
        if self.items.find(name) is not None:
            logger.warning("Menu '%s' already has an item named '%s'", self.name, name)
        item = MenuItem(self, name, title, options)
        self.items.append(item)
        item.check_activation()
        return item

    def get_item(self, name: str) -> Optional[MenuItem]:
        return self.items.find(name)

    def remove_item(self, name: str) -> Optional[MenuItem]:
        """移除菜单项及其所有后代"""
        item = self.get_item(name)
        if item is None:
            return None
        removed = {id(child) for child in item.all()}
        removed.add(id(item))
        self.items[:] = [other for other in self.items if id(other) not in removed]
        return item

    def roots(self) -> ItemCollection:
        return self.items.roots()

    def where_parent(self, name: Optional[str], recursive: bool = False) -> ItemCollection:
        return self.items.where_parent(name, recursive)

    def actives(self) -> ItemCollection:
        return self.items.actives()

    def get_menu_tree(self) -> Dict[str, Dict]:
        """获取菜单树结构, 供模板使用"""
        def build(item: MenuItem, seen: set) -> Dict[str, Any]:
            seen = seen | {id(item)}
            return {
                'item': item,
                'children': {
                    child.name: build(child, seen)
                    for child in item.children()
                    if id(child) not in seen
                }
            }

        return {item.name: build(item, set()) for item in self.roots()}

    def render(self, renderer: Union[str, Any] = 'ul') -> Markup:
        """使用指定的渲染器输出 HTML"""
        from ..renderers.base import get_renderer

        if isinstance(renderer, str):
            renderer = get_renderer(renderer)
        return renderer.render(self)

    def __html__(self) -> str:
        return str(self.render())

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Menu(name={self.name!r}, items={len(self.items)})"


Builder = Callable[[Menu], Any]


class MenuManager:
    """菜单管理器"""
    def __init__(self, resolver: Optional[UrlResolver] = None):
        self.menus: Dict[str, Menu] = {}
        self.builders: Dict[str, Dict[str, Any]] = {}
        self.resolver = resolver or UrlResolver()

    def create(
        self,
        name: str,
        config: Optional[Union[MenuConfig, Dict[str, Any]]] = None,
        request=None,
        resolver: Optional[UrlResolver] = None,
        attributes: Optional[Dict[str, Any]] = None
    ) -> Menu:
        """创建并注册菜单, 同名菜单会被替换"""
        if name in self.menus:
            logger.debug("Replacing menu '%s'", name)
        menu = Menu(name, config, request, resolver or self.resolver, attributes)
        self.menus[name] = menu
        return menu

    def get(self, name: str) -> Optional[Menu]:
        return self.menus.get(name)

    def has(self, name: str) -> bool:
        return name in self.menus

    def remove(self, name: str) -> Optional[Menu]:
        return self.menus.pop(name, None)

    def register(
        self,
        name: str,
        builder: Builder,
        config: Optional[Union[MenuConfig, Dict[str, Any]]] = None,
        attributes: Optional[Dict[str, Any]] = None
    ) -> Builder:
        """注册菜单构建函数, 每次请求通过 build() 生成新的菜单"""
        self.builders[name] = {
            'builder': builder,
            'config': config,
            'attributes': attributes,
        }
        return builder

    def menu(self, name: str, config=None, attributes: Optional[Dict[str, Any]] = None):
        """register 的装饰器形式"""
        def decorator(builder: Builder) -> Builder:
            return self.register(name, builder, config, attributes)
        return decorator

    def build(self, name: str, request=None) -> Menu:
        """
        为当前请求构建菜单

        返回的菜单只属于本次请求, 不会加入 self.menus, 也不会被 share() 发布;
        请通过 render_template 的上下文传给模板
        """
        if name not in self.builders:
            raise MenuNotFoundError(name)
        options = self.builders[name]
        menu = Menu(name, options['config'], request, self.resolver, options['attributes'])
        options['builder'](menu)
        logger.debug("Built menu '%s' with %d items", name, len(menu))
        return menu

    def build_all(self, request=None) -> Dict[str, Menu]:
        return {name: self.build(name, request) for name in self.builders}

    def share(self, template, names: Optional[list] = None) -> None:
        """
        把通过 create() 注册的菜单发布为 Jinja 全局变量

        build() 生成的请求级菜单不会被发布

        :param template: Robyn 的 JinjaTemplate 或 jinja2.Environment
        :param names: 只共享指定的菜单
        """
        env = getattr(template, 'env', template)
        for name in names or list(self.menus):
            menu = self.menus.get(name)
            if menu is None:
                logger.warning("Cannot share unknown menu '%s'", name)
                continue
            env.globals[name] = menu
