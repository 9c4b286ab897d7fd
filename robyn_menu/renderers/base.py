from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, TYPE_CHECKING

from markupsafe import Markup, escape

from ..core.exceptions import MenuError

if TYPE_CHECKING:
    from ..core.item import MenuItem
    from ..core.menu import Menu


class BaseRenderer(ABC):
    """渲染器基类"""

    @abstractmethod
    def render(self, menu: 'Menu', context: Dict[str, Any] = None) -> Markup:
        """渲染菜单"""
        pass


class ListRenderer(BaseRenderer):
    """列表渲染器 <ul><li>"""
    container_tag = 'ul'
    item_tag = 'li'

    def render(self, menu: 'Menu', context: Dict[str, Any] = None) -> Markup:
        return self._render_level(menu.roots(), menu.attributes_as_html(), frozenset())

    def _render_level(self, items: Iterable['MenuItem'], attrs: Markup, seen: frozenset) -> Markup:
        rendered = [
            self._render_item(item, seen | {id(item)})
            for item in items
            if id(item) not in seen
        ]
        if not rendered:
            return Markup('')
        return Markup(
            f'<{self.container_tag}{attrs}>\n' + '\n'.join(rendered) + f'\n</{self.container_tag}>'
        )

    def _render_item(self, item: 'MenuItem', seen: frozenset) -> str:
        html = f'<{self.item_tag}{item.attributes_as_html()}>{self._render_link(item)}'
        # 子菜单嵌套在当前菜单项内
        if item.has_children():
            html += '\n' + str(self._render_level(item.children(), Markup(''), seen))
        return html + f'</{self.item_tag}>'

    def _render_link(self, item: 'MenuItem') -> str:
        # 标题允许包含 HTML (例如通过 prepend 添加的图标)
        title = Markup(item.title)
        url = item.url()
        if url is None:
            return title
        return f'<a href="{escape(url)}"{item.link.attributes_as_html()}>{title}</a>'


class OrderedListRenderer(ListRenderer):
    """有序列表渲染器 <ol><li>"""
    container_tag = 'ol'


class DivRenderer(ListRenderer):
    """div 渲染器"""
    container_tag = 'div'
    item_tag = 'div'


RENDERERS = {
    'ul': ListRenderer,
    'ol': OrderedListRenderer,
    'div': DivRenderer,
}


def get_renderer(name: str) -> BaseRenderer:
    """按名称获取渲染器"""
    try:
        return RENDERERS[name]()
    except KeyError:
        raise MenuError(f"未知的渲染器: {name}") from None
