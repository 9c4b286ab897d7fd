from typing import Any, Dict, Optional, Union

from markupsafe import Markup, escape

from .utils import add_html_class, remove_html_class

# attr() 未传入 value 时表示读取
_MISSING = object()


class HasAttributes:
    """HTML 属性集合, 供菜单、菜单项和链接复用"""

    attributes: Dict[str, Any]

    def attr(self, name: Union[str, Dict[str, Any]], value: Any = _MISSING):
        """
        读取或设置属性

        attr('id')              -> 返回属性值
        attr('id', 'main')      -> 设置属性
        attr({'id': 'main'})    -> 批量设置
        attr('id', None)        -> 设置为 None, 渲染时会被忽略
        """
        if isinstance(name, dict):
            self.attributes.update(name)
            return self
        if value is _MISSING:
            return self.attributes.get(name)
        self.attributes[name] = value
        return self

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def add_class(self, *classes: str):
        self.attributes['class'] = add_html_class(self.attributes.get('class'), *classes)
        return self

    def remove_class(self, *classes: str):
        remaining = remove_html_class(self.attributes.get('class'), *classes)
        if remaining:
            self.attributes['class'] = remaining
        else:
            self.attributes.pop('class', None)
        return self

    def attributes_as_html(self, extra: Optional[Dict[str, Any]] = None) -> Markup:
        """把属性渲染为 HTML, 值会被转义; False/None 的属性会被忽略"""
        attrs = dict(self.attributes)
        if extra:
            attrs.update(extra)
        parts = []
        for key, value in attrs.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(str(escape(key)))
            else:
                parts.append(f'{escape(key)}="{escape(value)}"')
        return Markup(' ' + ' '.join(parts)) if parts else Markup('')
