from enum import Enum
from typing import Any, Dict, Optional
from dataclasses import dataclass, fields, replace

from .exceptions import MenuConfigError


class ActiveElement(Enum):
    """激活状态作用的元素"""
    ITEM = 'item'
    LINK = 'link'


@dataclass
class MenuConfig:
    """菜单配置"""
    active_class: str = 'active'                     # 激活时添加的 CSS 类
    auto_activate: bool = True                       # 根据当前请求自动激活
    active_element: ActiveElement = ActiveElement.ITEM
    activate_parents: bool = True                    # 激活时向上激活父级
    cascade_data: bool = True                        # 元数据向子级传递
    base_url: Optional[str] = None                   # 相对链接的根地址

    def __post_init__(self):
        if not isinstance(self.active_element, ActiveElement):
            try:
                self.active_element = ActiveElement(str(self.active_element).lower())
            except ValueError:
                raise MenuConfigError(
                    f"active_element 必须是 'item' 或 'link', 而不是 {self.active_element!r}"
                ) from None
        if not self.active_class or not isinstance(self.active_class, str):
            raise MenuConfigError("active_class 不能为空")
        for name in ('auto_activate', 'activate_parents', 'cascade_data'):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise MenuConfigError(f"{name} 必须是布尔值, 而不是 {value!r}")
        if self.base_url is not None:
            self.base_url = self.base_url.rstrip('/')

    @classmethod
    def from_dict(cls, options: Optional[Dict[str, Any]] = None) -> 'MenuConfig':
        """从字典创建配置, 未知的键会抛出 MenuConfigError"""
        options = dict(options or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise MenuConfigError(f"未知的菜单配置项: {', '.join(unknown)}")
        return cls(**options)

    def copy(self, **changes) -> 'MenuConfig':
        """返回配置副本"""
        return replace(self, **changes)

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'active_class': self.active_class,
            'auto_activate': self.auto_activate,
            'active_element': self.active_element.value,
            'activate_parents': self.activate_parents,
            'cascade_data': self.cascade_data,
            'base_url': self.base_url,
        }
