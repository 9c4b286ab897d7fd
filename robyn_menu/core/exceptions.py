class MenuError(Exception):
    """菜单相关异常基类"""


class MenuConfigError(MenuError):
    """菜单配置错误"""


class LinkResolutionError(MenuError):
    """链接无法解析 (路由不存在、缺少参数或同时指定了多个链接来源)"""


class ParentCycleError(MenuError):
    """父级引用形成了环"""

    def __init__(self, name: str):
        super().__init__(f"菜单项 '{name}' 的父级引用形成了环")
        self.name = name


class MenuNotFoundError(MenuError, KeyError):
    """未注册的菜单"""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"菜单 '{self.name}' 未注册"
