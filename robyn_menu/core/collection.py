from typing import Callable, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .item import MenuItem


class ItemCollection(list):
    """菜单项的扁平列表, 父子关系通过 parent 引用过滤得到"""

    def filter(self, predicate: Callable[['MenuItem'], bool]) -> 'ItemCollection':
        return ItemCollection(item for item in self if predicate(item))

    def roots(self) -> 'ItemCollection':
        """没有父级的菜单项"""
        return self.filter(lambda item: not item.has_parent())

    def where_parent(self, name: Optional[str], recursive: bool = False) -> 'ItemCollection':
        """
        查找父级名称为 name 的菜单项

        recursive 为 True 时返回所有后代 (按层级展开, 同一层保持插入顺序)
        """
        children = self.filter(
            lambda item: (item.parent.name if item.has_parent() else None) == name
        )
        if not recursive:
            return children

        result = ItemCollection()
        seen = set()
        queue = list(children)
        while queue:
            item = queue.pop(0)
            if id(item) in seen:
                continue
            seen.add(id(item))
            result.append(item)
            queue.extend(self.where_parent(item.name))
        return result

    def actives(self) -> 'ItemCollection':
        return self.filter(lambda item: item.is_active or item.link.is_active)

    def find(self, name: str) -> Optional['MenuItem']:
        """按名称查找, 名称重复时返回最后一个"""
        found = None
        for item in self:
            if item.name == name:
                found = item
        return found

    def names(self) -> List[str]:
        return [item.name for item in self]

    def data(self, *args):
        """对每个菜单项调用 data(*args), 用于批量设置元数据"""
        if len(args) == 1 and not isinstance(args[0], dict):
            return [item.data(args[0]) for item in self]
        for item in self:
            item.data(*args)
        return self
