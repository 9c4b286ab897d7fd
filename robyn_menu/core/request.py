from typing import Dict, List, Optional
from dataclasses import dataclass, field
from urllib.parse import urlencode

from robyn import Request


def normalize_path(path: Optional[str]) -> str:
    """规范化请求路径: 去掉首尾斜杠, 根路径返回 '/'"""
    path = (path or '').split('?', 1)[0].strip('/')
    return path or '/'


@dataclass
class RequestContext:
    """
    当前请求的只读信息

    path: 规范化后的路径, 例如 ``articles/5``
    url: scheme + host + path, 不包含查询参数
    root: scheme + host, 用于生成相对链接
    """
    path: str = '/'
    url: str = ''
    root: str = ''
    query: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        self.path = normalize_path(self.path)

    @property
    def full_url(self) -> str:
        """包含查询参数的完整 URL"""
        if not self.query:
            return self.url
        return f"{self.url}?{urlencode(self.query, doseq=True)}"

    @classmethod
    def from_robyn(cls, request: Request) -> 'RequestContext':
        """从 Robyn 的 Request 构建"""
        url = request.url
        root = f"{url.scheme}://{url.host}" if url.host else ''
        path = normalize_path(url.path)
        if path == '/':
            full = root or '/'
        else:
            full = f"{root}/{path}"
        query: Dict[str, List[str]] = {}
        if request.query_params is not None:
            query = {
                key: list(values) if isinstance(values, (list, tuple)) else [values]
                for key, values in request.query_params.to_dict().items()
            }
        return cls(
            path=path,
            url=full,
            root=root,
            query=query,
        )

    @classmethod
    def coerce(cls, request) -> Optional['RequestContext']:
        """接受 RequestContext、Robyn Request 或 None"""
        if request is None or isinstance(request, cls):
            return request
        return cls.from_robyn(request)
