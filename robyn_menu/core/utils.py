import re
from typing import List, Optional, Pattern


def split_classes(value: Optional[str]) -> List[str]:
    """拆分 class 属性, 去掉重复项并保持顺序"""
    result: List[str] = []
    for token in (value or '').split():
        if token not in result:
            result.append(token)
    return result


def add_html_class(existing: Optional[str], *classes: str) -> str:
    """把 classes 合并到已有的 class 属性中 (不会产生重复的类名)"""
    tokens = split_classes(existing)
    for value in classes:
        for token in split_classes(value):
            if token not in tokens:
                tokens.append(token)
    return ' '.join(tokens)


def remove_html_class(existing: Optional[str], *classes: str) -> str:
    removed = set()
    for value in classes:
        removed.update(split_classes(value))
    return ' '.join(token for token in split_classes(existing) if token not in removed)


def url_pattern_to_regex(pattern: str) -> Pattern:
    """
    把 activate_on_url 使用的通配模式转换为正则

    只有结尾的 ``/*`` 是通配符, 匹配该前缀本身以及其下的任意路径,
    其它字符都按字面匹配. 例如 ``articles/*`` 匹配 ``articles`` 和 ``articles/5``.
    """
    suffix = ''
    if pattern.endswith('/*'):
        pattern, suffix = pattern[:-2], '(/.*)?'
    body = re.escape(pattern.lstrip('/'))
    return re.compile(f'^{body}{suffix}\\Z')


def join_url(root: str, *parts: str) -> str:
    """拼接 URL 片段, 保证片段之间只有一个斜杠"""
    segments = [str(part).strip('/') for part in parts if part not in (None, '')]
    path = '/'.join(segment for segment in segments if segment)
    if not root:
        return path
    return f"{root.rstrip('/')}/{path}" if path else root.rstrip('/')


def is_absolute_url(url: str) -> bool:
    return url.startswith('//') or re.match(r'^[a-zA-Z][a-zA-Z0-9+.-]*:', url) is not None


def comparable_url(url: str) -> str:
    """用于精确匹配的 URL: 去掉结尾斜杠, 相对路径统一以 '/' 开头"""
    if is_absolute_url(url):
        return url.rstrip('/')
    return '/' + url.strip('/')
