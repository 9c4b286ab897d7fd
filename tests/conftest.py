"""Shared pytest fixtures for the robyn_menu test-suite."""

from types import SimpleNamespace
from typing import Callable, Dict, List, Optional

import pytest

from robyn_menu import Menu, MenuConfig, RequestContext, UrlResolver


def fake_robyn_request(
    path: str,
    host: str = "localhost:8080",
    scheme: str = "http",
    query: Optional[Dict[str, List[str]]] = None,
) -> SimpleNamespace:
    """Mimic the attributes of ``robyn.Request`` that RequestContext.from_robyn reads."""

    params = dict(query or {})
    return SimpleNamespace(
        url=SimpleNamespace(scheme=scheme, host=host, path=path),
        query_params=SimpleNamespace(to_dict=lambda: params),
    )


@pytest.fixture
def robyn_request() -> Callable[..., SimpleNamespace]:
    return fake_robyn_request


@pytest.fixture
def resolver() -> UrlResolver:
    resolver = UrlResolver()
    resolver.add_route("home", "/")
    resolver.add_route("articles.index", "/articles")
    resolver.add_route("articles.show", "/articles/:id")
    return resolver


@pytest.fixture
def make_menu(resolver: UrlResolver) -> Callable[..., Menu]:
    """Build a menu bound to an optional request path/url."""

    def _make(path: Optional[str] = None, url: Optional[str] = None, **config) -> Menu:
        request = None
        if path is not None or url is not None:
            request = RequestContext(path=path or "/", url=url if url is not None else "")
        return Menu("main", MenuConfig(**config), request=request, resolver=resolver)

    return _make


@pytest.fixture
def menu(make_menu) -> Menu:
    return make_menu()
