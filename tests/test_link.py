import pytest

from robyn_menu import Link, LinkResolutionError, UrlResolver


def show_article():
    pass


def test_empty_link_has_no_url():
    link = Link({})
    assert link.url() is None
    assert link.href is None


def test_plain_url_is_kept():
    assert Link({"url": "/home"}).url() == "/home"
    assert Link({"url": "articles"}).url() == "articles"


def test_url_joined_onto_root():
    link = Link({"url": "articles"}, root="http://example.com")
    assert link.url() == "http://example.com/articles"


def test_absolute_url_ignores_root():
    link = Link({"url": "https://docs.example.com/"}, root="http://example.com")
    assert link.url() == "https://docs.example.com/"


def test_prefix():
    assert Link({"url": "users", "prefix": "admin"}).url() == "admin/users"
    assert Link({"url": "users", "prefix": "/admin"}).url() == "/admin/users"
    assert Link({"url": "users", "prefix": "admin"}, root="http://h").url() == "http://h/admin/users"


def test_route(resolver):
    assert Link({"route": "articles.index"}, resolver=resolver).url() == "/articles"
    link = Link({"route": ("articles.show", {"id": 5, "page": 2})}, resolver=resolver)
    assert link.url() == "/articles/5?page=2"


def test_route_with_root(resolver):
    link = Link({"route": ["articles.show", {"id": 5}]}, resolver=resolver, root="http://h")
    assert link.url() == "http://h/articles/5"


def test_route_errors(resolver):
    with pytest.raises(LinkResolutionError, match="missing"):
        Link({"route": "missing"}, resolver=resolver)
    with pytest.raises(LinkResolutionError, match="id"):
        Link({"route": "articles.show"}, resolver=resolver)


def test_action():
    resolver = UrlResolver().add_action(show_article, "/articles/:id")
    assert Link({"action": (show_article, {"id": 3})}, resolver=resolver).url() == "/articles/3"
    assert Link({"action": ("show_article", {"id": 4})}, resolver=resolver).url() == "/articles/4"


def test_unknown_action():
    with pytest.raises(LinkResolutionError):
        Link({"action": show_article})


def test_only_one_source_allowed(resolver):
    with pytest.raises(LinkResolutionError, match="url, route"):
        Link({"url": "/a", "route": "home"}, resolver=resolver)


def test_none_sources_are_ignored():
    assert Link({"url": "/a", "route": None}).url() == "/a"


def test_route_params_are_quoted():
    resolver = UrlResolver({"tag": "/tags/:name"})
    assert Link({"route": ("tag", {"name": "a b/c"})}, resolver=resolver).url() == "/tags/a%20b%2Fc"


def test_activate_is_idempotent():
    link = Link({"url": "/a"}, active_class="current")
    link.attr("class", "nav-link")
    link.activate()
    link.activate()
    assert link.is_active is True
    assert link.attributes["class"] == "nav-link current"
