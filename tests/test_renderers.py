import pytest
from markupsafe import Markup

from robyn_menu import Menu, MenuError, get_renderer
from robyn_menu.renderers import DivRenderer, ListRenderer, OrderedListRenderer


@pytest.fixture
def site_menu() -> Menu:
    menu = Menu("main", attributes={"class": "nav"})
    menu.add_item("home", "Home", "/")
    about = menu.add_item("about", "About", "/about")
    about.add_sub_item("team", "Team", "/about/team")
    return menu


def test_list_renderer_nests_children(site_menu):
    html = site_menu.render()
    assert isinstance(html, Markup)
    assert str(html) == (
        '<ul class="nav">\n'
        '<li><a href="/">Home</a></li>\n'
        '<li><a href="/about">About</a>\n'
        "<ul>\n"
        '<li><a href="/about/team">Team</a></li>\n'
        "</ul></li>\n"
        "</ul>"
    )


def test_ordered_and_div_renderers(site_menu):
    ol = str(site_menu.render("ol"))
    assert ol.startswith('<ol class="nav">')
    assert "<ol>\n<li>" in ol

    div = str(site_menu.render(DivRenderer()))
    assert div.startswith('<div class="nav">\n<div><a href="/">Home</a></div>')
    assert "<li>" not in div


def test_attributes_are_escaped_title_is_markup():
    menu = Menu("main")
    item = menu.add_item("search", "Search", {"url": "/search?q=a&b=c", "data-hint": '"<b>"'})
    item.prepend('<i class="bi bi-search"></i> ')

    html = str(menu.render())
    assert 'data-hint="&#34;&lt;b&gt;&#34;"' in html
    assert 'href="/search?q=a&amp;b=c"' in html
    assert '<i class="bi bi-search"></i> Search' in html


def test_boolean_and_empty_attributes():
    menu = Menu("main")
    menu.add_item("home", "Home", {"url": "/", "hidden": True, "title": None, "disabled": False})
    assert "<li hidden><a" in str(menu.render())


def test_item_without_link_renders_title_only():
    menu = Menu("main")
    menu.add_item("header", "Section")
    assert "<li>Section</li>" in str(menu.render())


def test_active_link_class_is_rendered():
    menu = Menu("main", {"active_element": "link"})
    menu.add_item("home", "Home", "/").activate()
    assert '<li><a href="/" class="active">Home</a></li>' in str(menu.render())


def test_empty_menu_renders_nothing():
    assert str(Menu("main").render()) == ""


def test_get_renderer():
    assert isinstance(get_renderer("ul"), ListRenderer)
    assert isinstance(get_renderer("ol"), OrderedListRenderer)
    with pytest.raises(MenuError, match="table"):
        get_renderer("table")
