from robyn_menu import Menu


def test_attr_reads_and_sets(menu):
    item = menu.add_item("home", "Home", {"url": "/", "id": "nav-home"})
    assert item.attr("id") == "nav-home"
    assert item.attr("missing") is None
    assert item.attr("title", "Go home") is item
    assert item.attributes["title"] == "Go home"
    item.attr({"data-x": "1", "id": "home"})
    assert item.attributes == {"id": "home", "title": "Go home", "data-x": "1"}


def test_attr_none_clears_rendered_attribute(menu):
    item = menu.add_item("home", "Home", {"url": "/", "title": "Go home"})
    item.attr("title", None)
    assert item.has_attribute("title")
    assert item.attributes["title"] is None
    assert str(item.attributes_as_html()) == ""


def test_add_and_remove_class(menu):
    item = menu.add_item("home", "Home", {"url": "/", "class": "nav-item"})
    item.add_class("active", "nav-item")
    assert item.attributes["class"] == "nav-item active"

    item.remove_class("active")
    assert item.attributes["class"] == "nav-item"
    item.remove_class("nav-item")
    assert "class" not in item.attributes


def test_remove_active_class_from_link():
    menu = Menu("main", {"active_element": "link"})
    item = menu.add_item("home", "Home", "/")
    item.activate()
    item.link.remove_class("active")
    assert '<a href="/">Home</a>' in str(menu.render())


def test_extra_attributes_override():
    menu = Menu("main", attributes={"class": "nav", "id": "main"})
    assert str(menu.attributes_as_html({"id": "side"})) == ' class="nav" id="side"'
