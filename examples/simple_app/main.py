from pathlib import Path

from robyn import Robyn, Request
from robyn.templating import JinjaTemplate

from robyn_menu import MenuManager, UrlResolver

app = Robyn(__file__)
templates = JinjaTemplate(str(Path(__file__).parent / "templates"))

# 命名路由, 菜单项可以通过 route 引用
resolver = UrlResolver()
resolver.add_route("home", "/")
resolver.add_route("articles.index", "/articles")
resolver.add_route("articles.show", "/articles/:id")

menus = MenuManager(resolver)


@menus.menu("main", attributes={"class": "nav flex-column"})
def main_menu(menu):
    menu.add_item("home", "Home", {"route": "home"}).prepend('<i class="bi bi-house"></i> ')
    articles = menu.add_item("articles", "Articles", {"route": "articles.index"})
    articles.activate_on_url("articles/*")
    articles.add_sub_item("first", "First article", {"route": ("articles.show", {"id": 1})})
    menu.add_item("docs", "Docs", {"url": "https://robyn.tech", "target": "_blank"})


def render_page(request: Request, title: str):
    # 每个请求生成新的菜单, 当前路径对应的菜单项会被自动激活
    context = {
        "title": title,
        **menus.build_all(request),  # 添加菜单到上下文
    }
    return templates.render_template("index.html", **context)


@app.get("/")
async def index(request: Request):
    return render_page(request, "Home")


@app.get("/articles")
async def articles(request: Request):
    return render_page(request, "Articles")


@app.get("/articles/:id")
async def article(request: Request):
    return render_page(request, f"Article {request.path_params.get('id')}")


if __name__ == "__main__":
    app.start(host="127.0.0.1", port=8100)
