# storefront/views.py
from jinja2 import Environment, PackageLoader, select_autoescape

_env = Environment(
    loader=PackageLoader("storefront", "templates"),
    autoescape=select_autoescape(["html"]),
)


def login_page() -> str:
    """Login form fragment; posts username/password to /login."""
    return _env.get_template("login.html").render()


def login_result(success: bool, message: str) -> str:
    """Result fragment: message is the user's email on success, the error text otherwise."""
    return _env.get_template("login_result.html").render(success=success, message=message)
