from flask import Flask
from flask_cors import CORS

from storefront.db import EXTENSION_KEY, Storage
from storefront.routes.home_routes import home_bp
from storefront.routes.product_routes import product_bp
from storefront.routes.user_routes import user_bp


def create_app(storage: Storage) -> Flask:
    """Build the app around an already initialized Storage; there is no app without one."""
    if storage is None:
        raise ValueError("create_app() requires an initialized Storage")

    app = Flask(__name__)
    CORS(app)
    app.extensions[EXTENSION_KEY] = storage

    app.register_blueprint(home_bp)
    app.register_blueprint(product_bp, url_prefix="/products")
    app.register_blueprint(user_bp)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
