# storefront/routes/home_routes.py
from flask import Blueprint

home_bp = Blueprint("home_bp", __name__)

TEXT_PLAIN = {"Content-Type": "text/plain; charset=utf-8"}


@home_bp.route("/", methods=["GET"])
def index():
    return "Welcome to eBay-like application!", 200, TEXT_PLAIN
