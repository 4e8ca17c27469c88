# storefront/routes/product_routes.py
from flask import Blueprint, jsonify

product_bp = Blueprint("product_bp", __name__)  # url_prefix is set in create_app()

# no catalog yet: fixed listing, every id gets the same price
PRODUCTS = ["Product 1", "Product 2", "Product 3"]
DEFAULT_PRICE = "$100"


@product_bp.get("")
@product_bp.get("/")
def list_products():
    return jsonify(PRODUCTS)


@product_bp.get("/<product_id>")
def product_detail(product_id):
    # id is echoed back as given, numeric or not
    return jsonify({
        "id": product_id,
        "name": "Product " + product_id,
        "price": DEFAULT_PRICE,
    })
