# storefront/routes/user_routes.py
from flask import Blueprint, request

from storefront.db import get_db_session
from storefront.routes.home_routes import TEXT_PLAIN
from storefront.services.login_service import login_user
from storefront.views import login_page, login_result

user_bp = Blueprint("user_bp", __name__)


@user_bp.route("/login", methods=["GET"])
def login_form():
    return login_page()


# login form submission
@user_bp.route("/login", methods=["POST"])
def login():
    username = request.form.get("username", "")
    password = request.form.get("password", "")

    session = get_db_session()
    try:
        success, message = login_user(session, username, password)
    finally:
        session.close()

    return login_result(success, message)


@user_bp.route("/register", methods=["GET"])
def register_form():
    return "Here will be a button to register", 200, TEXT_PLAIN


# Registration is a placeholder, nothing is stored
@user_bp.route("/register", methods=["POST"])
def register():
    return "User registration", 200, TEXT_PLAIN
