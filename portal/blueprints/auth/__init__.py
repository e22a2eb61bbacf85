from flask import Blueprint

# url_prefix được đặt khi đăng ký trong portal/__init__.py
auth_bp = Blueprint('auth', __name__)

from . import routes
