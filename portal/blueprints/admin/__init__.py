from flask import Blueprint, redirect, url_for, request, flash
from flask_login import current_user

admin_bp = Blueprint('admin', __name__)


@admin_bp.before_request
def require_cms_user():
    """Mọi trang /admin/* cần tài khoản admin hoặc editor"""
    if not current_user.is_authenticated:
        flash('Vui lòng đăng nhập để truy cập trang quản trị.', 'warning')
        return redirect(url_for('auth.login', next=request.full_path))
    if not current_user.can_access_cms:
        return redirect(url_for('main.index'))


from . import routes
