"""
Kiểm soát quyền truy cập
Decorator cho API (trả JSON) và hàm tiện ích cho template quản trị
"""
from functools import wraps
from flask import abort, flash
from flask_login import current_user
from portal.exceptions import AuthenticationRequired, PermissionDenied
from portal.models.auth import ROLE_ADMIN, CMS_ROLES


def api_login_required(f):
    """
    API yêu cầu tài khoản quản trị (admin hoặc editor) đã đăng nhập.
    Chưa đăng nhập -> 401.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            raise AuthenticationRequired()
        if current_user.role not in CMS_ROLES:
            raise PermissionDenied()
        return f(*args, **kwargs)
    return decorated_function


def role_required(*roles):
    """
    Yêu cầu một trong các vai trò cho trước.
    Chưa đăng nhập -> 401, sai vai trò -> 403.

    Dùng:
        @role_required('admin')
        def delete_user(id):
            ...
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if not current_user.is_authenticated:
                raise AuthenticationRequired()
            if current_user.role not in roles:
                raise PermissionDenied()
            return f(*args, **kwargs)
        return decorated_function
    return decorator


admin_required = role_required(ROLE_ADMIN)


def admin_page_required(f):
    """
    Trang quản trị chỉ dành cho admin (editor nhận 403).
    Việc đăng nhập đã được before_request của blueprint admin kiểm tra.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_admin():
            flash('Bạn không có quyền truy cập trang này', 'danger')
            abort(403)
        return f(*args, **kwargs)
    return decorated_function


def is_admin():
    """Người dùng hiện tại có phải admin"""
    return current_user.is_authenticated and current_user.role == ROLE_ADMIN


def get_admin_menu_items():
    """Menu sidebar quản trị theo vai trò"""
    if not current_user.is_authenticated:
        return []

    menu_items = [
        {'name': 'Tổng quan', 'icon': 'fa-chart-pie', 'endpoint': 'admin.dashboard'},
        {'name': 'Bài viết', 'icon': 'fa-newspaper', 'endpoint': 'admin.posts'},
        {'name': 'Dự án', 'icon': 'fa-folder', 'endpoint': 'admin.projects'},
        {'name': 'Danh mục', 'icon': 'fa-tags', 'endpoint': 'admin.categories'},
        {'name': 'Videos', 'icon': 'fa-video', 'endpoint': 'admin.videos'},
        {'name': 'Slides', 'icon': 'fa-images', 'endpoint': 'admin.slides'},
        {'name': 'Bản vẽ', 'icon': 'fa-drafting-compass', 'endpoint': 'admin.drawings'},
        {'name': 'Ý kiến', 'icon': 'fa-comments', 'endpoint': 'admin.feedback'},
        {'name': 'Giới thiệu', 'icon': 'fa-info-circle', 'endpoint': 'admin.about'},
    ]

    # Chỉ admin mới thấy quản lý người dùng và cấu hình
    if is_admin():
        menu_items += [
            {'name': 'Người dùng', 'icon': 'fa-users-cog', 'endpoint': 'admin.users'},
            {'name': 'Cài đặt', 'icon': 'fa-cog', 'endpoint': 'admin.settings'},
        ]
    return menu_items
