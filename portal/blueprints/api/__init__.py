from flask import Blueprint, current_app
from flask_login import current_user
from werkzeug.exceptions import HTTPException

from portal.extensions import db
from portal.exceptions import PortalException
from portal.utils.response import error

# REST API dạng JSON, url_prefix /api đặt khi đăng ký
api_bp = Blueprint('api', __name__)


def is_cms_user():
    """Khách công khai chỉ thấy nội dung đã xuất bản/đang hoạt động"""
    return current_user.is_authenticated and current_user.can_access_cms


@api_bp.errorhandler(PortalException)
def handle_portal_exception(e):
    db.session.rollback()
    return e.to_dict(), e.code


@api_bp.errorhandler(Exception)
def handle_unexpected(e):
    if isinstance(e, HTTPException):
        return error(e.description or e.name, e.code)
    # Lỗi không lường trước: ghi log đầy đủ, trả thông báo chung
    db.session.rollback()
    current_app.logger.exception(f'API lỗi: {e}')
    return error('Lỗi server', 500)


from . import posts, projects, categories, media, feedback, users, site, upload
