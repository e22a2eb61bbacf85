from flask_login import current_user

from portal.extensions import db
from portal.models.auth import User
from portal.services.user_service import UserService
from portal.blueprints.admin.forms import UserForm
from portal.utils.permissions import admin_required
from portal.utils.response import success, load_json_form
from portal.utils.validators import form_to_dict
from . import api_bp

NOT_FOUND = 'Không tìm thấy người dùng'


@api_bp.route('/users', methods=['GET'])
@admin_required
def list_users():
    users = User.query.order_by(User.created_at.desc()).all()
    return success([u.to_dict() for u in users])


@api_bp.route('/users/<int:id>', methods=['GET'])
@admin_required
def get_user(id):
    user = db.get_or_404(User, id, description=NOT_FOUND)
    return success(user.to_dict())


@api_bp.route('/users', methods=['POST'])
@admin_required
def create_user():
    form = load_json_form(UserForm)
    user = UserService.create_user(form_to_dict(form))
    return success(user.to_dict(), 'Đã tạo người dùng', 201)


@api_bp.route('/users/<int:id>', methods=['PUT'])
@admin_required
def update_user(id):
    user = db.get_or_404(User, id, description=NOT_FOUND)
    form = load_json_form(UserForm)
    user = UserService.update_user(user, form_to_dict(form))
    return success(user.to_dict(), 'Đã cập nhật người dùng')


@api_bp.route('/users/<int:id>', methods=['DELETE'])
@admin_required
def delete_user(id):
    user = db.get_or_404(User, id, description=NOT_FOUND)
    UserService.delete_user(user, current_user)
    return success(message='Đã xóa người dùng')
