"""
Cấu hình website (bản ghi duy nhất) và nội dung giới thiệu
"""
from portal.extensions import db
from portal.models.site import Setting, About
from portal.services.site_service import SiteService
from portal.blueprints.admin.forms import SettingsForm, AboutForm
from portal.utils.permissions import api_login_required, admin_required
from portal.utils.response import success, load_json_form
from portal.utils.validators import form_to_dict
from . import api_bp


@api_bp.route('/settings', methods=['GET'])
def get_settings():
    return success(SiteService.get_settings().to_dict())


@api_bp.route('/settings/<int:id>', methods=['PUT'])
@admin_required
def update_settings(id):
    settings = db.get_or_404(Setting, id, description='Không tìm thấy cấu hình')
    form = load_json_form(SettingsForm)
    settings = SiteService.update_settings(settings, form_to_dict(form))
    return success(settings.to_dict(), 'Đã lưu cấu hình')


@api_bp.route('/about', methods=['GET'])
def list_about():
    items = About.query.order_by(About.created_at.desc(), About.id.desc()).all()
    return success([a.to_dict() for a in items])


@api_bp.route('/about/<int:id>', methods=['GET'])
def get_about(id):
    about = db.get_or_404(About, id, description='Không tìm thấy nội dung')
    return success(about.to_dict())


@api_bp.route('/about', methods=['POST'])
@api_login_required
def create_about():
    form = load_json_form(AboutForm)
    about = About(**form_to_dict(form))
    about.save()
    return success(about.to_dict(), 'Đã tạo nội dung giới thiệu mới', 201)


@api_bp.route('/about/<int:id>', methods=['PUT'])
@api_login_required
def update_about(id):
    about = db.get_or_404(About, id, description='Không tìm thấy nội dung')
    form = load_json_form(AboutForm)
    for field, value in form_to_dict(form).items():
        setattr(about, field, value)
    about.save()
    return success(about.to_dict(), 'Đã cập nhật nội dung giới thiệu')


@api_bp.route('/about/<int:id>', methods=['DELETE'])
@api_login_required
def delete_about(id):
    about = db.get_or_404(About, id, description='Không tìm thấy nội dung')
    about.delete()
    return success(message='Đã xóa nội dung giới thiệu')
