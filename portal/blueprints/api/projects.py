from flask import request

from portal.extensions import db
from portal.exceptions import NotFound
from portal.models.content import Project, PROJECT_STATUSES
from portal.services.content_service import ContentService
from portal.blueprints.admin.forms import ProjectForm
from portal.utils.permissions import api_login_required
from portal.utils.response import success, page_args, pagination_meta, load_json_form
from portal.utils.validators import form_to_dict
from . import api_bp, is_cms_user

NOT_FOUND = 'Không tìm thấy dự án'


@api_bp.route('/projects', methods=['GET'])
def list_projects():
    page, limit = page_args()
    status = request.args.get('status', '')

    if is_cms_user():
        query = Project.query
        if status in PROJECT_STATUSES:
            query = query.filter_by(status=status)
        query = query.order_by(Project.created_at.desc())
    else:
        query = ContentService.published_query(Project).order_by(Project.published_at.desc())

    pagination = query.paginate(page=page, per_page=limit, error_out=False)
    return success({
        'projects': [p.to_dict() for p in pagination.items],
        'pagination': pagination_meta(page, limit, pagination.total),
    })


@api_bp.route('/projects/<int:id>', methods=['GET'])
def get_project(id):
    project = db.get_or_404(Project, id, description=NOT_FOUND)
    if not ContentService.is_public(project) and not is_cms_user():
        raise NotFound(NOT_FOUND)
    return success(project.to_dict())


@api_bp.route('/projects', methods=['POST'])
@api_login_required
def create_project():
    form = load_json_form(ProjectForm)
    project = ContentService.create_project(form_to_dict(form))
    return success(project.to_dict(), 'Đã tạo dự án mới', 201)


@api_bp.route('/projects/<int:id>', methods=['PUT'])
@api_login_required
def update_project(id):
    project = db.get_or_404(Project, id, description=NOT_FOUND)
    form = load_json_form(ProjectForm)
    project = ContentService.update_project(project, form_to_dict(form))
    return success(project.to_dict(), 'Đã cập nhật dự án')


@api_bp.route('/projects/<int:id>', methods=['DELETE'])
@api_login_required
def delete_project(id):
    project = db.get_or_404(Project, id, description=NOT_FOUND)
    project.delete()
    return success(message='Đã xóa dự án')
