from flask import request
from flask_login import current_user

from portal.extensions import db
from portal.exceptions import NotFound
from portal.models.content import Post, POST_STATUSES
from portal.services.content_service import ContentService
from portal.blueprints.admin.forms import PostForm
from portal.utils.permissions import api_login_required
from portal.utils.response import success, page_args, pagination_meta, load_json_form
from portal.utils.validators import form_to_dict
from . import api_bp, is_cms_user

NOT_FOUND = 'Không tìm thấy bài viết'


@api_bp.route('/posts', methods=['GET'])
def list_posts():
    """Danh sách bài viết; khách chỉ xem bài đã xuất bản"""
    page, limit = page_args()
    status = request.args.get('status', '')

    if is_cms_user():
        query = Post.query
        if status in POST_STATUSES:
            query = query.filter_by(status=status)
        query = query.order_by(Post.created_at.desc())
    else:
        query = ContentService.published_query(Post).order_by(Post.published_at.desc())

    pagination = query.paginate(page=page, per_page=limit, error_out=False)
    return success({
        'posts': [p.to_dict() for p in pagination.items],
        'pagination': pagination_meta(page, limit, pagination.total),
    })


@api_bp.route('/posts/<int:id>', methods=['GET'])
def get_post(id):
    post = db.get_or_404(Post, id, description=NOT_FOUND)
    if not ContentService.is_public(post) and not is_cms_user():
        raise NotFound(NOT_FOUND)
    return success(post.to_dict())


@api_bp.route('/posts', methods=['POST'])
@api_login_required
def create_post():
    form = load_json_form(PostForm)
    post = ContentService.create_post(form_to_dict(form), current_user)
    return success(post.to_dict(), 'Đã tạo bài viết mới', 201)


@api_bp.route('/posts/<int:id>', methods=['PUT'])
@api_login_required
def update_post(id):
    post = db.get_or_404(Post, id, description=NOT_FOUND)
    form = load_json_form(PostForm)
    post = ContentService.update_post(post, form_to_dict(form))
    return success(post.to_dict(), 'Đã cập nhật bài viết')


@api_bp.route('/posts/<int:id>', methods=['DELETE'])
@api_login_required
def delete_post(id):
    post = db.get_or_404(Post, id, description=NOT_FOUND)
    post.delete()
    return success(message='Đã xóa bài viết')
