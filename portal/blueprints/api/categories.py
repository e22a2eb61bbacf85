from portal.extensions import db
from portal.models.content import Category
from portal.services.content_service import ContentService
from portal.blueprints.admin.forms import CategoryForm
from portal.utils.permissions import api_login_required
from portal.utils.response import success, load_json_form
from portal.utils.validators import form_to_dict
from . import api_bp

NOT_FOUND = 'Không tìm thấy danh mục'


@api_bp.route('/categories', methods=['GET'])
def list_categories():
    """Danh mục kèm danh mục cha và số bài viết/dự án"""
    categories = Category.query.order_by(Category.display_order, Category.name).all()
    return success([c.to_dict(with_counts=True) for c in categories])


@api_bp.route('/categories/<int:id>', methods=['GET'])
def get_category(id):
    category = db.get_or_404(Category, id, description=NOT_FOUND)
    return success(category.to_dict(with_counts=True))


@api_bp.route('/categories', methods=['POST'])
@api_login_required
def create_category():
    form = load_json_form(CategoryForm)
    category = ContentService.save_category(Category(), form_to_dict(form))
    return success(category.to_dict(), 'Đã tạo danh mục mới', 201)


@api_bp.route('/categories/<int:id>', methods=['PUT'])
@api_login_required
def update_category(id):
    category = db.get_or_404(Category, id, description=NOT_FOUND)
    form = load_json_form(CategoryForm, category_id=category.id)
    category = ContentService.save_category(category, form_to_dict(form))
    return success(category.to_dict(), 'Đã cập nhật danh mục')


@api_bp.route('/categories/<int:id>', methods=['DELETE'])
@api_login_required
def delete_category(id):
    category = db.get_or_404(Category, id, description=NOT_FOUND)
    ContentService.delete_category(category)
    return success(message='Đã xóa danh mục')
