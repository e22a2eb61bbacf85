from flask import request, current_app
from flask_login import current_user
from sqlalchemy import case

from portal.extensions import db
from portal.models.feedback import Feedback, FEEDBACK_STATUSES, STATUS_PENDING
from portal.services.feedback_service import FeedbackService
from portal.blueprints.admin.forms import FeedbackReplyForm
from portal.blueprints.main.forms import FeedbackForm
from portal.utils.permissions import api_login_required, admin_required
from portal.utils.response import success, load_json_form
from portal.utils.validators import form_to_dict
from . import api_bp

NOT_FOUND = 'Không tìm thấy ý kiến'


@api_bp.route('/feedback', methods=['GET'])
@api_login_required
def list_feedback():
    """Danh sách ý kiến, lọc theo status; ý kiến chờ xử lý xếp trước"""
    status = request.args.get('status', 'all')
    query = Feedback.query
    if status in FEEDBACK_STATUSES:
        query = query.filter_by(status=status)

    pending_first = case((Feedback.status == STATUS_PENDING, 0), else_=1)
    items = query.order_by(pending_first, Feedback.created_at.desc()).all()
    return success([f.to_dict() for f in items])


@api_bp.route('/feedback', methods=['POST'])
def submit_feedback():
    """Người dân gửi ý kiến (không cần đăng nhập)"""
    form = load_json_form(FeedbackForm)
    feedback = FeedbackService.submit(form_to_dict(form))
    return success(feedback.to_dict(), 'Cảm ơn bạn đã gửi ý kiến', 201)


@api_bp.route('/feedback/<int:id>', methods=['GET'])
@admin_required
def get_feedback(id):
    feedback = db.get_or_404(Feedback, id, description=NOT_FOUND)
    return success(feedback.to_dict())


@api_bp.route('/feedback/<int:id>', methods=['PUT'])
@admin_required
def reply_feedback(id):
    feedback = db.get_or_404(Feedback, id, description=NOT_FOUND)
    form = load_json_form(FeedbackReplyForm)
    feedback = FeedbackService.reply(feedback, form_to_dict(form), current_user)
    return success(feedback.to_dict(), 'Đã cập nhật ý kiến')


@api_bp.route('/feedback/<int:id>', methods=['DELETE'])
@admin_required
def delete_feedback(id):
    feedback = db.get_or_404(Feedback, id, description=NOT_FOUND)
    feedback.delete()
    current_app.logger.info(f'{current_user.username} xóa ý kiến #{id}')
    return success(message='Đã xóa ý kiến')
