from datetime import datetime
from flask import current_app
from portal.extensions import db
from portal.models.feedback import Feedback, STATUS_PENDING, STATUS_ANSWERED


class FeedbackService:
    @staticmethod
    def submit(data: dict) -> Feedback:
        """Người dân gửi ý kiến, trạng thái luôn là pending"""
        feedback = Feedback(
            name=data['name'],
            email=data['email'],
            phone=data.get('phone'),
            subject=data['subject'],
            message=data['message'],
            status=STATUS_PENDING
        )
        db.session.add(feedback)
        db.session.commit()
        current_app.logger.info(f'Nhận ý kiến mới #{feedback.id}: {feedback.subject}')
        return feedback

    @staticmethod
    def reply(feedback: Feedback, data: dict, user) -> Feedback:
        """
        Cập nhật trả lời và trạng thái.
        replied_at/replied_by chỉ được đóng dấu khi có nội dung trả lời và trạng thái answered.
        """
        feedback.admin_reply = data.get('admin_reply') or None
        feedback.status = data.get('status') or feedback.status

        if feedback.admin_reply and feedback.status == STATUS_ANSWERED:
            feedback.replied_at = datetime.utcnow()
            feedback.replied_by = user.id

        db.session.commit()
        current_app.logger.info(f'Ý kiến #{feedback.id} -> {feedback.status} bởi {user.username}')
        return feedback

    @staticmethod
    def answered(limit=10):
        """Ý kiến đã được trả lời, hiển thị ở trang công khai"""
        return Feedback.query.filter(
            Feedback.status == STATUS_ANSWERED,
            Feedback.admin_reply.isnot(None)
        ).order_by(Feedback.replied_at.desc()).limit(limit).all()
