from portal.extensions import db
from .base import BaseModel

STATUS_PENDING = 'pending'
STATUS_ANSWERED = 'answered'
STATUS_ARCHIVED = 'archived'
FEEDBACK_STATUSES = (STATUS_PENDING, STATUS_ANSWERED, STATUS_ARCHIVED)


class Feedback(BaseModel):
    """Ý kiến - kiến nghị của người dân"""
    __tablename__ = 'feedback'

    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(100), nullable=False)
    phone = db.Column(db.String(20))
    subject = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    admin_reply = db.Column(db.Text)
    status = db.Column(db.String(20), default=STATUS_PENDING, nullable=False, index=True)
    replied_at = db.Column(db.DateTime)
    replied_by = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'))

    def to_dict(self):
        data = super().to_dict()
        data['replier'] = {
            'id': self.replier.id,
            'full_name': self.replier.full_name,
            'email': self.replier.email,
        } if self.replier else None
        return data
