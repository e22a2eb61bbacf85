from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from portal.extensions import db
from .base import BaseModel

ROLE_ADMIN = 'admin'
ROLE_EDITOR = 'editor'
ROLE_USER = 'user'
ROLES = (ROLE_ADMIN, ROLE_EDITOR, ROLE_USER)

# Vai trò được phép vào trang quản trị
CMS_ROLES = (ROLE_ADMIN, ROLE_EDITOR)

STATUS_ACTIVE = 'active'
STATUS_INACTIVE = 'inactive'


class User(UserMixin, BaseModel):
    """Tài khoản quản trị"""
    __tablename__ = 'users'
    __hidden_fields__ = ('password_hash',)

    username = db.Column(db.String(50), unique=True, nullable=False, index=True)
    email = db.Column(db.String(100), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)
    full_name = db.Column(db.String(100))
    avatar = db.Column(db.String(255))
    role = db.Column(db.String(20), default=ROLE_USER, nullable=False)
    status = db.Column(db.String(20), default=STATUS_ACTIVE, nullable=False)

    posts = db.relationship('Post', backref='author', lazy='dynamic')
    replies = db.relationship('Feedback', backref='replier', lazy='dynamic')

    @property
    def password(self):
        raise AttributeError('Mật khẩu không thể đọc')

    @password.setter
    def password(self, password):
        self.password_hash = generate_password_hash(password)

    def verify_password(self, password):
        return check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    @property
    def can_access_cms(self):
        """Chỉ admin và editor đang hoạt động mới vào được trang quản trị"""
        return self.role in CMS_ROLES and self.status == STATUS_ACTIVE

    @property
    def display_name(self):
        return self.full_name or self.username

    # Ghi đè thuộc tính bắt buộc của Flask-Login
    @property
    def is_active(self):
        return self.status == STATUS_ACTIVE

    def __repr__(self):
        return f'<User {self.username}>'
