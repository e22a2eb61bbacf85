from flask import current_app
from portal.extensions import db
from portal.exceptions import ValidationError
from portal.models.auth import User
from portal.models.content import Post
from portal.models.feedback import Feedback


class UserService:
    @staticmethod
    def create_user(data: dict) -> User:
        if User.query.filter_by(username=data['username']).first():
            raise ValidationError('Tên đăng nhập đã tồn tại')
        if User.query.filter_by(email=data['email']).first():
            raise ValidationError('Email đã tồn tại')
        if not data.get('password'):
            raise ValidationError('Mật khẩu không được để trống')

        user = User(
            username=data['username'],
            email=data['email'],
            password=data['password'],  # setter tự băm
            full_name=data.get('full_name'),
            avatar=data.get('avatar'),
            role=data.get('role') or 'user',
            status=data.get('status') or 'active'
        )
        db.session.add(user)
        db.session.commit()
        current_app.logger.info(f'Tạo người dùng {user.username} ({user.role})')
        return user

    @staticmethod
    def update_user(user: User, data: dict) -> User:
        """Tên đăng nhập không đổi; mật khẩu chỉ cập nhật khi được gửi lên"""
        email = data['email']
        if User.query.filter(User.email == email, User.id != user.id).first():
            raise ValidationError('Email đã tồn tại')

        user.email = email
        user.full_name = data.get('full_name')
        user.avatar = data.get('avatar')
        user.role = data.get('role') or user.role
        user.status = data.get('status') or user.status
        if data.get('password'):
            user.password = data['password']

        db.session.commit()
        current_app.logger.info(f'Cập nhật người dùng {user.username}')
        return user

    @staticmethod
    def delete_user(user: User, acting_user: User):
        """Không cho phép tự xóa tài khoản của chính mình"""
        if user.id == acting_user.id:
            raise ValidationError('Không thể xóa tài khoản của chính mình')

        username = user.username
        Post.query.filter_by(author_id=user.id).update({'author_id': None})
        Feedback.query.filter_by(replied_by=user.id).update({'replied_by': None})
        db.session.delete(user)
        db.session.commit()
        current_app.logger.info(f'{acting_user.username} xóa người dùng {username}')
