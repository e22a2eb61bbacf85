from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, BooleanField, SubmitField
from wtforms.validators import DataRequired


class LoginForm(FlaskForm):
    """Đăng nhập quản trị"""
    username = StringField('Tên đăng nhập', validators=[
        DataRequired(message="Vui lòng nhập tên đăng nhập")
    ])
    password = PasswordField('Mật khẩu', validators=[
        DataRequired(message="Vui lòng nhập mật khẩu")
    ])
    remember_me = BooleanField('Ghi nhớ đăng nhập')
    submit = SubmitField('Đăng nhập')
