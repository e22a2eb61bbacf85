from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SubmitField
from wtforms.validators import DataRequired, Length, Email, Optional

from portal.utils.validators import validate_phone


class FeedbackForm(FlaskForm):
    """Form gửi ý kiến - kiến nghị"""
    name = StringField('Họ và tên', validators=[
        DataRequired(message='Tên không được để trống'), Length(max=100)
    ])
    email = StringField('Email', validators=[
        DataRequired(message='Email không hợp lệ'), Email(message='Email không hợp lệ'), Length(max=100)
    ])
    phone = StringField('Số điện thoại', validators=[Optional(), Length(max=20), validate_phone])
    subject = StringField('Tiêu đề', validators=[
        DataRequired(message='Tiêu đề không được để trống'), Length(max=255)
    ])
    message = TextAreaField('Nội dung', validators=[
        DataRequired(message='Nội dung không được để trống')
    ])
    submit = SubmitField('Gửi ý kiến')
