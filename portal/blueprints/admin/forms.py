from flask_wtf import FlaskForm
from wtforms import (StringField, TextAreaField, SelectField, IntegerField, BooleanField,
                     PasswordField, SubmitField)
from wtforms.validators import DataRequired, Length, Optional, Email, URL

from portal.models import Category
from portal.models.auth import ROLES
from portal.models.content import POST_STATUSES, PROJECT_STATUSES
from portal.models.media import MEDIA_STATUSES
from portal.models.feedback import FEEDBACK_STATUSES
from portal.utils.validators import coerce_optional_int, validate_username

STATUS_LABELS = {
    'draft': 'Nháp',
    'published': 'Đã xuất bản',
    'archived': 'Lưu trữ',
    'active': 'Hoạt động',
    'inactive': 'Tạm ẩn',
    'pending': 'Chờ xử lý',
    'answered': 'Đã trả lời',
    'admin': 'Quản trị viên',
    'editor': 'Biên tập viên',
    'user': 'Người dùng',
}


def _choices(values):
    return [(v, STATUS_LABELS.get(v, v)) for v in values]


def category_choices(exclude_id=None):
    """Lựa chọn danh mục, có mục rỗng; exclude_id dùng để loại chính danh mục đang sửa"""
    query = Category.query.order_by(Category.display_order, Category.name)
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    return [('', '-- Không chọn --')] + [(c.id, c.name) for c in query.all()]


class PostForm(FlaskForm):
    """Bài viết"""
    title = StringField('Tiêu đề', validators=[
        DataRequired(message='Tiêu đề không được để trống'), Length(max=255)
    ])
    content = TextAreaField('Nội dung', validators=[
        DataRequired(message='Nội dung không được để trống')
    ])
    excerpt = TextAreaField('Tóm tắt', validators=[Optional(), Length(max=500)])
    cover_image = StringField('Ảnh bìa', validators=[Optional(), Length(max=255)])
    category_id = SelectField('Danh mục', coerce=coerce_optional_int)
    status = SelectField('Trạng thái', choices=_choices(POST_STATUSES), default='draft')
    submit = SubmitField('Lưu')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.category_id.choices = category_choices()


class ProjectForm(FlaskForm):
    """Dự án"""
    title = StringField('Tiêu đề', validators=[
        DataRequired(message='Tiêu đề không được để trống'), Length(max=255)
    ])
    description = TextAreaField('Mô tả', validators=[Optional(), Length(max=500)])
    content = TextAreaField('Nội dung', validators=[Optional()])
    cover_image = StringField('Ảnh bìa', validators=[Optional(), Length(max=255)])
    pdf_file = StringField('File PDF', validators=[Optional(), Length(max=255)])
    category_id = SelectField('Danh mục', coerce=coerce_optional_int)
    status = SelectField('Trạng thái', choices=_choices(PROJECT_STATUSES), default='draft')
    submit = SubmitField('Lưu')

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.category_id.choices = category_choices()


class CategoryForm(FlaskForm):
    """Danh mục"""
    name = StringField('Tên danh mục', validators=[
        DataRequired(message='Tên danh mục không được để trống'), Length(max=100)
    ])
    description = TextAreaField('Mô tả', validators=[Optional()])
    parent_id = SelectField('Danh mục cha', coerce=coerce_optional_int)
    display_order = IntegerField('Thứ tự', default=0, validators=[Optional()])
    submit = SubmitField('Lưu')

    def __init__(self, *args, category_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        # Không cho chọn chính nó làm cha
        self.parent_id.choices = category_choices(exclude_id=category_id)


class VideoForm(FlaskForm):
    title = StringField('Tiêu đề', validators=[
        DataRequired(message='Tiêu đề không được để trống'), Length(max=255)
    ])
    description = TextAreaField('Mô tả', validators=[Optional()])
    video_url = StringField('URL video', validators=[
        DataRequired(message='URL video không hợp lệ'),
        URL(message='URL video không hợp lệ'), Length(max=500)
    ])
    thumbnail_url = StringField('Ảnh thumbnail', validators=[Optional(), Length(max=255)])
    duration = StringField('Thời lượng', validators=[Optional(), Length(max=20)])
    display_order = IntegerField('Thứ tự', default=0, validators=[Optional()])
    status = SelectField('Trạng thái', choices=_choices(MEDIA_STATUSES), default='active')
    submit = SubmitField('Lưu')


class SlideForm(FlaskForm):
    title = StringField('Tiêu đề', validators=[Optional(), Length(max=255)])
    description = TextAreaField('Mô tả', validators=[Optional()])
    image_url = StringField('Hình ảnh', validators=[
        DataRequired(message='Hình ảnh không được để trống'), Length(max=255)
    ])
    link_url = StringField('Liên kết', validators=[Optional(), Length(max=255)])
    display_order = IntegerField('Thứ tự', default=0, validators=[Optional()])
    is_active = BooleanField('Hiển thị', default=True)
    submit = SubmitField('Lưu')


class DrawingForm(FlaskForm):
    """Bản vẽ"""
    title = StringField('Tiêu đề', validators=[
        DataRequired(message='Tiêu đề và file DWG là bắt buộc'), Length(max=255)
    ])
    dwg_file = StringField('File DWG', validators=[
        DataRequired(message='Tiêu đề và file DWG là bắt buộc'), Length(max=255)
    ])
    icon = TextAreaField('Icon (emoji, URL ảnh hoặc SVG)', validators=[Optional()])
    display_order = IntegerField('Thứ tự', default=0, validators=[Optional()])
    status = SelectField('Trạng thái', choices=_choices(MEDIA_STATUSES), default='active')
    submit = SubmitField('Lưu')


class FeedbackReplyForm(FlaskForm):
    """Trả lời ý kiến"""
    admin_reply = TextAreaField('Nội dung trả lời', validators=[Optional()])
    status = SelectField('Trạng thái', choices=_choices(FEEDBACK_STATUSES), default='pending')
    submit = SubmitField('Cập nhật')


class UserForm(FlaskForm):
    """Người dùng; mật khẩu bắt buộc khi tạo mới (kiểm tra ở UserService)"""
    username = StringField('Tên đăng nhập', validators=[
        DataRequired(message='Tên đăng nhập tối thiểu 3 ký tự'),
        Length(min=3, max=50, message='Tên đăng nhập tối thiểu 3 ký tự'),
        validate_username
    ])
    email = StringField('Email', validators=[
        DataRequired(message='Email không hợp lệ'), Email(message='Email không hợp lệ'), Length(max=100)
    ])
    password = PasswordField('Mật khẩu', validators=[
        Optional(), Length(min=6, message='Mật khẩu tối thiểu 6 ký tự')
    ])
    full_name = StringField('Họ tên', validators=[Optional(), Length(max=100)])
    avatar = StringField('Ảnh đại diện', validators=[Optional(), Length(max=255)])
    role = SelectField('Vai trò', choices=_choices(ROLES), default='user')
    status = SelectField('Trạng thái', choices=_choices(MEDIA_STATUSES), default='active')
    submit = SubmitField('Lưu')


class SettingsForm(FlaskForm):
    """Cấu hình website"""
    site_name = StringField('Tên website', validators=[DataRequired(), Length(max=255)])
    site_logo = StringField('Logo', validators=[Optional(), Length(max=255)])
    site_favicon = StringField('Favicon', validators=[Optional(), Length(max=255)])
    footer_about = TextAreaField('Giới thiệu chân trang', validators=[Optional()])
    contact_email = StringField('Email liên hệ', validators=[Optional(), Length(max=100)])
    contact_phone = StringField('Điện thoại', validators=[Optional(), Length(max=50)])
    contact_address = StringField('Địa chỉ', validators=[Optional(), Length(max=255)])
    facebook_url = StringField('Facebook', validators=[Optional(), Length(max=255)])
    youtube_url = StringField('YouTube', validators=[Optional(), Length(max=255)])
    footer_copyright = StringField('Bản quyền', validators=[Optional(), Length(max=255)])
    submit = SubmitField('Lưu cấu hình')


class AboutForm(FlaskForm):
    content = TextAreaField('Nội dung', validators=[
        DataRequired(message='Nội dung không được để trống')
    ])
    image_url = StringField('Hình ảnh', validators=[Optional(), Length(max=255)])
    submit = SubmitField('Lưu')
