"""
Validator WTForms dùng chung và tiện ích đọc dữ liệu form
"""
import re
from wtforms.validators import ValidationError

_SKIP_FIELDS = ('csrf_token', 'submit')


def validate_phone(form, field):
    """Số điện thoại: chữ số, khoảng trắng, + ( ) - ."""
    if field.data:
        if not re.match(r'^[0-9+()\s.\-]{6,20}$', field.data):
            raise ValidationError('Số điện thoại không hợp lệ')


def validate_username(form, field):
    """Tên đăng nhập chỉ gồm chữ không dấu, số, dấu chấm và gạch dưới"""
    if field.data:
        if not re.match(r'^[A-Za-z0-9_.]+$', field.data):
            raise ValidationError('Tên đăng nhập chỉ gồm chữ, số, dấu chấm và gạch dưới')


def coerce_optional_int(value):
    """Coerce cho SelectField có lựa chọn rỗng"""
    if value in (None, '', 'None'):
        return None
    return int(value)


def form_to_dict(form, exclude=()):
    """
    Lấy dữ liệu đã kiểm tra của form thành dict.
    Chuỗi rỗng được đổi thành None, chuỗi được bỏ khoảng trắng hai đầu.
    """
    data = {}
    for name, value in form.data.items():
        if name in _SKIP_FIELDS or name in exclude:
            continue
        if isinstance(value, str):
            value = value.strip()
            if value == '':
                value = None
        data[name] = value
    return data
