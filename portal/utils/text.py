"""
Tiện ích xử lý chuỗi: tạo slug tiếng Việt, cắt ngắn, thời gian đọc, định dạng số/ngày
"""
import re
import unicodedata
from datetime import datetime

# Bảng gấp dấu tiếng Việt (và một số chữ Latin có dấu thường gặp)
_SLUG_FROM = "àáãảạăằắẳẵặâầấẩẫậèéẻẽẹêềếểễệđùúủũụưừứửữựòóỏõọôồốổỗộơờớởỡợìíỉĩịäëïîöüûñçýỳỹỵỷ"
_SLUG_TO = "aaaaaaaaaaaaaaaaaeeeeeeeeeeeduuuuuuuuuuuoooooooooooooooooiiiiiaeiiouuncyyyyy"
_SLUG_TABLE = str.maketrans(_SLUG_FROM, _SLUG_TO)

_YOUTUBE_RE = re.compile(r'^.*(youtu.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*')
_TAG_RE = re.compile(r'<[^>]*>')


def create_slug(text):
    """
    Tạo slug thân thiện URL từ chuỗi tiếng Việt.
    'Quy hoạch Đô thị 2030!' -> 'quy-hoach-do-thi-2030'
    """
    if not text:
        return ''
    # Chuẩn hóa về dạng dựng sẵn để bảng gấp dấu khớp cả chuỗi tổ hợp
    slug = unicodedata.normalize('NFC', text).lower().translate(_SLUG_TABLE)
    slug = re.sub(r'[^a-z0-9\s-]', '', slug)
    slug = re.sub(r'\s+', '-', slug)
    slug = re.sub(r'-+', '-', slug)
    return slug.strip('-')


def unique_slug(model, text, exclude_id=None):
    """
    Slug không trùng trong bảng của model: thêm hậu tố -2, -3... nếu đã tồn tại.
    exclude_id: bỏ qua chính bản ghi đang sửa.
    """
    base = create_slug(text) or model.__tablename__
    slug = base
    n = 2
    while True:
        query = model.query.filter(model.slug == slug)
        if exclude_id is not None:
            query = query.filter(model.id != exclude_id)
        if query.first() is None:
            return slug
        slug = f'{base}-{n}'
        n += 1


def strip_tags(html):
    """Bỏ thẻ HTML"""
    if not html:
        return ''
    return _TAG_RE.sub('', html)


def truncate(text, length=100):
    if not text:
        return ''
    if len(text) <= length:
        return text
    return text[:length].strip() + '...'


def calculate_read_time(content):
    """Số phút đọc ước tính (200 từ/phút, tối thiểu 1)"""
    words = len(re.split(r'\s+', strip_tags(content or '')))
    return max(1, int(words / 200 + 0.5))


def get_youtube_id(url):
    """Lấy mã video YouTube 11 ký tự, None nếu không nhận ra"""
    if not url:
        return None
    match = _YOUTUBE_RE.match(url)
    if match and len(match.group(2)) == 11:
        return match.group(2)
    return None


def format_number(num):
    """1234567 -> '1.234.567'"""
    if num is None:
        return '0'
    return f'{int(num):,}'.replace(',', '.')


def format_date(value, fmt='%d/%m/%Y'):
    if not value:
        return ''
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return value.strftime(fmt)


def register_template_filters(app):
    """Đăng ký các hàm trên làm Jinja filter"""
    app.add_template_filter(format_date, 'date')
    app.add_template_filter(format_number, 'number')
    app.add_template_filter(truncate, 'truncate_text')
    app.add_template_filter(strip_tags, 'strip_tags')
    app.add_template_filter(calculate_read_time, 'read_time')
    app.add_template_filter(get_youtube_id, 'youtube_id')
