from portal.extensions import db
from .base import BaseModel

# Giá trị mặc định khi bảng settings còn trống
DEFAULT_SETTINGS = {
    'site_name': 'Cổng Thông Tin Quy Hoạch Quốc Gia',
    'footer_about': 'Cổng thông tin Quy hoạch quốc gia - Bộ Kế hoạch và Đầu tư.',
    'contact_email': 'info@quyhoach.gov.vn',
    'contact_phone': '(84) 24 1234 5678',
    'footer_copyright': 'Bộ Kế hoạch và Đầu tư',
}


class Setting(BaseModel):
    """Cấu hình website, chỉ dùng một bản ghi"""
    __tablename__ = 'settings'

    site_name = db.Column(db.String(255), nullable=False)
    site_logo = db.Column(db.String(255))
    site_favicon = db.Column(db.String(255))
    footer_about = db.Column(db.Text)
    contact_email = db.Column(db.String(100))
    contact_phone = db.Column(db.String(50))
    contact_address = db.Column(db.String(255))
    facebook_url = db.Column(db.String(255))
    youtube_url = db.Column(db.String(255))
    footer_copyright = db.Column(db.String(255))


class About(BaseModel):
    """Trang giới thiệu, bản ghi mới nhất được hiển thị"""
    __tablename__ = 'about'

    content = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(255))
