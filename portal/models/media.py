from portal.extensions import db
from .base import BaseModel

STATUS_ACTIVE = 'active'
STATUS_INACTIVE = 'inactive'
MEDIA_STATUSES = (STATUS_ACTIVE, STATUS_INACTIVE)


class Video(BaseModel):
    __tablename__ = 'videos'

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    video_url = db.Column(db.String(500), nullable=False)
    thumbnail_url = db.Column(db.String(255))
    duration = db.Column(db.String(20))  # ví dụ "12:30"
    display_order = db.Column(db.Integer, default=0, nullable=False)
    status = db.Column(db.String(20), default=STATUS_ACTIVE, nullable=False)


class Slide(BaseModel):
    """Ảnh trình chiếu trang chủ"""
    __tablename__ = 'slides'

    title = db.Column(db.String(255))
    description = db.Column(db.Text)
    image_url = db.Column(db.String(255), nullable=False)
    link_url = db.Column(db.String(255))
    display_order = db.Column(db.Integer, default=0, nullable=False)
    is_active = db.Column(db.Boolean, default=True, nullable=False)


class Drawing(BaseModel):
    """Bản vẽ DWG"""
    __tablename__ = 'drawings'

    title = db.Column(db.String(255), nullable=False)
    dwg_file = db.Column(db.String(255), nullable=False)
    icon = db.Column(db.Text)  # emoji, URL ảnh hoặc mã SVG
    status = db.Column(db.String(20), default=STATUS_ACTIVE, nullable=False)
    display_order = db.Column(db.Integer, default=0, nullable=False)

    @property
    def icon_kind(self):
        """Phân loại icon để template hiển thị: svg, image hoặc text"""
        if not self.icon:
            return None
        icon = self.icon.strip()
        if icon.startswith('<svg'):
            return 'svg'
        if icon.startswith('/') or icon.startswith('http'):
            return 'image'
        return 'text'
