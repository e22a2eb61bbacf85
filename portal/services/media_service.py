from portal.extensions import db
from portal.models.media import Slide, Drawing, STATUS_ACTIVE


class MediaService:
    """Video, slide, bản vẽ: danh sách sắp theo display_order"""

    @staticmethod
    def ordered(model):
        return model.query.order_by(model.display_order.asc(), model.created_at.desc())

    @staticmethod
    def visible(model):
        """Bản ghi đang hiển thị ở trang công khai"""
        if model is Slide:
            return MediaService.ordered(Slide).filter(Slide.is_active.is_(True))
        return MediaService.ordered(model).filter(model.status == STATUS_ACTIVE)

    @staticmethod
    def save(obj, data: dict):
        for field, value in data.items():
            setattr(obj, field, value)
        if obj.display_order is None:
            obj.display_order = 0
        db.session.add(obj)
        db.session.commit()
        return obj

    @staticmethod
    def search_drawings(keyword=None):
        query = MediaService.visible(Drawing)
        if keyword:
            query = query.filter(Drawing.title.contains(keyword))
        return query
