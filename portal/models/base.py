from datetime import datetime
from portal.extensions import db


class BaseModel(db.Model):
    """
    Lớp model cơ sở của cổng thông tin
    Gồm: khóa chính id, thời điểm tạo, thời điểm cập nhật, phương thức tuần tự hóa
    """
    __abstract__ = True

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Cột không bao giờ đưa ra JSON
    __hidden_fields__ = ()

    def save(self):
        """Lưu vào cơ sở dữ liệu"""
        db.session.add(self)
        db.session.commit()

    def delete(self):
        """Xóa cứng bản ghi"""
        db.session.delete(self)
        db.session.commit()

    def to_dict(self):
        """
        Chuyển model thành dict để trả về JSON.
        Bỏ qua các cột bắt đầu bằng '_' và các cột trong __hidden_fields__.
        """
        data = {}
        for c in self.__table__.columns:
            if c.name.startswith('_') or c.name in self.__hidden_fields__:
                continue
            val = getattr(self, c.name)
            if isinstance(val, datetime):
                data[c.name] = val.isoformat()
            else:
                data[c.name] = val
        return data
