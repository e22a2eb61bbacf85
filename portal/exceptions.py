class PortalException(Exception):
    """Ngoại lệ cơ sở của cổng thông tin"""
    def __init__(self, message, code=500, payload=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.payload = payload

    def to_dict(self):
        rv = dict(self.payload or ())
        rv['message'] = self.message
        rv['success'] = False
        return rv


class ValidationError(PortalException):
    """Dữ liệu gửi lên không hợp lệ, kèm lỗi theo từng trường"""
    def __init__(self, message="Dữ liệu không hợp lệ", errors=None):
        payload = {'errors': errors} if errors else None
        super().__init__(message, code=400, payload=payload)


class AuthenticationRequired(PortalException):
    """Chưa đăng nhập"""
    def __init__(self, message="Unauthorized", payload=None):
        super().__init__(message, code=401, payload=payload)


class PermissionDenied(PortalException):
    """Không đủ quyền"""
    def __init__(self, message="Không có quyền thực hiện thao tác này", payload=None):
        super().__init__(message, code=403, payload=payload)


class NotFound(PortalException):
    """Không tìm thấy bản ghi"""
    def __init__(self, message="Không tìm thấy dữ liệu", payload=None):
        super().__init__(message, code=404, payload=payload)
