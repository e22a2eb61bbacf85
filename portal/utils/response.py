"""
Định dạng phản hồi JSON thống nhất: {success, data|message}
"""
import math
from flask import jsonify, request
from werkzeug.datastructures import MultiDict
from wtforms import BooleanField
from portal.exceptions import ValidationError


def success(data=None, message=None, status=200):
    body = {'success': True}
    if data is not None:
        body['data'] = data
    if message:
        body['message'] = message
    return jsonify(body), status


def error(message, status=400, **extra):
    body = {'success': False, 'message': message}
    body.update(extra)
    return jsonify(body), status


def pagination_meta(page, limit, total):
    return {
        'page': page,
        'limit': limit,
        'total': total,
        'totalPages': math.ceil(total / limit) if limit else 0,
    }


def page_args(default_limit=20, max_limit=100):
    """Đọc page/limit từ query string, giới hạn trong khoảng hợp lệ"""
    page = max(request.args.get('page', 1, type=int) or 1, 1)
    limit = request.args.get('limit', default_limit, type=int) or default_limit
    limit = min(max(limit, 1), max_limit)
    return page, limit


def _formdata_from_json(payload):
    """
    Chuyển body JSON thành MultiDict cho WTForms.
    Bỏ giá trị null, bool thành 'true'/'false' (BooleanField coi 'false' là sai), còn lại ép về str.
    """
    formdata = MultiDict()
    for key, value in payload.items():
        if value is None:
            continue
        if isinstance(value, bool):
            formdata.add(key, 'true' if value else 'false')
        elif isinstance(value, (list, dict)):
            continue
        else:
            formdata.add(key, str(value))
    return formdata


def load_json_form(form_class, **kwargs):
    """
    Kiểm tra body JSON bằng một FlaskForm, ném ValidationError với lỗi theo từng trường.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError('Body phải là JSON object')

    form = form_class(formdata=_formdata_from_json(payload), meta={'csrf': False}, **kwargs)
    # BooleanField coi trường vắng mặt là False (kiểu checkbox HTML); với JSON thì dùng giá trị mặc định
    for field in form:
        if isinstance(field, BooleanField) and field.name not in payload:
            field.data = bool(field.default)
    if not form.validate():
        raise ValidationError(errors=form.errors)
    return form
