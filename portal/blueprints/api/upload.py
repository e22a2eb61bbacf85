from flask import request

from portal.utils.file_helper import save_upload, DEFAULT_UPLOAD_TYPE
from portal.utils.permissions import api_login_required
from portal.utils.response import success
from . import api_bp


@api_bp.route('/upload', methods=['POST'])
@api_login_required
def upload():
    """
    Nhận file multipart: trường 'file' và 'type' (posts, projects, slides, videos,
    pdfs, dwg, logo, users, media). Trả về URL công khai của file.
    """
    upload_type = request.form.get('type') or DEFAULT_UPLOAD_TYPE
    data = save_upload(request.files.get('file'), upload_type)
    return success(data, 'Upload thành công')
