import os
import uuid
from flask import current_app
from portal.exceptions import ValidationError

MB = 1024 * 1024

IMAGE_MIMETYPES = {'image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp'}
PDF_MIMETYPES = {'application/pdf'}
IMAGE_EXTENSIONS = {'jpg', 'jpeg', 'png', 'gif', 'webp'}

# Quy tắc theo nhóm file: MIME chấp nhận (None = chỉ xét đuôi), đuôi file cho phép, dung lượng tối đa
IMAGE_RULE = {
    'mimetypes': IMAGE_MIMETYPES,
    'extensions': IMAGE_EXTENSIONS,
    'max_size': 5 * MB,
    'type_message': 'Chỉ chấp nhận file ảnh (JPEG, PNG, GIF, WEBP)',
    'size_message': 'File ảnh quá lớn. Tối đa 5MB',
}
PDF_RULE = {
    'mimetypes': PDF_MIMETYPES,
    'extensions': {'pdf'},
    'max_size': 10 * MB,
    'type_message': 'Chỉ chấp nhận file PDF',
    'size_message': 'File PDF quá lớn. Tối đa 10MB',
}
# MIME của DWG không thống nhất giữa các trình duyệt nên chỉ xét đuôi file
DWG_RULE = {
    'mimetypes': None,
    'extensions': {'dwg'},
    'max_size': 50 * MB,
    'type_message': 'Chỉ chấp nhận file .dwg',
    'size_message': 'File DWG quá lớn. Tối đa 50MB',
}

UPLOAD_RULES = {
    'posts': IMAGE_RULE,
    'projects': IMAGE_RULE,
    'slides': IMAGE_RULE,
    'videos': IMAGE_RULE,
    'logo': IMAGE_RULE,
    'users': IMAGE_RULE,
    'media': IMAGE_RULE,
    'pdfs': PDF_RULE,
    'dwg': DWG_RULE,
}
DEFAULT_UPLOAD_TYPE = 'posts'


def get_file_extension(filename):
    """Lấy đuôi file (chữ thường, không có dấu chấm)"""
    if not filename or '.' not in filename:
        return None
    return filename.rsplit('.', 1)[1].lower()


def get_file_size(file):
    """Đo dung lượng FileStorage mà không đọc toàn bộ vào bộ nhớ"""
    stream = file.stream
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def validate_upload(file, upload_type):
    """
    Kiểm tra file theo nhóm upload, ném ValidationError nếu không hợp lệ.
    Trả về (rule, size).
    """
    if not file or not file.filename or not file.filename.strip():
        raise ValidationError('Không có file được upload')

    rule = UPLOAD_RULES.get(upload_type)
    if rule is None:
        raise ValidationError(f'Loại upload không hợp lệ: {upload_type}')

    if rule['mimetypes'] is not None and file.mimetype not in rule['mimetypes']:
        raise ValidationError(rule['type_message'])
    # Đuôi file luôn phải nằm trong danh sách cho phép, vì nó được giữ lại trong tên lưu trữ
    if get_file_extension(file.filename) not in rule['extensions']:
        raise ValidationError(rule['type_message'])

    size = get_file_size(file)
    if size > rule['max_size']:
        raise ValidationError(rule['size_message'])
    return rule, size


def save_upload(file, upload_type=DEFAULT_UPLOAD_TYPE):
    """
    Kiểm tra và lưu file vào <UPLOAD_FOLDER>/<upload_type>/.
    Trả về dict: url, filename, size, type
    """
    _, size = validate_upload(file, upload_type)

    ext = get_file_extension(file.filename)
    # Tên file ngẫu nhiên để tránh ghi đè và tránh ký tự lạ trong tên gốc
    unique_name = f"{uuid.uuid4().hex}.{ext}"

    upload_dir = os.path.join(current_app.config['UPLOAD_FOLDER'], upload_type)
    os.makedirs(upload_dir, exist_ok=True)

    save_path = os.path.join(upload_dir, unique_name)
    file.save(save_path)
    current_app.logger.info(f'save_upload: {file.filename} -> {save_path} ({size} bytes)')

    return {
        'url': f'/uploads/{upload_type}/{unique_name}',
        'filename': unique_name,
        'size': size,
        'type': file.mimetype,
    }
