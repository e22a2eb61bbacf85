"""
Videos, slides và bản vẽ: danh sách có thứ tự, bật/tắt hiển thị
"""
from flask import request

from portal.extensions import db
from portal.exceptions import NotFound
from portal.models.media import Video, Slide, Drawing, MEDIA_STATUSES, STATUS_ACTIVE
from portal.services.media_service import MediaService
from portal.blueprints.admin.forms import VideoForm, SlideForm, DrawingForm
from portal.utils.permissions import api_login_required, admin_required
from portal.utils.response import success, page_args, pagination_meta, load_json_form
from portal.utils.validators import form_to_dict
from . import api_bp, is_cms_user


# ---------- Videos ----------

@api_bp.route('/videos', methods=['GET'])
def list_videos():
    status = request.args.get('status', '')
    if is_cms_user():
        query = MediaService.ordered(Video)
        if status in MEDIA_STATUSES:
            query = query.filter_by(status=status)
    else:
        query = MediaService.visible(Video)
    return success([v.to_dict() for v in query.all()])


@api_bp.route('/videos/<int:id>', methods=['GET'])
def get_video(id):
    video = db.get_or_404(Video, id, description='Không tìm thấy video')
    if video.status != STATUS_ACTIVE and not is_cms_user():
        raise NotFound('Không tìm thấy video')
    return success(video.to_dict())


@api_bp.route('/videos', methods=['POST'])
@api_login_required
def create_video():
    form = load_json_form(VideoForm)
    video = MediaService.save(Video(), form_to_dict(form))
    return success(video.to_dict(), 'Đã tạo video mới', 201)


@api_bp.route('/videos/<int:id>', methods=['PUT'])
@api_login_required
def update_video(id):
    video = db.get_or_404(Video, id, description='Không tìm thấy video')
    form = load_json_form(VideoForm)
    video = MediaService.save(video, form_to_dict(form))
    return success(video.to_dict(), 'Đã cập nhật video')


@api_bp.route('/videos/<int:id>', methods=['DELETE'])
@api_login_required
def delete_video(id):
    video = db.get_or_404(Video, id, description='Không tìm thấy video')
    video.delete()
    return success(message='Đã xóa video')


# ---------- Slides ----------

@api_bp.route('/slides', methods=['GET'])
def list_slides():
    if is_cms_user():
        query = MediaService.ordered(Slide)
        active = request.args.get('active')
        if active in ('true', 'false'):
            query = query.filter(Slide.is_active.is_(active == 'true'))
    else:
        query = MediaService.visible(Slide)
    return success([s.to_dict() for s in query.all()])


@api_bp.route('/slides/<int:id>', methods=['GET'])
def get_slide(id):
    slide = db.get_or_404(Slide, id, description='Không tìm thấy slide')
    if not slide.is_active and not is_cms_user():
        raise NotFound('Không tìm thấy slide')
    return success(slide.to_dict())


@api_bp.route('/slides', methods=['POST'])
@api_login_required
def create_slide():
    form = load_json_form(SlideForm)
    slide = MediaService.save(Slide(), form_to_dict(form))
    return success(slide.to_dict(), 'Đã tạo slide mới', 201)


@api_bp.route('/slides/<int:id>', methods=['PUT'])
@api_login_required
def update_slide(id):
    slide = db.get_or_404(Slide, id, description='Không tìm thấy slide')
    form = load_json_form(SlideForm)
    slide = MediaService.save(slide, form_to_dict(form))
    return success(slide.to_dict(), 'Đã cập nhật slide')


@api_bp.route('/slides/<int:id>', methods=['DELETE'])
@api_login_required
def delete_slide(id):
    slide = db.get_or_404(Slide, id, description='Không tìm thấy slide')
    slide.delete()
    return success(message='Đã xóa slide')


# ---------- Bản vẽ (chỉ admin được sửa) ----------

@api_bp.route('/drawings', methods=['GET'])
def list_drawings():
    page, limit = page_args(default_limit=10)
    status = request.args.get('status', '')
    search = request.args.get('search', '').strip()

    if is_cms_user():
        query = MediaService.ordered(Drawing)
        if status in MEDIA_STATUSES:
            query = query.filter_by(status=status)
        if search:
            query = query.filter(Drawing.title.contains(search))
    else:
        query = MediaService.search_drawings(search)

    pagination = query.paginate(page=page, per_page=limit, error_out=False)
    return success({
        'drawings': [d.to_dict() for d in pagination.items],
        'pagination': pagination_meta(page, limit, pagination.total),
    })


@api_bp.route('/drawings/<int:id>', methods=['GET'])
def get_drawing(id):
    drawing = db.get_or_404(Drawing, id, description='Không tìm thấy bản vẽ')
    if drawing.status != STATUS_ACTIVE and not is_cms_user():
        raise NotFound('Không tìm thấy bản vẽ')
    return success(drawing.to_dict())


@api_bp.route('/drawings', methods=['POST'])
@admin_required
def create_drawing():
    form = load_json_form(DrawingForm)
    drawing = MediaService.save(Drawing(), form_to_dict(form))
    return success(drawing.to_dict(), 'Đã tạo bản vẽ', 201)


@api_bp.route('/drawings/<int:id>', methods=['PUT'])
@admin_required
def update_drawing(id):
    drawing = db.get_or_404(Drawing, id, description='Không tìm thấy bản vẽ')
    form = load_json_form(DrawingForm)
    drawing = MediaService.save(drawing, form_to_dict(form))
    return success(drawing.to_dict(), 'Đã cập nhật bản vẽ')


@api_bp.route('/drawings/<int:id>', methods=['DELETE'])
@admin_required
def delete_drawing(id):
    drawing = db.get_or_404(Drawing, id, description='Không tìm thấy bản vẽ')
    drawing.delete()
    return success(message='Đã xóa bản vẽ')
