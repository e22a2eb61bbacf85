"""
Trang quản trị: tổng quan và bảng quản lý từng loại nội dung
"""
from flask import render_template, request, flash, redirect, url_for, current_app
from flask_login import current_user

from portal.extensions import db
from portal.exceptions import ValidationError
from portal.blueprints.admin import admin_bp
from portal.blueprints.admin.forms import (
    STATUS_LABELS, PostForm, ProjectForm, CategoryForm, VideoForm, SlideForm, DrawingForm,
    FeedbackReplyForm, UserForm, SettingsForm, AboutForm
)
from portal.models import Post, Project, Category, Video, Slide, Drawing, Feedback, User, About
from portal.models.content import POST_STATUSES, PROJECT_STATUSES
from portal.models.feedback import FEEDBACK_STATUSES, STATUS_PENDING
from portal.services.content_service import ContentService
from portal.services.feedback_service import FeedbackService
from portal.services.media_service import MediaService
from portal.services.site_service import SiteService
from portal.services.user_service import UserService
from portal.utils.permissions import admin_page_required
from portal.utils.validators import form_to_dict


def render_form(form, title, back_endpoint, **extra):
    """Form tạo/sửa dùng chung một template"""
    return render_template('admin/form.html', form=form, title=title,
                           back_url=url_for(back_endpoint), **extra)


@admin_bp.route('/')
@admin_bp.route('/dashboard')
def dashboard():
    """Trang tổng quan"""
    stats = SiteService.dashboard_stats()
    recent_posts = Post.query.order_by(Post.created_at.desc()).limit(5).all()
    pending_feedback = Feedback.query.filter_by(status=STATUS_PENDING) \
        .order_by(Feedback.created_at.desc()).limit(5).all()
    return render_template('admin/dashboard.html', stats=stats,
                           recent_posts=recent_posts, pending_feedback=pending_feedback)


# ---------- Bài viết ----------

@admin_bp.route('/posts')
def posts():
    page = request.args.get('page', 1, type=int)
    status = request.args.get('status', '')
    query = Post.query
    if status in POST_STATUSES:
        query = query.filter_by(status=status)
    pagination = query.order_by(Post.created_at.desc()).paginate(
        page=page, per_page=current_app.config['ADMIN_PER_PAGE'], error_out=False
    )
    return render_template('admin/posts.html', pagination=pagination,
                           posts=pagination.items, current_status=status, statuses=POST_STATUSES)


@admin_bp.route('/posts/new', methods=['GET', 'POST'])
def post_create():
    form = PostForm()
    if form.validate_on_submit():
        ContentService.create_post(form_to_dict(form), current_user)
        flash('Đã tạo bài viết mới', 'success')
        return redirect(url_for('admin.posts'))
    return render_form(form, 'Thêm bài viết', 'admin.posts', rich_text=True)


@admin_bp.route('/posts/<int:id>/edit', methods=['GET', 'POST'])
def post_edit(id):
    post = db.get_or_404(Post, id)
    form = PostForm(obj=post)
    if form.validate_on_submit():
        ContentService.update_post(post, form_to_dict(form))
        flash('Đã cập nhật bài viết', 'success')
        return redirect(url_for('admin.posts'))
    return render_form(form, f'Sửa bài viết #{post.id}', 'admin.posts', rich_text=True)


@admin_bp.route('/posts/<int:id>/delete', methods=['POST'])
def post_delete(id):
    post = db.get_or_404(Post, id)
    post.delete()
    flash('Đã xóa bài viết', 'success')
    return redirect(url_for('admin.posts'))


# ---------- Dự án ----------

@admin_bp.route('/projects')
def projects():
    page = request.args.get('page', 1, type=int)
    status = request.args.get('status', '')
    query = Project.query
    if status in PROJECT_STATUSES:
        query = query.filter_by(status=status)
    pagination = query.order_by(Project.created_at.desc()).paginate(
        page=page, per_page=current_app.config['ADMIN_PER_PAGE'], error_out=False
    )
    return render_template('admin/projects.html', pagination=pagination,
                           projects=pagination.items, current_status=status, statuses=PROJECT_STATUSES)


@admin_bp.route('/projects/new', methods=['GET', 'POST'])
def project_create():
    form = ProjectForm()
    if form.validate_on_submit():
        ContentService.create_project(form_to_dict(form))
        flash('Đã tạo dự án mới', 'success')
        return redirect(url_for('admin.projects'))
    return render_form(form, 'Thêm dự án', 'admin.projects', rich_text=True)


@admin_bp.route('/projects/<int:id>/edit', methods=['GET', 'POST'])
def project_edit(id):
    project = db.get_or_404(Project, id)
    form = ProjectForm(obj=project)
    if form.validate_on_submit():
        ContentService.update_project(project, form_to_dict(form))
        flash('Đã cập nhật dự án', 'success')
        return redirect(url_for('admin.projects'))
    return render_form(form, f'Sửa dự án #{project.id}', 'admin.projects', rich_text=True)


@admin_bp.route('/projects/<int:id>/delete', methods=['POST'])
def project_delete(id):
    project = db.get_or_404(Project, id)
    project.delete()
    flash('Đã xóa dự án', 'success')
    return redirect(url_for('admin.projects'))


# ---------- Danh mục ----------

@admin_bp.route('/categories')
def categories():
    items = Category.query.order_by(Category.display_order, Category.name).all()
    return render_template('admin/categories.html', categories=items)


@admin_bp.route('/categories/new', methods=['GET', 'POST'])
def category_create():
    form = CategoryForm()
    if form.validate_on_submit():
        ContentService.save_category(Category(), form_to_dict(form))
        flash('Đã tạo danh mục mới', 'success')
        return redirect(url_for('admin.categories'))
    return render_form(form, 'Thêm danh mục', 'admin.categories')


@admin_bp.route('/categories/<int:id>/edit', methods=['GET', 'POST'])
def category_edit(id):
    category = db.get_or_404(Category, id)
    form = CategoryForm(obj=category, category_id=category.id)
    if form.validate_on_submit():
        ContentService.save_category(category, form_to_dict(form))
        flash('Đã cập nhật danh mục', 'success')
        return redirect(url_for('admin.categories'))
    return render_form(form, f'Sửa danh mục: {category.name}', 'admin.categories')


@admin_bp.route('/categories/<int:id>/delete', methods=['POST'])
def category_delete(id):
    category = db.get_or_404(Category, id)
    ContentService.delete_category(category)
    flash('Đã xóa danh mục', 'success')
    return redirect(url_for('admin.categories'))


# ---------- Videos / Slides / Bản vẽ ----------

@admin_bp.route('/videos')
def videos():
    return render_template('admin/videos.html', videos=MediaService.ordered(Video).all())


@admin_bp.route('/videos/new', methods=['GET', 'POST'])
def video_create():
    form = VideoForm()
    if form.validate_on_submit():
        MediaService.save(Video(), form_to_dict(form))
        flash('Đã tạo video mới', 'success')
        return redirect(url_for('admin.videos'))
    return render_form(form, 'Thêm video', 'admin.videos')


@admin_bp.route('/videos/<int:id>/edit', methods=['GET', 'POST'])
def video_edit(id):
    video = db.get_or_404(Video, id)
    form = VideoForm(obj=video)
    if form.validate_on_submit():
        MediaService.save(video, form_to_dict(form))
        flash('Đã cập nhật video', 'success')
        return redirect(url_for('admin.videos'))
    return render_form(form, f'Sửa video #{video.id}', 'admin.videos')


@admin_bp.route('/videos/<int:id>/delete', methods=['POST'])
def video_delete(id):
    db.get_or_404(Video, id).delete()
    flash('Đã xóa video', 'success')
    return redirect(url_for('admin.videos'))


@admin_bp.route('/slides')
def slides():
    return render_template('admin/slides.html', slides=MediaService.ordered(Slide).all())


@admin_bp.route('/slides/new', methods=['GET', 'POST'])
def slide_create():
    form = SlideForm()
    if form.validate_on_submit():
        MediaService.save(Slide(), form_to_dict(form))
        flash('Đã tạo slide mới', 'success')
        return redirect(url_for('admin.slides'))
    return render_form(form, 'Thêm slide', 'admin.slides')


@admin_bp.route('/slides/<int:id>/edit', methods=['GET', 'POST'])
def slide_edit(id):
    slide = db.get_or_404(Slide, id)
    form = SlideForm(obj=slide)
    if form.validate_on_submit():
        MediaService.save(slide, form_to_dict(form))
        flash('Đã cập nhật slide', 'success')
        return redirect(url_for('admin.slides'))
    return render_form(form, f'Sửa slide #{slide.id}', 'admin.slides')


@admin_bp.route('/slides/<int:id>/toggle', methods=['POST'])
def slide_toggle(id):
    """Bật/tắt hiển thị slide"""
    slide = db.get_or_404(Slide, id)
    slide.is_active = not slide.is_active
    slide.save()
    return redirect(url_for('admin.slides'))


@admin_bp.route('/slides/<int:id>/delete', methods=['POST'])
def slide_delete(id):
    db.get_or_404(Slide, id).delete()
    flash('Đã xóa slide', 'success')
    return redirect(url_for('admin.slides'))


@admin_bp.route('/drawings')
def drawings():
    return render_template('admin/drawings.html', drawings=MediaService.ordered(Drawing).all())


@admin_bp.route('/drawings/new', methods=['GET', 'POST'])
@admin_page_required
def drawing_create():
    form = DrawingForm()
    if form.validate_on_submit():
        MediaService.save(Drawing(), form_to_dict(form))
        flash('Đã tạo bản vẽ', 'success')
        return redirect(url_for('admin.drawings'))
    return render_form(form, 'Thêm bản vẽ', 'admin.drawings')


@admin_bp.route('/drawings/<int:id>/edit', methods=['GET', 'POST'])
@admin_page_required
def drawing_edit(id):
    drawing = db.get_or_404(Drawing, id)
    form = DrawingForm(obj=drawing)
    if form.validate_on_submit():
        MediaService.save(drawing, form_to_dict(form))
        flash('Đã cập nhật bản vẽ', 'success')
        return redirect(url_for('admin.drawings'))
    return render_form(form, f'Sửa bản vẽ #{drawing.id}', 'admin.drawings')


@admin_bp.route('/drawings/<int:id>/delete', methods=['POST'])
@admin_page_required
def drawing_delete(id):
    db.get_or_404(Drawing, id).delete()
    flash('Đã xóa bản vẽ', 'success')
    return redirect(url_for('admin.drawings'))


# ---------- Ý kiến ----------

@admin_bp.route('/feedback')
def feedback():
    status = request.args.get('status', 'all')
    query = Feedback.query
    if status in FEEDBACK_STATUSES:
        query = query.filter_by(status=status)
    items = query.order_by(Feedback.created_at.desc()).all()
    counts = {s: Feedback.query.filter_by(status=s).count() for s in FEEDBACK_STATUSES}
    return render_template('admin/feedback.html', feedback_list=items,
                           current_status=status, statuses=FEEDBACK_STATUSES, counts=counts)


@admin_bp.route('/feedback/<int:id>', methods=['GET', 'POST'])
def feedback_reply(id):
    """Xem chi tiết và trả lời; chỉ admin được cập nhật"""
    item = db.get_or_404(Feedback, id)
    form = FeedbackReplyForm(obj=item)
    if request.method == 'POST':
        if not current_user.is_admin:
            flash('Chỉ quản trị viên được trả lời ý kiến', 'danger')
            return redirect(url_for('admin.feedback_reply', id=id))
        if form.validate_on_submit():
            FeedbackService.reply(item, form_to_dict(form), current_user)
            flash('Đã cập nhật ý kiến', 'success')
            return redirect(url_for('admin.feedback'))
    return render_template('admin/feedback_detail.html', feedback=item, form=form)


@admin_bp.route('/feedback/<int:id>/delete', methods=['POST'])
@admin_page_required
def feedback_delete(id):
    db.get_or_404(Feedback, id).delete()
    flash('Đã xóa ý kiến', 'success')
    return redirect(url_for('admin.feedback'))


# ---------- Người dùng (chỉ admin) ----------

@admin_bp.route('/users')
@admin_page_required
def users():
    items = User.query.order_by(User.created_at.desc()).all()
    return render_template('admin/users.html', users=items)


@admin_bp.route('/users/new', methods=['GET', 'POST'])
@admin_page_required
def user_create():
    form = UserForm()
    if form.validate_on_submit():
        try:
            UserService.create_user(form_to_dict(form))
        except ValidationError as e:
            flash(e.message, 'danger')
        else:
            flash('Đã tạo người dùng', 'success')
            return redirect(url_for('admin.users'))
    return render_form(form, 'Thêm người dùng', 'admin.users')


@admin_bp.route('/users/<int:id>/edit', methods=['GET', 'POST'])
@admin_page_required
def user_edit(id):
    user = db.get_or_404(User, id)
    form = UserForm(obj=user)
    if form.validate_on_submit():
        try:
            UserService.update_user(user, form_to_dict(form))
        except ValidationError as e:
            db.session.rollback()
            flash(e.message, 'danger')
        else:
            flash('Đã cập nhật người dùng', 'success')
            return redirect(url_for('admin.users'))
    return render_form(form, f'Sửa người dùng: {user.username}', 'admin.users',
                       readonly_fields=('username',))


@admin_bp.route('/users/<int:id>/delete', methods=['POST'])
@admin_page_required
def user_delete(id):
    user = db.get_or_404(User, id)
    try:
        UserService.delete_user(user, current_user)
    except ValidationError as e:
        flash(e.message, 'danger')
    else:
        flash('Đã xóa người dùng', 'success')
    return redirect(url_for('admin.users'))


# ---------- Cấu hình & giới thiệu ----------

@admin_bp.route('/settings', methods=['GET', 'POST'])
@admin_page_required
def settings():
    record = SiteService.get_settings()
    form = SettingsForm(obj=record)
    if form.validate_on_submit():
        SiteService.update_settings(record, form_to_dict(form))
        flash('Đã lưu cấu hình', 'success')
        return redirect(url_for('admin.settings'))
    return render_form(form, 'Cài đặt website', 'admin.dashboard')


@admin_bp.route('/about')
def about():
    items = About.query.order_by(About.created_at.desc(), About.id.desc()).all()
    return render_template('admin/about.html', items=items)


@admin_bp.route('/about/new', methods=['GET', 'POST'])
def about_create():
    form = AboutForm()
    if form.validate_on_submit():
        About(**form_to_dict(form)).save()
        flash('Đã tạo nội dung giới thiệu mới', 'success')
        return redirect(url_for('admin.about'))
    return render_form(form, 'Thêm nội dung giới thiệu', 'admin.about', rich_text=True)


@admin_bp.route('/about/<int:id>/edit', methods=['GET', 'POST'])
def about_edit(id):
    item = db.get_or_404(About, id)
    form = AboutForm(obj=item)
    if form.validate_on_submit():
        for field, value in form_to_dict(form).items():
            setattr(item, field, value)
        item.save()
        flash('Đã cập nhật nội dung giới thiệu', 'success')
        return redirect(url_for('admin.about'))
    return render_form(form, f'Sửa giới thiệu #{item.id}', 'admin.about', rich_text=True)


@admin_bp.route('/about/<int:id>/delete', methods=['POST'])
def about_delete(id):
    db.get_or_404(About, id).delete()
    flash('Đã xóa nội dung giới thiệu', 'success')
    return redirect(url_for('admin.about'))


@admin_bp.context_processor
def inject_status_labels():
    return {'status_labels': STATUS_LABELS}
