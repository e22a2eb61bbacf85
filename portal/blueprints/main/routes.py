"""
Trang công khai: trang chủ, tin tức, dự án, bản vẽ, videos, ý kiến, giới thiệu
"""
from flask import render_template, request, flash, redirect, url_for, abort, current_app, send_from_directory

from portal.extensions import db
from portal.blueprints.main import main_bp
from portal.blueprints.main.forms import FeedbackForm
from portal.models import Post, Project, Video, Slide, Drawing
from portal.services.content_service import ContentService
from portal.services.feedback_service import FeedbackService
from portal.services.media_service import MediaService
from portal.services.site_service import SiteService
from portal.utils.validators import form_to_dict


@main_bp.route('/')
def index():
    """Trang chủ"""
    slides = MediaService.visible(Slide).limit(5).all()
    posts = ContentService.published_query(Post).order_by(Post.published_at.desc()).limit(9).all()
    projects = ContentService.published_query(Project).order_by(Project.published_at.desc()).limit(3).all()
    videos = MediaService.visible(Video).limit(3).all()

    return render_template('main/index.html',
                           slides=slides,
                           recent_posts=posts[:5],
                           news=posts[:4],
                           projects=projects,
                           videos=videos)


@main_bp.route('/tin-tuc')
def news():
    """Danh sách tin tức"""
    page = request.args.get('page', 1, type=int)
    pagination = ContentService.published_query(Post) \
        .order_by(Post.published_at.desc()) \
        .paginate(page=page, per_page=current_app.config['POSTS_PER_PAGE'], error_out=False)
    return render_template('main/news.html', pagination=pagination, posts=pagination.items)


@main_bp.route('/tin-tuc/<slug>')
def news_detail(slug):
    """Chi tiết bài viết, tăng lượt xem"""
    post = Post.query.filter_by(slug=slug).first()
    if post is None or not ContentService.is_public(post):
        abort(404)

    ContentService.increment_views(Post, post.id)
    db.session.refresh(post)

    related = ContentService.published_query(Post).filter(
        Post.category_id == post.category_id,
        Post.id != post.id
    ).order_by(Post.published_at.desc()).limit(2).all()

    return render_template('main/news_detail.html', post=post, related=related)


@main_bp.route('/du-an')
def projects():
    page = request.args.get('page', 1, type=int)
    pagination = ContentService.published_query(Project) \
        .order_by(Project.published_at.desc()) \
        .paginate(page=page, per_page=current_app.config['POSTS_PER_PAGE'], error_out=False)
    return render_template('main/projects.html', pagination=pagination, projects=pagination.items)


@main_bp.route('/du-an/<slug>')
def project_detail(slug):
    project = Project.query.filter_by(slug=slug).first()
    if project is None or not ContentService.is_public(project):
        abort(404)

    ContentService.increment_views(Project, project.id)
    db.session.refresh(project)

    related = ContentService.published_query(Project).filter(Project.id != project.id) \
        .order_by(Project.published_at.desc()).limit(3).all()
    return render_template('main/project_detail.html', project=project, related=related)


@main_bp.route('/ban-ve')
def drawings():
    """Danh sách bản vẽ, có tìm kiếm theo tiêu đề"""
    page = request.args.get('page', 1, type=int)
    search = request.args.get('search', '').strip()
    pagination = MediaService.search_drawings(search) \
        .paginate(page=page, per_page=current_app.config['DRAWINGS_PER_PAGE'], error_out=False)
    return render_template('main/drawings.html', pagination=pagination,
                           drawings=pagination.items, search=search)


@main_bp.route('/ban-ve/<int:id>')
def drawing_detail(id):
    drawing = db.session.get(Drawing, id)
    if drawing is None or drawing.status != 'active':
        abort(404)
    related = MediaService.visible(Drawing).filter(Drawing.id != drawing.id).limit(3).all()
    return render_template('main/drawing_detail.html', drawing=drawing, related=related)


@main_bp.route('/videos')
def videos():
    page = request.args.get('page', 1, type=int)
    pagination = MediaService.visible(Video) \
        .paginate(page=page, per_page=current_app.config['VIDEOS_PER_PAGE'], error_out=False)
    return render_template('main/videos.html', pagination=pagination, videos=pagination.items)


@main_bp.route('/y-kien', methods=['GET', 'POST'])
def feedback():
    """Gửi ý kiến - kiến nghị và xem các ý kiến đã được trả lời"""
    form = FeedbackForm()
    if form.validate_on_submit():
        FeedbackService.submit(form_to_dict(form))
        flash('Cảm ơn bạn đã gửi ý kiến. Chúng tôi sẽ phản hồi sớm nhất.', 'success')
        return redirect(url_for('main.feedback'))

    return render_template('main/feedback.html', form=form,
                           feedback_list=FeedbackService.answered(limit=10))


@main_bp.route('/gioi-thieu')
def about():
    return render_template('main/about.html', about=SiteService.get_about())


@main_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    """Phục vụ file đã upload"""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)


@main_bp.app_context_processor
def inject_site_settings():
    """Đưa cấu hình website vào mọi template"""
    return {'site': SiteService.get_settings_dict()}
