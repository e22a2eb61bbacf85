from sqlalchemy import func
from portal.extensions import db, cache
from portal.models import User, Category, Post, Project, Video, Slide, Feedback, Setting, About
from portal.models.site import DEFAULT_SETTINGS

SETTING_FIELDS = (
    'site_name', 'site_logo', 'site_favicon', 'footer_about', 'contact_email',
    'contact_phone', 'contact_address', 'facebook_url', 'youtube_url', 'footer_copyright',
)


class SiteService:
    @staticmethod
    def get_settings() -> Setting:
        """Bản ghi cấu hình duy nhất: lấy dòng đầu tiên, chưa có thì tạo mặc định"""
        settings = Setting.query.order_by(Setting.id).first()
        if settings is None:
            settings = Setting(**DEFAULT_SETTINGS)
            db.session.add(settings)
            db.session.commit()
        return settings

    @staticmethod
    @cache.memoize(timeout=300)
    def get_settings_dict() -> dict:
        """Bản dict của cấu hình cho layout, có cache"""
        return SiteService.get_settings().to_dict()

    @staticmethod
    def update_settings(settings: Setting, data: dict) -> Setting:
        for field in SETTING_FIELDS:
            if field in data:
                setattr(settings, field, data[field])
        db.session.commit()
        cache.delete_memoized(SiteService.get_settings_dict)
        return settings

    @staticmethod
    def get_about():
        """Nội dung giới thiệu mới nhất"""
        return About.query.order_by(About.created_at.desc(), About.id.desc()).first()

    @staticmethod
    def dashboard_stats() -> dict:
        """Số liệu tổng quan cho trang quản trị"""
        return {
            'posts': Post.query.count(),
            'published_posts': Post.query.filter_by(status='published').count(),
            'draft_posts': Post.query.filter_by(status='draft').count(),
            'projects': Project.query.count(),
            'published_projects': Project.query.filter_by(status='published').count(),
            'videos': Video.query.count(),
            'active_videos': Video.query.filter_by(status='active').count(),
            'feedback': Feedback.query.count(),
            'pending_feedback': Feedback.query.filter_by(status='pending').count(),
            'users': User.query.count(),
            'categories': Category.query.count(),
            'slides': Slide.query.count(),
            'active_slides': Slide.query.filter_by(is_active=True).count(),
            'post_views': db.session.query(func.sum(Post.views)).scalar() or 0,
            'project_views': db.session.query(func.sum(Project.views)).scalar() or 0,
        }
