import os
from dotenv import load_dotenv

# Nạp biến môi trường từ .env
load_dotenv()
basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    """Cấu hình cơ sở"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'hard-to-guess-string'

    # Cơ sở dữ liệu
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_RECORD_QUERIES = True

    SITE_NAME = 'Cổng Thông Tin Quy Hoạch Quốc Gia'
    POSTS_PER_PAGE = int(os.environ.get('POSTS_PER_PAGE', 9))
    DRAWINGS_PER_PAGE = 12
    VIDEOS_PER_PAGE = 12
    ADMIN_PER_PAGE = 20

    # Upload: thư mục public, trần dung lượng theo loại file nằm ở utils/file_helper.py
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER') or \
        os.path.join(basedir, 'portal', 'static', 'uploads')
    # File DWG tối đa 50MB, cộng phần đệm của multipart
    MAX_CONTENT_LENGTH = 51 * 1024 * 1024

    # Cache (mặc định SimpleCache, production có thể đổi sang Redis)
    CACHE_TYPE = "SimpleCache"
    CACHE_DEFAULT_TIMEOUT = 300

    # Phiên đăng nhập quản trị
    REMEMBER_COOKIE_DURATION = 30 * 24 * 60 * 60

    @staticmethod
    def init_app(app):
        # Đảm bảo thư mục upload tồn tại
        upload_folder = app.config['UPLOAD_FOLDER']
        if not os.path.exists(upload_folder):
            os.makedirs(upload_folder)


class DevelopmentConfig(Config):
    """Môi trường phát triển"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'portal.db')

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)
        os.makedirs(os.path.join(basedir, 'instance'), exist_ok=True)


class ProductionConfig(Config):
    """Môi trường production"""
    DEBUG = False

    DATABASE_URL = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'portal_prod.db')
    # Một số nhà cung cấp vẫn trả về scheme postgres://
    if DATABASE_URL and DATABASE_URL.startswith('postgres://'):
        DATABASE_URL = DATABASE_URL.replace('postgres://', 'postgresql://', 1)

    SQLALCHEMY_DATABASE_URI = DATABASE_URL

    # Bảo mật cookie
    SESSION_COOKIE_SECURE = os.environ.get('SESSION_COOKIE_SECURE', 'false').lower() in ('1', 'true', 'yes')
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)
        if cls.DATABASE_URL.startswith('sqlite:'):
            os.makedirs(os.path.join(basedir, 'instance'), exist_ok=True)


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    CACHE_TYPE = "NullCache"
    ASSETS_DEBUG = True
    ASSETS_AUTO_BUILD = False


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
