import os
import logging
import colorlog
from flask import Flask, render_template, request, jsonify
from werkzeug.exceptions import HTTPException
from config import config
from portal.extensions import db, migrate, login_manager, cache, assets, csrf, register_assets
from portal.exceptions import PortalException

from portal import commands


def create_app(config_name='default'):
    """Hàm khởi tạo ứng dụng cổng thông tin"""
    app = Flask(__name__)

    # 1. Nạp cấu hình
    app.config.from_object(config[config_name])
    config[config_name].init_app(app)

    # 2. Khởi tạo extension
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    cache.init_app(app)
    assets.init_app(app)
    register_assets()
    csrf.init_app(app)

    # 3. Cấu hình log
    configure_logging(app)

    # 4. Đăng ký blueprint
    register_blueprints(app)

    # 5. Xử lý lỗi toàn cục
    register_error_handlers(app)

    # 6. Filter và biến dùng chung cho template
    register_template_helpers(app)

    # 7. Lệnh CLI
    register_commands(app)

    # 8. Production: tự tạo bảng và tài khoản admin lần đầu
    auto_init_database(app)

    return app


def auto_init_database(app):
    """Tạo bảng và tài khoản admin mặc định khi chạy production lần đầu"""
    if app.testing:
        return
    if os.environ.get('FLASK_ENV', '') != 'production' and not os.environ.get('DATABASE_URL'):
        return
    with app.app_context():
        from sqlalchemy import inspect
        from portal.models.auth import User, ROLE_ADMIN

        if 'users' not in inspect(db.engine).get_table_names():
            app.logger.info('Khởi động lần đầu, đang tạo bảng...')
            db.create_all()

        if User.query.filter_by(role=ROLE_ADMIN).count() == 0:
            password = os.environ.get('ADMIN_PASSWORD', 'admin123')
            admin = User(username='admin', email='admin@quyhoach.gov.vn',
                         full_name='Quản trị viên', role=ROLE_ADMIN, password=password)
            db.session.add(admin)
            db.session.commit()
            app.logger.info('Đã tạo tài khoản quản trị: admin')


def register_blueprints(app):
    """Đăng ký các blueprint"""
    # Trang công khai
    from portal.blueprints.main import main_bp
    app.register_blueprint(main_bp)

    # Đăng nhập / đăng xuất quản trị
    from portal.blueprints.auth import auth_bp
    app.register_blueprint(auth_bp, url_prefix='/admin')

    # Trang quản trị
    from portal.blueprints.admin import admin_bp
    app.register_blueprint(admin_bp, url_prefix='/admin')

    # REST API: client gửi JSON, không dùng CSRF token của form
    from portal.blueprints.api import api_bp
    csrf.exempt(api_bp)
    app.register_blueprint(api_bp, url_prefix='/api')


def wants_json():
    return request.path.startswith('/api/')


def register_error_handlers(app):
    @app.errorhandler(PortalException)
    def handle_portal_exception(e):
        if wants_json():
            return jsonify(e.to_dict()), e.code
        return render_error_page(e.code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if wants_json():
            return jsonify({'success': False, 'message': e.description or e.name}), e.code
        if e.code in (403, 404, 413):
            return render_error_page(e.code)
        return e

    @app.errorhandler(500)
    def internal_server_error(e):
        db.session.rollback()
        if wants_json():
            return jsonify({'success': False, 'message': 'Lỗi server'}), 500
        return render_template('errors/500.html'), 500


def render_error_page(code):
    template = f'errors/{code}.html' if code in (403, 404, 413) else 'errors/500.html'
    return render_template(template), code


def register_template_helpers(app):
    from portal.utils.text import register_template_filters
    from portal.utils.permissions import get_admin_menu_items

    register_template_filters(app)

    @app.context_processor
    def inject_admin_menu():
        return {'admin_menu_items': get_admin_menu_items}


def register_commands(app):
    """Đăng ký lệnh Flask CLI"""
    app.cli.add_command(commands.status)
    app.cli.add_command(commands.forge)
    app.cli.add_command(commands.create_admin)
    app.cli.add_command(commands.fix_published_at)


def configure_logging(app):
    """Log màu trên console khi phát triển, log thường ở production"""
    handler = logging.StreamHandler()
    if app.debug:
        handler.setLevel(logging.DEBUG)
        formatter = colorlog.ColoredFormatter(
            "%(log_color)s[%(asctime)s] %(levelname)-8s%(reset)s %(blue)s%(message)s",
            datefmt="%H:%M:%S",
            reset=True,
            log_colors={
                'DEBUG':    'cyan',
                'INFO':     'green',
                'WARNING':  'yellow',
                'ERROR':    'red',
                'CRITICAL': 'red,bg_white',
            },
            style='%'
        )
    elif app.testing:
        return
    else:
        handler.setLevel(logging.INFO)
        formatter = logging.Formatter("[%(asctime)s] %(levelname)s in %(module)s: %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.setLevel(handler.level)
