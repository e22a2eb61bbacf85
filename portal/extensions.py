from flask import request, jsonify, redirect, url_for, flash
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_login import LoginManager
from flask_caching import Cache
from flask_assets import Environment, Bundle
from flask_wtf.csrf import CSRFProtect

# Khởi tạo extension (chưa gắn app)
db = SQLAlchemy()
migrate = Migrate()
cache = Cache()
assets = Environment()
login_manager = LoginManager()
csrf = CSRFProtect()

# Cấu hình LoginManager
login_manager.login_view = 'auth.login'  # trang đăng nhập quản trị
login_manager.login_message = 'Vui lòng đăng nhập để truy cập trang quản trị.'
login_manager.login_message_category = 'warning'
login_manager.session_protection = 'strong'

# Bundle CSS/JS dùng chung cho trang công khai và trang quản trị
css_site = Bundle('css/site.css', output='gen/site.css')
css_admin = Bundle('css/site.css', 'css/admin.css', output='gen/admin.css')
js_admin = Bundle('js/admin.js', output='gen/admin.js')


def register_assets():
    assets.register('css_site', css_site)
    assets.register('css_admin', css_admin)
    assets.register('js_admin', js_admin)


@login_manager.user_loader
def load_user(user_id):
    """Callback nạp người dùng cho Flask-Login"""
    from portal.models import User
    return db.session.get(User, int(user_id))


@login_manager.unauthorized_handler
def unauthorized():
    """API trả JSON 401, trang quản trị chuyển về màn hình đăng nhập"""
    if request.path.startswith('/api/'):
        return jsonify({'success': False, 'message': 'Unauthorized'}), 401
    flash(login_manager.login_message, login_manager.login_message_category)
    return redirect(url_for('auth.login', next=request.full_path))
