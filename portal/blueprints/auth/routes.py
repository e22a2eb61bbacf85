from flask import render_template, redirect, request, url_for, flash, current_app
from flask_login import login_user, logout_user, login_required, current_user
from urllib.parse import urlsplit

from portal.models.auth import User
from portal.blueprints.auth import auth_bp
from portal.blueprints.auth.forms import LoginForm

INVALID_CREDENTIALS = 'Tên đăng nhập hoặc mật khẩu không đúng.'


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    # Đã đăng nhập thì vào thẳng trang tổng quan
    if current_user.is_authenticated and current_user.can_access_cms:
        return redirect(url_for('admin.dashboard'))

    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(username=form.username.data.strip()).first()

        # 1. Sai tài khoản hoặc mật khẩu: cùng một thông báo
        if user is None or not user.verify_password(form.password.data):
            current_app.logger.warning(f'Đăng nhập thất bại: {form.username.data}')
            flash(INVALID_CREDENTIALS, 'danger')
            return render_template('auth/login.html', form=form), 401

        # 2. Tài khoản bị khóa hoặc không có quyền vào trang quản trị
        if not user.can_access_cms:
            current_app.logger.warning(f'Từ chối đăng nhập {user.username} ({user.role}/{user.status})')
            flash(INVALID_CREDENTIALS, 'danger')
            return render_template('auth/login.html', form=form), 401

        login_user(user, remember=form.remember_me.data)
        current_app.logger.info(f'{user.username} đăng nhập')

        # 3. Xử lý tham số next (chặn chuyển hướng ra ngoài)
        next_page = request.args.get('next')
        if not next_page or urlsplit(next_page).netloc != '':
            next_page = url_for('admin.dashboard')

        flash(f'Xin chào {user.display_name}.', 'success')
        return redirect(next_page)

    return render_template('auth/login.html', form=form)


@auth_bp.route('/logout', methods=['GET', 'POST'])
@login_required
def logout():
    current_app.logger.info(f'{current_user.username} đăng xuất')
    logout_user()
    flash('Bạn đã đăng xuất.', 'info')
    return redirect(url_for('auth.login'))
