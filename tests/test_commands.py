from portal.extensions import db
from portal.models import User, Post, Project, Setting


def test_create_admin(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['create-admin', 'truongphong', 'truongphong@gmail.com',
                                 '--password', 'matkhau123'])
    assert result.exit_code == 0, result.output
    with app.app_context():
        user = User.query.filter_by(username='truongphong').one()
        assert user.is_admin
        assert user.verify_password('matkhau123')


def test_create_admin_duplicate(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['create-admin', 'admin', 'khac@gmail.com', '--password', 'matkhau123'])
    assert result.exit_code != 0
    assert 'Tên đăng nhập đã tồn tại' in result.output


def test_fix_published_at(app):
    with app.app_context():
        db.session.add(Post(title='A', slug='a', content='x', status='published'))
        db.session.add(Post(title='B', slug='b', content='x', status='draft'))
        db.session.add(Project(title='C', slug='c', status='published'))
        db.session.commit()

    result = app.test_cli_runner().invoke(args=['fix-published-at'])
    assert result.exit_code == 0
    assert 'Đã cập nhật 1 bài viết, 1 dự án' in result.output

    with app.app_context():
        post = Post.query.filter_by(slug='a').one()
        assert post.published_at == post.created_at
        assert Post.query.filter_by(slug='b').one().published_at is None


def test_forge_and_status(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['forge'])
    assert result.exit_code == 0, result.output
    with app.app_context():
        assert User.query.filter_by(username='admin').one().verify_password('admin123')
        assert User.query.filter_by(username='editor').one().role == 'editor'
        assert Post.query.count() == 30
        assert Setting.query.count() == 1

    result = runner.invoke(args=['status'])
    assert result.exit_code == 0
    assert 'Bài viết' in result.output
