import pytest

from portal import create_app
from portal.extensions import db
from portal.models import User
from portal.models.auth import ROLE_ADMIN, ROLE_EDITOR, ROLE_USER


@pytest.fixture
def app(tmp_path):
    app = create_app('testing')
    app.config['UPLOAD_FOLDER'] = str(tmp_path)

    with app.app_context():
        db.create_all()
        db.session.add_all([
            User(username='admin', email='admin@quyhoach.gov.vn', password='admin123',
                 full_name='Quản trị viên', role=ROLE_ADMIN),
            User(username='editor', email='editor@quyhoach.gov.vn', password='editor123',
                 full_name='Biên tập viên', role=ROLE_EDITOR),
            User(username='citizen', email='citizen@gmail.com', password='citizen123',
                 role=ROLE_USER),
        ])
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username, password):
    return client.post('/admin/login', data={'username': username, 'password': password})


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    resp = login(client, 'admin', 'admin123')
    assert resp.status_code == 302
    return client


@pytest.fixture
def editor_client(app):
    client = app.test_client()
    resp = login(client, 'editor', 'editor123')
    assert resp.status_code == 302
    return client


@pytest.fixture
def user_id(app):
    """Tra id người dùng theo username"""
    def _lookup(username):
        with app.app_context():
            return User.query.filter_by(username=username).one().id
    return _lookup
