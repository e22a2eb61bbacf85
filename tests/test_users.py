from portal.extensions import db
from portal.models import User, Post, Feedback


def test_editor_cannot_manage_users(editor_client):
    assert editor_client.get('/api/users').status_code == 403
    resp = editor_client.post('/api/users', json={'username': 'x', 'email': 'x@gmail.com'})
    assert resp.status_code == 403
    assert resp.get_json()['success'] is False


def test_list_users_hides_password(admin_client):
    users = admin_client.get('/api/users').get_json()['data']
    assert {u['username'] for u in users} == {'admin', 'editor', 'citizen'}
    assert all('password_hash' not in u for u in users)


def test_create_user(app, admin_client):
    resp = admin_client.post('/api/users', json={
        'username': 'bientap2',
        'email': 'bientap2@gmail.com',
        'password': 'matkhau123',
        'full_name': 'Trần Thị Bình',
        'role': 'editor',
    })
    assert resp.status_code == 201
    data = resp.get_json()['data']
    assert data['role'] == 'editor'
    assert data['status'] == 'active'
    with app.app_context():
        assert User.query.filter_by(username='bientap2').one().verify_password('matkhau123')


def test_create_user_requires_password(admin_client):
    resp = admin_client.post('/api/users', json={'username': 'nopass', 'email': 'nopass@gmail.com'})
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Mật khẩu không được để trống'


def test_duplicate_username_and_email(admin_client):
    resp = admin_client.post('/api/users', json={
        'username': 'editor', 'email': 'moi@gmail.com', 'password': 'matkhau123'})
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Tên đăng nhập đã tồn tại'

    resp = admin_client.post('/api/users', json={
        'username': 'moi', 'email': 'editor@quyhoach.gov.vn', 'password': 'matkhau123'})
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Email đã tồn tại'


def test_update_keeps_password_when_blank(app, admin_client, user_id):
    editor_id = user_id('editor')
    resp = admin_client.put(f'/api/users/{editor_id}', json={
        'username': 'editor', 'email': 'editor.moi@gmail.com', 'role': 'editor', 'status': 'active'})
    assert resp.status_code == 200
    with app.app_context():
        editor = db.session.get(User, editor_id)
        assert editor.email == 'editor.moi@gmail.com'
        assert editor.verify_password('editor123')


def test_cannot_delete_self(admin_client, user_id):
    resp = admin_client.delete(f"/api/users/{user_id('admin')}")
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Không thể xóa tài khoản của chính mình'


def test_delete_user_detaches_content(app, admin_client, editor_client, user_id):
    editor_id = user_id('editor')
    post_id = editor_client.post('/api/posts', json={'title': 'Bài của editor', 'content': 'x'}) \
        .get_json()['data']['id']
    with app.app_context():
        db.session.add(Feedback(name='A', email='a@gmail.com', subject='S', message='M',
                                admin_reply='R', status='answered', replied_by=editor_id))
        db.session.commit()

    assert admin_client.delete(f'/api/users/{editor_id}').status_code == 200
    with app.app_context():
        assert db.session.get(User, editor_id) is None
        assert db.session.get(Post, post_id).author_id is None
        assert Feedback.query.one().replied_by is None


def test_inactive_or_plain_users_cannot_log_in(app, client):
    resp = client.post('/admin/login', data={'username': 'citizen', 'password': 'citizen123'})
    assert resp.status_code == 401

    with app.app_context():
        editor = User.query.filter_by(username='editor').one()
        editor.status = 'inactive'
        db.session.commit()
    resp = client.post('/admin/login', data={'username': 'editor', 'password': 'editor123'})
    assert resp.status_code == 401


def test_wrong_password(client):
    resp = client.post('/admin/login', data={'username': 'admin', 'password': 'sai'})
    assert resp.status_code == 401
    assert 'Tên đăng nhập hoặc mật khẩu không đúng.' in resp.get_data(as_text=True)


def test_logout(admin_client):
    assert admin_client.get('/admin/logout').status_code == 302
    assert admin_client.post('/api/posts', json={'title': 'A', 'content': 'B'}).status_code == 401
