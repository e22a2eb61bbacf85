from datetime import datetime, timedelta

from portal.extensions import db
from portal.models import Post, Category


def create_post(client, **overrides):
    payload = {'title': 'Quy hoạch Đô thị 2030', 'content': '<p>Nội dung</p>', 'status': 'draft'}
    payload.update(overrides)
    return client.post('/api/posts', json=payload)


def test_create_requires_login(client):
    resp = create_post(client)
    assert resp.status_code == 401
    assert resp.get_json() == {'success': False, 'message': 'Unauthorized'}


def test_create_post_generates_slug_and_author(admin_client, user_id):
    resp = create_post(admin_client)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body['success'] is True
    data = body['data']
    assert data['slug'] == 'quy-hoach-do-thi-2030'
    assert data['views'] == 0
    assert data['published_at'] is None
    assert data['author']['id'] == user_id('admin')


def test_duplicate_title_gets_suffix(admin_client):
    create_post(admin_client)
    resp = create_post(admin_client)
    assert resp.get_json()['data']['slug'] == 'quy-hoach-do-thi-2030-2'


def test_published_at_is_stamped_once(admin_client):
    data = create_post(admin_client, status='published').get_json()['data']
    first = data['published_at']
    assert first is not None

    payload = {'title': 'Tiêu đề mới', 'content': '<p>Sửa</p>', 'status': 'draft'}
    resp = admin_client.put(f"/api/posts/{data['id']}", json=payload)
    assert resp.status_code == 200
    updated = resp.get_json()['data']
    assert updated['status'] == 'draft'
    assert updated['published_at'] == first
    # Slug được tạo lại theo tiêu đề mới
    assert updated['slug'] == 'tieu-de-moi'

    payload['status'] = 'published'
    republished = admin_client.put(f"/api/posts/{data['id']}", json=payload).get_json()['data']
    assert republished['published_at'] == first


def test_public_list_only_shows_published(client, admin_client):
    create_post(admin_client, title='Bài nháp')
    create_post(admin_client, title='Bài đã đăng', status='published')

    public = client.get('/api/posts').get_json()['data']
    assert [p['title'] for p in public['posts']] == ['Bài đã đăng']
    assert public['pagination'] == {'page': 1, 'limit': 20, 'total': 1, 'totalPages': 1}

    everything = admin_client.get('/api/posts').get_json()['data']
    assert everything['pagination']['total'] == 2

    drafts = admin_client.get('/api/posts?status=draft').get_json()['data']
    assert [p['title'] for p in drafts['posts']] == ['Bài nháp']


def test_draft_hidden_from_public_detail(client, admin_client):
    post_id = create_post(admin_client).get_json()['data']['id']
    assert client.get(f'/api/posts/{post_id}').status_code == 404
    assert admin_client.get(f'/api/posts/{post_id}').status_code == 200


def test_missing_post_returns_json_404(admin_client):
    resp = admin_client.get('/api/posts/9999')
    assert resp.status_code == 404
    assert resp.get_json()['success'] is False


def test_editor_can_manage_posts(editor_client):
    resp = create_post(editor_client)
    assert resp.status_code == 201
    post_id = resp.get_json()['data']['id']
    assert editor_client.delete(f'/api/posts/{post_id}').status_code == 200


def test_post_with_category(app, admin_client):
    with app.app_context():
        category = Category(name='Tin tức', slug='tin-tuc')
        db.session.add(category)
        db.session.commit()
        category_id = category.id

    data = create_post(admin_client, category_id=category_id).get_json()['data']
    assert data['category'] == {'id': category_id, 'name': 'Tin tức'}


def test_view_counter_increments(app, client, admin_client):
    slug = create_post(admin_client, status='published').get_json()['data']['slug']
    for _ in range(3):
        assert client.get(f'/tin-tuc/{slug}').status_code == 200
    with app.app_context():
        assert Post.query.filter_by(slug=slug).one().views == 3


def test_delete_post(app, admin_client):
    post_id = create_post(admin_client).get_json()['data']['id']
    resp = admin_client.delete(f'/api/posts/{post_id}')
    assert resp.status_code == 200
    with app.app_context():
        assert db.session.get(Post, post_id) is None


def test_scheduled_post_hidden_until_published_at(app, client, admin_client):
    data = create_post(admin_client, status='published').get_json()['data']
    with app.app_context():
        post = db.session.get(Post, data['id'])
        post.published_at = datetime.utcnow() + timedelta(hours=2)
        db.session.commit()

    assert client.get('/api/posts').get_json()['data']['posts'] == []
    assert client.get(f"/api/posts/{data['id']}").status_code == 404
    assert client.get(f"/tin-tuc/{data['slug']}").status_code == 404
    assert admin_client.get(f"/api/posts/{data['id']}").status_code == 200
