from datetime import datetime, timedelta

from portal.extensions import db
from portal.models import Project


def create_project(client, **overrides):
    payload = {'title': 'Khu đô thị Thủ Thiêm', 'description': 'Mô tả', 'status': 'draft'}
    payload.update(overrides)
    return client.post('/api/projects', json=payload)


def test_create_requires_login(client):
    assert create_project(client).status_code == 401


def test_create_project(admin_client):
    resp = create_project(admin_client, pdf_file='/uploads/pdfs/a.pdf')
    assert resp.status_code == 201
    data = resp.get_json()['data']
    assert data['slug'] == 'khu-do-thi-thu-thiem'
    assert data['pdf_file'] == '/uploads/pdfs/a.pdf'
    assert data['published_at'] is None
    assert data['category'] is None


def test_published_at_is_stamped_once(admin_client):
    data = create_project(admin_client, status='published').get_json()['data']
    first = data['published_at']
    assert first is not None

    payload = {'title': 'Cảng Cần Giờ', 'status': 'draft'}
    updated = admin_client.put(f"/api/projects/{data['id']}", json=payload).get_json()['data']
    assert updated['status'] == 'draft'
    assert updated['published_at'] == first
    assert updated['slug'] == 'cang-can-gio'

    payload['status'] = 'published'
    republished = admin_client.put(f"/api/projects/{data['id']}", json=payload).get_json()['data']
    assert republished['published_at'] == first


def test_archived_is_not_a_project_status(admin_client):
    resp = create_project(admin_client, status='archived')
    assert resp.status_code == 400
    assert 'status' in resp.get_json()['errors']


def test_public_list_and_detail_only_show_published(client, admin_client):
    draft_id = create_project(admin_client, title='Dự án nháp').get_json()['data']['id']
    create_project(admin_client, title='Dự án công bố', status='published')

    public = client.get('/api/projects').get_json()['data']
    assert [p['title'] for p in public['projects']] == ['Dự án công bố']
    assert public['pagination']['total'] == 1

    assert client.get(f'/api/projects/{draft_id}').status_code == 404
    assert admin_client.get(f'/api/projects/{draft_id}').status_code == 200

    drafts = admin_client.get('/api/projects?status=draft').get_json()['data']
    assert [p['title'] for p in drafts['projects']] == ['Dự án nháp']


def test_future_published_at_hidden_from_list_and_detail(app, client, admin_client):
    data = create_project(admin_client, status='published').get_json()['data']
    with app.app_context():
        project = db.session.get(Project, data['id'])
        project.published_at = datetime.utcnow() + timedelta(days=1)
        db.session.commit()

    assert client.get('/api/projects').get_json()['data']['projects'] == []
    assert client.get(f"/api/projects/{data['id']}").status_code == 404
    assert client.get(f"/du-an/{data['slug']}").status_code == 404
    assert admin_client.get(f"/api/projects/{data['id']}").status_code == 200


def test_editor_can_delete_project(app, editor_client):
    project_id = create_project(editor_client).get_json()['data']['id']
    assert editor_client.delete(f'/api/projects/{project_id}').status_code == 200
    with app.app_context():
        assert db.session.get(Project, project_id) is None
    assert editor_client.delete(f'/api/projects/{project_id}').status_code == 404
