def test_missing_required_fields_are_reported_per_field(admin_client):
    resp = admin_client.post('/api/posts', json={})
    assert resp.status_code == 400
    body = resp.get_json()
    assert body['success'] is False
    assert body['message'] == 'Dữ liệu không hợp lệ'
    assert 'title' in body['errors']
    assert 'content' in body['errors']


def test_non_object_body_is_rejected(admin_client):
    resp = admin_client.post('/api/posts', data='không phải json', content_type='text/plain')
    assert resp.status_code == 400
    assert resp.get_json()['message'] == 'Body phải là JSON object'

    resp = admin_client.post('/api/posts', json=['a', 'b'])
    assert resp.status_code == 400


def test_invalid_status_choice(admin_client):
    resp = admin_client.post('/api/posts', json={'title': 'A', 'content': 'B', 'status': 'deleted'})
    assert resp.status_code == 400
    assert 'status' in resp.get_json()['errors']


def test_video_url_must_be_url(admin_client):
    resp = admin_client.post('/api/videos', json={'title': 'Video', 'video_url': 'not a url'})
    assert resp.status_code == 400
    assert 'video_url' in resp.get_json()['errors']


def test_unknown_api_route_is_json(client):
    resp = client.get('/api/khong-ton-tai')
    assert resp.status_code == 404
    assert resp.get_json()['success'] is False
