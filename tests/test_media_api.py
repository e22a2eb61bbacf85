def create_video(client, **overrides):
    payload = {'title': 'Giới thiệu quy hoạch', 'video_url': 'https://www.youtube.com/watch?v=dQw4w9WgXcQ'}
    payload.update(overrides)
    return client.post('/api/videos', json=payload)


def create_slide(client, **overrides):
    payload = {'image_url': '/uploads/slides/a.png'}
    payload.update(overrides)
    return client.post('/api/slides', json=payload)


def create_drawing(client, **overrides):
    payload = {'title': 'Mặt bằng tổng thể', 'dwg_file': '/uploads/dwg/a.dwg'}
    payload.update(overrides)
    return client.post('/api/drawings', json=payload)


def test_video_crud(admin_client):
    resp = create_video(admin_client, duration='12:30')
    assert resp.status_code == 201
    video = resp.get_json()['data']
    assert video['status'] == 'active'
    assert video['display_order'] == 0
    assert video['duration'] == '12:30'

    resp = admin_client.put(f"/api/videos/{video['id']}", json={
        'title': 'Tên mới', 'video_url': video['video_url'], 'status': 'inactive'
    })
    assert resp.status_code == 200
    assert resp.get_json()['data']['title'] == 'Tên mới'

    assert admin_client.delete(f"/api/videos/{video['id']}").status_code == 200
    assert admin_client.get(f"/api/videos/{video['id']}").status_code == 404


def test_videos_ordered_and_inactive_hidden(client, editor_client):
    create_video(editor_client, title='Thứ hai', display_order=2)
    create_video(editor_client, title='Thứ nhất', display_order=1)
    hidden_id = create_video(editor_client, title='Ẩn', status='inactive').get_json()['data']['id']

    public = client.get('/api/videos').get_json()['data']
    assert [v['title'] for v in public] == ['Thứ nhất', 'Thứ hai']
    assert client.get(f'/api/videos/{hidden_id}').status_code == 404

    everything = editor_client.get('/api/videos').get_json()['data']
    assert [v['title'] for v in everything] == ['Ẩn', 'Thứ nhất', 'Thứ hai']

    inactive = editor_client.get('/api/videos?status=inactive').get_json()['data']
    assert [v['title'] for v in inactive] == ['Ẩn']


def test_video_mutations_require_login(client):
    assert create_video(client).status_code == 401


def test_slide_crud(admin_client):
    resp = create_slide(admin_client, title='Banner')
    assert resp.status_code == 201
    slide = resp.get_json()['data']
    assert slide['is_active'] is True

    resp = admin_client.put(f"/api/slides/{slide['id']}", json={
        'image_url': slide['image_url'], 'is_active': False
    })
    assert resp.status_code == 200
    assert resp.get_json()['data']['is_active'] is False

    assert admin_client.delete(f"/api/slides/{slide['id']}").status_code == 200
    assert admin_client.get(f"/api/slides/{slide['id']}").status_code == 404


def test_slide_requires_image(admin_client):
    resp = admin_client.post('/api/slides', json={'title': 'Không ảnh'})
    assert resp.status_code == 400
    assert 'image_url' in resp.get_json()['errors']


def test_slides_ordered_and_inactive_hidden(client, admin_client):
    create_slide(admin_client, title='Sau', display_order=5)
    create_slide(admin_client, title='Trước', display_order=1)
    hidden_id = create_slide(admin_client, title='Ẩn', is_active=False).get_json()['data']['id']

    public = client.get('/api/slides').get_json()['data']
    assert [s['title'] for s in public] == ['Trước', 'Sau']
    assert client.get(f'/api/slides/{hidden_id}').status_code == 404

    inactive = admin_client.get('/api/slides?active=false').get_json()['data']
    assert [s['title'] for s in inactive] == ['Ẩn']
    assert len(admin_client.get('/api/slides').get_json()['data']) == 3


def test_drawing_mutations_are_admin_only(client, admin_client, editor_client):
    assert create_drawing(client).status_code == 401
    assert create_drawing(editor_client).status_code == 403

    resp = create_drawing(admin_client, icon='📐')
    assert resp.status_code == 201
    drawing_id = resp.get_json()['data']['id']

    payload = {'title': 'Sửa', 'dwg_file': '/uploads/dwg/b.dwg'}
    assert editor_client.put(f'/api/drawings/{drawing_id}', json=payload).status_code == 403
    assert editor_client.delete(f'/api/drawings/{drawing_id}').status_code == 403

    assert admin_client.put(f'/api/drawings/{drawing_id}', json=payload).status_code == 200
    assert admin_client.delete(f'/api/drawings/{drawing_id}').status_code == 200


def test_drawings_search_and_visibility(client, admin_client):
    create_drawing(admin_client, title='Bản đồ giao thông')
    create_drawing(admin_client, title='Bản đồ sử dụng đất')
    create_drawing(admin_client, title='Bản đồ ẩn', status='inactive')

    public = client.get('/api/drawings').get_json()['data']
    assert public['pagination']['total'] == 2
    assert public['pagination']['limit'] == 10

    found = client.get('/api/drawings', query_string={'search': 'giao thông'}).get_json()['data']
    assert [d['title'] for d in found['drawings']] == ['Bản đồ giao thông']

    everything = admin_client.get('/api/drawings').get_json()['data']
    assert everything['pagination']['total'] == 3
