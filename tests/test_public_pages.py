import pytest

from portal.extensions import db
from portal.models import Post, Project, Drawing, Video, Slide


@pytest.fixture
def content(app):
    from datetime import datetime
    with app.app_context():
        now = datetime.utcnow()
        db.session.add_all([
            Post(title='Tin công khai', slug='tin-cong-khai', content='<p>Xin chào</p>',
                 status='published', published_at=now),
            Post(title='Tin nháp', slug='tin-nhap', content='<p>Nháp</p>'),
            Project(title='Dự án vùng', slug='du-an-vung', status='published', published_at=now,
                    pdf_file='/uploads/pdfs/a.pdf'),
            Drawing(title='Mặt bằng tổng thể', dwg_file='/uploads/dwg/a.dwg', icon='📐'),
            Drawing(title='Bản vẽ ẩn', dwg_file='/uploads/dwg/b.dwg', status='inactive'),
            Video(title='Video giới thiệu', video_url='https://youtu.be/dQw4w9WgXcQ'),
            Slide(title='Slide chính', image_url='/uploads/slides/a.jpg'),
        ])
        db.session.commit()
        return {d.title: d.id for d in Drawing.query.all()}


@pytest.mark.parametrize('url', ['/', '/tin-tuc', '/du-an', '/ban-ve', '/videos', '/y-kien', '/gioi-thieu'])
def test_pages_render(client, content, url):
    assert client.get(url).status_code == 200


def test_home_shows_published_content(client, content):
    html = client.get('/').get_data(as_text=True)
    assert 'Tin công khai' in html
    assert 'Tin nháp' not in html
    assert 'Dự án vùng' in html
    assert 'Slide chính' in html
    assert 'youtube.com/embed/dQw4w9WgXcQ' in html


def test_detail_pages(client, content):
    assert client.get('/tin-tuc/tin-cong-khai').status_code == 200
    assert client.get('/tin-tuc/tin-nhap').status_code == 404
    project = client.get('/du-an/du-an-vung')
    assert project.status_code == 200
    assert '/uploads/pdfs/a.pdf' in project.get_data(as_text=True)


def test_drawings_search_and_visibility(client, content):
    html = client.get('/ban-ve', query_string={'search': 'tổng'}).get_data(as_text=True)
    assert 'Mặt bằng tổng thể' in html
    assert 'Bản vẽ ẩn' not in html
    assert client.get(f"/ban-ve/{content['Mặt bằng tổng thể']}").status_code == 200
    assert client.get(f"/ban-ve/{content['Bản vẽ ẩn']}").status_code == 404


def test_public_api_hides_inactive_drawings(client, admin_client, content):
    public = client.get('/api/drawings').get_json()['data']
    assert [d['title'] for d in public['drawings']] == ['Mặt bằng tổng thể']
    assert admin_client.get('/api/drawings').get_json()['data']['pagination']['total'] == 2


def test_not_found_page(client):
    resp = client.get('/khong-co-trang-nay')
    assert resp.status_code == 404
    assert 'Không tìm thấy trang' in resp.get_data(as_text=True)
