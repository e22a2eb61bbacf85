import unicodedata

from portal.models import Post
from portal.extensions import db
from portal.utils.text import (
    create_slug, unique_slug, truncate, calculate_read_time, get_youtube_id,
    format_number, format_date, strip_tags
)


def test_create_slug_folds_vietnamese_diacritics():
    assert create_slug('Quy hoạch Đô thị 2030!') == 'quy-hoach-do-thi-2030'
    assert create_slug('Hội nghị   triển khai -- Quy hoạch') == 'hoi-nghi-trien-khai-quy-hoach'
    assert create_slug('Phát triển bền vững') == 'phat-trien-ben-vung'


def test_create_slug_is_deterministic_for_decomposed_input():
    title = 'Thủ đô Hà Nội'
    decomposed = unicodedata.normalize('NFD', title)
    assert create_slug(decomposed) == create_slug(title) == 'thu-do-ha-noi'


def test_create_slug_empty():
    assert create_slug('') == ''
    assert create_slug(None) == ''
    assert create_slug('!!!') == ''


def test_unique_slug_appends_suffix(app):
    with app.app_context():
        db.session.add(Post(title='Tin mới', slug='tin-moi', content='x'))
        db.session.add(Post(title='Tin mới', slug='tin-moi-2', content='x'))
        db.session.commit()
        assert unique_slug(Post, 'Tin mới') == 'tin-moi-3'

        first = Post.query.filter_by(slug='tin-moi').one()
        assert unique_slug(Post, 'Tin mới', exclude_id=first.id) == 'tin-moi'


def test_truncate():
    assert truncate('ngắn', 10) == 'ngắn'
    assert truncate('a' * 20, 10) == 'a' * 10 + '...'
    assert truncate(None) == ''


def test_read_time():
    assert calculate_read_time('<p>một hai ba</p>') == 1
    assert calculate_read_time(' '.join(['từ'] * 1000)) == 5


def test_youtube_id():
    assert get_youtube_id('https://www.youtube.com/watch?v=dQw4w9WgXcQ') == 'dQw4w9WgXcQ'
    assert get_youtube_id('https://youtu.be/dQw4w9WgXcQ') == 'dQw4w9WgXcQ'
    assert get_youtube_id('https://www.youtube.com/embed/dQw4w9WgXcQ?autoplay=1') == 'dQw4w9WgXcQ'
    assert get_youtube_id('https://vimeo.com/123') is None
    assert get_youtube_id(None) is None


def test_format_helpers():
    from datetime import datetime
    assert format_number(1234567) == '1.234.567'
    assert format_number(None) == '0'
    assert format_date(datetime(2024, 3, 5)) == '05/03/2024'
    assert format_date('2024-03-05T10:00:00') == '05/03/2024'
    assert strip_tags('<p>Xin <b>chào</b></p>') == 'Xin chào'
