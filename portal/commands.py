import click
import random
from datetime import datetime, timedelta
from flask.cli import with_appcontext
from portal.extensions import db
from portal.models import (
    User, Category, Post, Project, Video, Slide, Drawing, Feedback, Setting, About
)
from portal.models.auth import ROLE_ADMIN, ROLE_EDITOR
from portal.models.content import STATUS_DRAFT, STATUS_PUBLISHED, STATUS_ARCHIVED
from portal.models.feedback import STATUS_PENDING, STATUS_ANSWERED
from portal.models.site import DEFAULT_SETTINGS
from portal.services.content_service import ContentService
from portal.services.user_service import UserService
from portal.exceptions import ValidationError
from portal.utils.text import create_slug
from portal.utils.fake_gen import fake


@click.command('status')
@with_appcontext
def status():
    """Thống kê số bản ghi trong cơ sở dữ liệu"""
    click.echo(click.style('Trạng thái cơ sở dữ liệu:', fg='cyan', bold=True))

    tables = [
        ('Người dùng', User), ('Danh mục', Category), ('Bài viết', Post),
        ('Dự án', Project), ('Videos', Video), ('Slides', Slide),
        ('Bản vẽ', Drawing), ('Ý kiến', Feedback),
    ]
    for label, model in tables:
        click.echo(f" - {label}: \t{model.query.count()}")

    if User.query.count() > 0:
        click.echo(click.style('Kết nối bình thường, đã có dữ liệu.', fg='green'))
    else:
        click.echo(click.style('Cơ sở dữ liệu trống, chạy flask forge để tạo dữ liệu mẫu.', fg='yellow'))


@click.command('forge')
@click.option('--scale', default=1, help='Hệ số nhân khối lượng dữ liệu (mặc định 1)')
@with_appcontext
def forge(scale):
    """
    Xóa toàn bộ bảng và tạo dữ liệu mẫu.
    Cảnh báo: dữ liệu hiện có sẽ mất!
    """
    click.echo(click.style(f'Khởi tạo dữ liệu mẫu (hệ số {scale})...', fg='cyan', bold=True))

    db.drop_all()
    db.create_all()

    click.echo('Tạo tài khoản...')
    admin, editor = init_users()

    click.echo('Tạo danh mục, bài viết, dự án...')
    init_content(admin, editor, scale)

    click.echo('Tạo videos, slides, bản vẽ...')
    init_media(scale)

    click.echo('Tạo ý kiến người dân...')
    init_feedback(admin, scale)

    click.echo('Tạo cấu hình và trang giới thiệu...')
    init_site()

    click.echo(click.style('Hoàn tất!', fg='green', bold=True))
    click.echo('Tài khoản quản trị: admin / admin123, biên tập viên: editor / editor123')


def init_users():
    admin = User(username='admin', email='admin@quyhoach.gov.vn', password='admin123',
                 full_name='Quản trị viên', role=ROLE_ADMIN)
    editor = User(username='editor', email='editor@quyhoach.gov.vn', password='editor123',
                  full_name=fake.name(), role=ROLE_EDITOR)
    db.session.add_all([admin, editor])
    db.session.commit()
    return admin, editor


def init_content(admin, editor, scale=1):
    parents = []
    for name in ['Tin tức', 'Quy hoạch quốc gia', 'Quy hoạch vùng', 'Quy hoạch tỉnh']:
        c = Category(name=name, slug=create_slug(name), display_order=len(parents))
        db.session.add(c)
        parents.append(c)
    db.session.commit()

    for name, parent in [('Thông báo', parents[0]), ('Sự kiện', parents[0])]:
        db.session.add(Category(name=name, slug=create_slug(name), parent_id=parent.id))
    db.session.commit()
    categories = Category.query.all()

    for i in range(30 * scale):
        data = {
            'title': f'{fake.news_title()} ({i + 1})',
            'content': ''.join(f'<p>{p}</p>' for p in fake.paragraphs(nb=5)),
            'excerpt': fake.sentence(nb_words=20),
            'category_id': random.choice(categories).id,
            'status': random.choice([STATUS_PUBLISHED] * 4 + [STATUS_DRAFT, STATUS_ARCHIVED]),
        }
        post = ContentService.create_post(data, random.choice([admin, editor]))
        post.views = random.randint(0, 2000)
        if post.published_at:
            post.published_at = datetime.utcnow() - timedelta(days=random.randint(1, 365))

    for i in range(8 * scale):
        data = {
            'title': f'{fake.project_title()} ({i + 1})',
            'description': fake.sentence(nb_words=25),
            'content': ''.join(f'<p>{p}</p>' for p in fake.paragraphs(nb=4)),
            'category_id': random.choice(parents[1:]).id,
            'status': random.choice([STATUS_PUBLISHED] * 3 + [STATUS_DRAFT]),
        }
        project = ContentService.create_project(data)
        project.views = random.randint(0, 800)
    db.session.commit()


def init_media(scale=1):
    for i in range(6 * scale):
        db.session.add(Video(
            title=fake.news_title(),
            description=fake.sentence(nb_words=15),
            video_url=fake.youtube_url(),
            duration=f'{random.randint(2, 40)}:{random.randint(0, 59):02d}',
            display_order=i,
            status=random.choice(['active', 'active', 'inactive'])
        ))

    for i in range(3):
        db.session.add(Slide(
            title=fake.project_title(),
            description=fake.sentence(nb_words=12),
            image_url=f'https://picsum.photos/seed/slide{i}/1600/600',
            display_order=i,
            is_active=True
        ))

    for i in range(12 * scale):
        db.session.add(Drawing(
            title=fake.drawing_title(),
            dwg_file=f'/uploads/dwg/mau-{i + 1}.dwg',
            icon=random.choice(['📐', '🗺️', '🏙️']),
            display_order=i
        ))
    db.session.commit()


def init_feedback(admin, scale=1):
    for _ in range(15 * scale):
        item = Feedback(
            name=fake.name(),
            email=fake.free_email(),
            phone=fake.phone_number(),
            subject=f'Kiến nghị về {fake.news_title().lower()}',
            message=fake.paragraph(nb_sentences=4),
            status=STATUS_PENDING
        )
        if random.random() < 0.5:
            item.admin_reply = fake.paragraph(nb_sentences=3)
            item.status = STATUS_ANSWERED
            item.replied_at = datetime.utcnow() - timedelta(days=random.randint(0, 30))
            item.replied_by = admin.id
        db.session.add(item)
    db.session.commit()


def init_site():
    db.session.add(Setting(contact_address=fake.address(), **DEFAULT_SETTINGS))
    db.session.add(About(content=''.join(f'<p>{p}</p>' for p in fake.paragraphs(nb=6))))
    db.session.commit()


@click.command('create-admin')
@click.argument('username')
@click.argument('email')
@click.password_option('--password', help='Mật khẩu tài khoản quản trị')
@with_appcontext
def create_admin(username, email, password):
    """Tạo tài khoản quản trị mới"""
    try:
        user = UserService.create_user({
            'username': username,
            'email': email,
            'password': password,
            'role': ROLE_ADMIN,
        })
    except ValidationError as e:
        raise click.ClickException(e.message)
    click.echo(click.style(f'Đã tạo tài khoản quản trị {user.username}', fg='green'))


@click.command('fix-published-at')
@with_appcontext
def fix_published_at():
    """Bổ sung published_at cho bài viết/dự án đã xuất bản nhưng còn trống"""
    posts_fixed, projects_fixed = ContentService.backfill_published_at()
    click.echo(f'Đã cập nhật {posts_fixed} bài viết, {projects_fixed} dự án')
