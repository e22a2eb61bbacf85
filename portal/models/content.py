from portal.extensions import db
from .base import BaseModel

STATUS_DRAFT = 'draft'
STATUS_PUBLISHED = 'published'
STATUS_ARCHIVED = 'archived'

POST_STATUSES = (STATUS_DRAFT, STATUS_PUBLISHED, STATUS_ARCHIVED)
PROJECT_STATUSES = (STATUS_DRAFT, STATUS_PUBLISHED)


class Category(BaseModel):
    """Danh mục (cây một cấp cha)"""
    __tablename__ = 'categories'

    name = db.Column(db.String(100), nullable=False)
    slug = db.Column(db.String(120), unique=True, nullable=False, index=True)
    description = db.Column(db.Text)
    display_order = db.Column(db.Integer, default=0, nullable=False)

    # Tự tham chiếu: danh mục cha
    parent_id = db.Column(db.Integer, db.ForeignKey('categories.id', ondelete='SET NULL'), nullable=True)
    children = db.relationship('Category', backref=db.backref('parent', remote_side='Category.id'))

    posts = db.relationship('Post', backref='category', lazy='dynamic')
    projects = db.relationship('Project', backref='category', lazy='dynamic')

    def to_dict(self, with_counts=False):
        data = super().to_dict()
        data['parent'] = {'id': self.parent.id, 'name': self.parent.name} if self.parent else None
        if with_counts:
            data['_count'] = {
                'posts': self.posts.count(),
                'projects': self.projects.count(),
            }
        return data

    def __repr__(self):
        return f'<Category {self.slug}>'


class Post(BaseModel):
    """Bài viết tin tức"""
    __tablename__ = 'posts'

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(280), unique=True, nullable=False, index=True)
    content = db.Column(db.Text, nullable=False)  # HTML từ trình soạn thảo
    excerpt = db.Column(db.String(500))
    cover_image = db.Column(db.String(255))
    status = db.Column(db.String(20), default=STATUS_DRAFT, nullable=False, index=True)
    views = db.Column(db.Integer, default=0, nullable=False)
    published_at = db.Column(db.DateTime, index=True)

    category_id = db.Column(db.Integer, db.ForeignKey('categories.id', ondelete='SET NULL'))
    author_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'))

    def to_dict(self):
        data = super().to_dict()
        data['author'] = {
            'id': self.author.id,
            'username': self.author.username,
            'full_name': self.author.full_name,
        } if self.author else None
        data['category'] = {'id': self.category.id, 'name': self.category.name} if self.category else None
        return data

    def __repr__(self):
        return f'<Post {self.slug}>'


class Project(BaseModel):
    """Dự án quy hoạch"""
    __tablename__ = 'projects'

    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(280), unique=True, nullable=False, index=True)
    description = db.Column(db.String(500))
    content = db.Column(db.Text)
    cover_image = db.Column(db.String(255))
    pdf_file = db.Column(db.String(255))  # file PDF đính kèm
    status = db.Column(db.String(20), default=STATUS_DRAFT, nullable=False, index=True)
    views = db.Column(db.Integer, default=0, nullable=False)
    published_at = db.Column(db.DateTime, index=True)

    category_id = db.Column(db.Integer, db.ForeignKey('categories.id', ondelete='SET NULL'))

    def to_dict(self):
        data = super().to_dict()
        data['category'] = {'id': self.category.id, 'name': self.category.name} if self.category else None
        return data

    def __repr__(self):
        return f'<Project {self.slug}>'
