from datetime import datetime
from portal.extensions import db
from portal.models.content import Post, Project, Category, STATUS_PUBLISHED
from portal.utils.text import unique_slug

POST_FIELDS = ('title', 'content', 'excerpt', 'cover_image', 'category_id')
PROJECT_FIELDS = ('title', 'description', 'content', 'cover_image', 'pdf_file', 'category_id')
CATEGORY_FIELDS = ('name', 'description', 'parent_id', 'display_order')


def apply_status(obj, status):
    """
    Gán trạng thái; published_at chỉ được đóng dấu ở lần xuất bản đầu tiên
    và không bao giờ bị xóa.
    """
    obj.status = status
    if status == STATUS_PUBLISHED and obj.published_at is None:
        obj.published_at = datetime.utcnow()


class ContentService:
    @staticmethod
    def published_query(model):
        """Bài/dự án đã xuất bản và đã tới thời điểm hiển thị"""
        return model.query.filter(
            model.status == STATUS_PUBLISHED,
            model.published_at <= datetime.utcnow()
        )

    @staticmethod
    def is_public(obj):
        """Cùng điều kiện với published_query, cho một bản ghi đã tải"""
        return (
            obj.status == STATUS_PUBLISHED
            and obj.published_at is not None
            and obj.published_at <= datetime.utcnow()
        )

    @staticmethod
    def create_post(data: dict, author) -> Post:
        post = Post(author_id=author.id if author else None, views=0)
        for field in POST_FIELDS:
            setattr(post, field, data.get(field))
        post.slug = unique_slug(Post, post.title)
        apply_status(post, data.get('status') or 'draft')
        db.session.add(post)
        db.session.commit()
        return post

    @staticmethod
    def update_post(post: Post, data: dict) -> Post:
        for field in POST_FIELDS:
            setattr(post, field, data.get(field))
        # Slug luôn được tạo lại theo tiêu đề mới
        post.slug = unique_slug(Post, post.title, exclude_id=post.id)
        apply_status(post, data.get('status') or post.status)
        db.session.commit()
        return post

    @staticmethod
    def create_project(data: dict) -> Project:
        project = Project(views=0)
        for field in PROJECT_FIELDS:
            setattr(project, field, data.get(field))
        project.slug = unique_slug(Project, project.title)
        apply_status(project, data.get('status') or 'draft')
        db.session.add(project)
        db.session.commit()
        return project

    @staticmethod
    def update_project(project: Project, data: dict) -> Project:
        for field in PROJECT_FIELDS:
            setattr(project, field, data.get(field))
        project.slug = unique_slug(Project, project.title, exclude_id=project.id)
        apply_status(project, data.get('status') or project.status)
        db.session.commit()
        return project

    @staticmethod
    def increment_views(model, obj_id):
        """Tăng lượt xem bằng UPDATE nguyên tử (views = views + 1)"""
        model.query.filter_by(id=obj_id).update(
            {model.views: model.views + 1}, synchronize_session=False
        )
        db.session.commit()

    @staticmethod
    def save_category(category: Category, data: dict) -> Category:
        for field in CATEGORY_FIELDS:
            setattr(category, field, data.get(field))
        if category.display_order is None:
            category.display_order = 0
        category.slug = unique_slug(Category, category.name, exclude_id=category.id)
        db.session.add(category)
        db.session.commit()
        return category

    @staticmethod
    def delete_category(category: Category):
        """Xóa danh mục, gỡ liên kết ở danh mục con, bài viết và dự án"""
        Category.query.filter_by(parent_id=category.id).update({'parent_id': None})
        Post.query.filter_by(category_id=category.id).update({'category_id': None})
        Project.query.filter_by(category_id=category.id).update({'category_id': None})
        db.session.delete(category)
        db.session.commit()

    @staticmethod
    def backfill_published_at():
        """
        Bài/dự án đang published nhưng thiếu published_at thì lấy created_at.
        Trả về (số bài, số dự án) đã sửa.
        """
        fixed = []
        for model in (Post, Project):
            rows = model.query.filter(
                model.status == STATUS_PUBLISHED,
                model.published_at.is_(None)
            ).all()
            for row in rows:
                row.published_at = row.created_at
            fixed.append(len(rows))
        db.session.commit()
        return tuple(fixed)
