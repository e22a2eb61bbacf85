import os
from portal import create_app, db
from portal.models import (
    User, Category, Post, Project,
    Video, Slide, Drawing,
    Feedback, Setting, About
)

# Chế độ cấu hình lấy từ FLASK_ENV hoặc FLASK_CONFIG
config_name = os.getenv('FLASK_ENV') or os.getenv('FLASK_CONFIG') or 'default'
if config_name in ('development', 'dev'):
    config_name = 'development'
elif config_name not in ('production', 'testing'):
    config_name = 'default'

app = create_app(config_name)


@app.shell_context_processor
def make_shell_context():
    """Tự nạp db và các model khi chạy 'flask shell'"""
    return dict(
        db=db,
        app=app,
        User=User,
        Category=Category,
        Post=Post,
        Project=Project,
        Video=Video,
        Slide=Slide,
        Drawing=Drawing,
        Feedback=Feedback,
        Setting=Setting,
        About=About,
    )


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    app.run(host='0.0.0.0', port=port)
