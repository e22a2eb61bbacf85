# Nhập theo thứ tự phụ thuộc
from .base import BaseModel
from .auth import User
from .content import Category, Post, Project
from .media import Video, Slide, Drawing
from .feedback import Feedback
from .site import Setting, About
