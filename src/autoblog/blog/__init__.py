"""Blog post generation on top of the LLM fallback orchestrator.

Public API:
- generate_blog_post
- generate_and_save
- save_post
- BlogPost
"""

from .errors import BlogError, BlogGenerationError
from .post import BlogPost, build_prompt, generate_blog_post
from .writer import generate_and_save, render_post, save_post, select_topic

__all__ = [
    "BlogError",
    "BlogGenerationError",
    "BlogPost",
    "build_prompt",
    "generate_and_save",
    "generate_blog_post",
    "render_post",
    "save_post",
    "select_topic",
]
