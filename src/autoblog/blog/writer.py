from __future__ import annotations

import datetime
import random
from pathlib import Path
from typing import Optional, Sequence

from autoblog import config, helpers
from autoblog import logger as logger_mod
from autoblog.llm import FallbackOrchestrator

from .post import BlogPost, generate_blog_post

log = logger_mod.get_logger()


def _yaml_escape(value: str) -> str:
    return value.replace("'", "''")


def select_topic(
    rng: Optional[random.Random] = None, *, topics: Optional[Sequence[str]] = None
) -> str:
    pool = list(topics if topics is not None else config.TOPICS)
    if not pool:
        raise ValueError("Topic pool is empty")
    return (rng or random).choice(pool)


def render_frontmatter(
    title: str, description: str, date: datetime.date, image: Optional[str] = None
) -> str:
    lines = [
        "---",
        f"title: '{_yaml_escape(title)}'",
        f"description: '{description}'",
        f"pubDate: '{helpers.format_frontmatter_date(date)}'",
    ]
    if image:
        lines.append(f"heroImage: '{image}'")
    lines.append("---")
    return "\n".join(lines) + "\n\n"


def render_post(
    post: BlogPost, date: datetime.date, hero_image: Optional[str] = None
) -> str:
    description = helpers.extract_description(post.content)
    return render_frontmatter(post.title, description, date, hero_image) + post.content


def post_filename(post: BlogPost, date: datetime.date) -> str:
    return f"{helpers.format_date(date)}-{helpers.slugify(post.title)}.md"


def save_post(
    post: BlogPost,
    blog_dir: str | Path,
    date: Optional[datetime.date] = None,
    hero_image: Optional[str] = None,
) -> Optional[Path]:
    """Write the post as Markdown with frontmatter.

    Returns the written path, or None when a file with the same name exists.
    """

    date = date or datetime.date.today()
    out_dir = Path(blog_dir)
    path = out_dir / post_filename(post, date)

    if path.exists():
        log.warning(f"⚠️ File {path.name} already exists, skipping")
        return None

    out_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(render_post(post, date, hero_image), encoding="utf-8")
    log.info(f"✅ Saved to: {path}")
    return path


def generate_and_save(
    *,
    topic: Optional[str] = None,
    language: Optional[str] = None,
    blog_dir: Optional[str | Path] = None,
    orchestrator: Optional[FallbackOrchestrator] = None,
    max_retries: Optional[int] = None,
    date: Optional[datetime.date] = None,
) -> tuple[BlogPost, Optional[Path]]:
    topic = topic or select_topic()
    language = language or config.BLOG_LANGUAGE
    log.info(f"Starting generation for topic: {topic!r}")

    post = generate_blog_post(
        topic, language, orchestrator=orchestrator, max_retries=max_retries
    )
    path = save_post(
        post,
        blog_dir or config.BLOG_DIR,
        date=date,
        hero_image=config.HERO_IMAGE,
    )
    return post, path
