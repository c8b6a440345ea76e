from __future__ import annotations

import argparse
from typing import Sequence

from autoblog import config
from autoblog import logger as logger_mod
from autoblog.blog import BlogGenerationError, generate_and_save, generate_blog_post
from autoblog.blog.writer import select_topic
from autoblog.llm import LLMError

log = logger_mod.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autoblog", description="Generate a blog post with AI provider fallback"
    )
    parser.add_argument("topic", nargs="?", default=None, help="Topic (random from the pool if omitted)")
    parser.add_argument(
        "--language",
        default=config.BLOG_LANGUAGE,
        choices=["ar", "en"],
        help="Article language",
    )
    parser.add_argument("--max-retries", type=int, default=None, help="Primary provider attempts")
    parser.add_argument("--save", action="store_true", help="Write the post to --blog-dir")
    parser.add_argument("--blog-dir", default=config.BLOG_DIR, help="Output directory for posts")
    parser.add_argument("--log-level", default=None, help="Override LOGGING_LEVEL")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        logger_mod.set_logging_level(args.log_level)

    topic = args.topic or select_topic()
    try:
        if args.save:
            post, path = generate_and_save(
                topic=topic,
                language=args.language,
                blog_dir=args.blog_dir,
                max_retries=args.max_retries,
            )
        else:
            post = generate_blog_post(topic, args.language, max_retries=args.max_retries)
            path = None
    except (BlogGenerationError, LLMError, OSError) as exc:
        log.error(f"❌ {exc}")
        print(f"Failed: {exc}")
        return 1

    label = "FALLBACK" if post.fallback_used else "PRIMARY"
    print(f"Source: {post.provider} ({label})")
    print(f"Title: {post.title}")
    if args.save:
        print(f"File: {path}" if path else "File: skipped (already exists)")
    else:
        print(f"\nContent preview:\n{post.content[:500]}...")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
