from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Optional

from autoblog import helpers
from autoblog import logger as logger_mod
from autoblog.llm import FallbackOrchestrator, build_orchestrator

from .errors import BlogGenerationError

log = logger_mod.get_logger()

PROMPT_TEMPLATES = {
    "ar": (
        'اكتب مقالاً احترافياً عن "{topic}" باللغة العربية.\n'
        "\n"
        "المتطلبات:\n"
        "- عنوان جذاب (استخدم #)\n"
        "- مقدمة قصيرة\n"
        "- 3-4 عناوين فرعية (##)\n"
        "- محتوى مفصل تحت كل عنوان\n"
        "- خاتمة مع دعوة للتفاعل\n"
        "- استخدم Markdown بشكل صحيح\n"
        "\n"
        "اكتب فقط المحتوى، بدون أي تعليقات إضافية."
    ),
    "en": (
        'Write a professional article about "{topic}" in English.\n'
        "\n"
        "Requirements:\n"
        "- Catchy title (use #)\n"
        "- Short introduction\n"
        "- 3-4 subheadings (##)\n"
        "- Detailed content under each section\n"
        "- Conclusion with call to action\n"
        "- Use proper Markdown formatting\n"
        "\n"
        "Write only the content, no extra comments."
    ),
}


@dataclass(frozen=True)
class BlogPost:
    topic: str
    title: str
    content: str
    source: str
    provider: Optional[str]
    fallback_used: bool
    language: str
    timestamp: datetime.datetime


def build_prompt(topic: str, language: str = "ar") -> str:
    template = PROMPT_TEMPLATES.get(language)
    if template is None:
        raise ValueError(
            f"Unsupported language: {language!r} (expected one of {sorted(PROMPT_TEMPLATES)})"
        )
    return template.format(topic=topic)


def generate_blog_post(
    topic: str,
    language: str = "ar",
    *,
    orchestrator: Optional[FallbackOrchestrator] = None,
    max_retries: Optional[int] = None,
) -> BlogPost:
    """Generate a Markdown article for `topic`.

    Raises BlogGenerationError when neither provider produced content.
    """

    prompt = build_prompt(topic, language)
    orchestrator = orchestrator or build_orchestrator()
    result = orchestrator.generate(prompt, max_retries=max_retries)

    if not result.success:
        raise BlogGenerationError(f"All AI providers failed: {result.error}")

    content = result.content or ""
    title = helpers.extract_title(content)
    tag = " (FALLBACK)" if result.fallback_used else ""
    log.info(f"📝 Generated '{title}' from {result.provider}{tag}")

    return BlogPost(
        topic=topic,
        title=title,
        content=content,
        source=result.source.value,
        provider=result.provider,
        fallback_used=result.fallback_used,
        language=language,
        timestamp=datetime.datetime.now(datetime.timezone.utc),
    )
