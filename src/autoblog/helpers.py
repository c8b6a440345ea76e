import datetime
import re
from typing import Any

from autoblog import logger as log

log = log.get_logger()

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

# Filenames are capped at 255 bytes; leave room for the date prefix and suffix.
SLUG_MAX_BYTES = 200


def safe_str(v: Any) -> str:
    """Best-effort stringify without turning missing values into the literal 'None'."""
    if v is None:
        return ""
    try:
        return str(v)
    except Exception:
        return ""


def extract_title(markdown: str) -> str:
    """Return the first `# ` heading, or 'Untitled'."""
    match = re.search(r"^#[ \t]*(.+)$", safe_str(markdown), flags=re.MULTILINE)
    return match.group(1).strip() if match else "Untitled"


def strip_markdown(content: str) -> str:
    text = safe_str(content)
    text = re.sub(r"#+ ", "", text)
    text = text.replace("**", "").replace("*", "")
    return re.sub(r"\s+", " ", text).strip()


def extract_description(content: str, limit: int = 150) -> str:
    """Plain-text prefix of the post, safe inside a single-quoted YAML string."""
    plain = strip_markdown(content)[:limit]
    return plain.replace("'", "''") + "..."


def slugify(text: Any, max_bytes: int = SLUG_MAX_BYTES) -> str:
    """Lowercase, dash-separated slug. Non-Latin word characters are kept.

    The slug is cut to at most `max_bytes` UTF-8 bytes on a character boundary.
    """
    s = safe_str(text).lower().strip()
    s = re.sub(r"\s+", "-", s)
    s = re.sub(r"[^\w\-]+", "", s)
    s = re.sub(r"-{2,}", "-", s).strip("-")
    s = s.encode("utf-8")[:max_bytes].decode("utf-8", errors="ignore").rstrip("-")
    if not s:
        log.debug(f"slugify produced an empty slug for {text!r}; using 'post'")
        return "post"
    return s


def format_date(dt: datetime.date) -> str:
    return dt.strftime("%Y-%m-%d")


def format_frontmatter_date(dt: datetime.date) -> str:
    # Month names are fixed English abbreviations regardless of locale.
    return f"{MONTHS[dt.month - 1]} {dt.day:02d} {dt.year}"
