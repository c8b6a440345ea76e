class BlogError(RuntimeError):
    """Base error for autoblog.blog."""


class BlogGenerationError(BlogError):
    """No provider produced content for the post."""
