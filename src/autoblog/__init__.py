"""autoblog: blog post generation with primary/secondary AI provider fallback."""

__version__ = "0.1.0"
