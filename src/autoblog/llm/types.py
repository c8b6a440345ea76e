from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Source(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    NONE = "none"


@dataclass(frozen=True)
class GenerationResult:
    """Provider-neutral outcome of one orchestrated generation.

    Invariants:
    - success=False implies content is None and error is set.
    - source=NONE only when success=False.
    """

    success: bool
    source: Source
    content: Optional[str] = None
    error: Optional[str] = None
    fallback_used: bool = False
    provider: Optional[str] = None

    def __post_init__(self) -> None:
        if self.success:
            if self.source is Source.NONE:
                raise ValueError("Successful result must name a primary/secondary source")
            if self.content is None:
                raise ValueError("Successful result must carry content")
        else:
            if self.content is not None:
                raise ValueError("Failed result must not carry content")
            if not self.error:
                raise ValueError("Failed result must carry an error message")

    @classmethod
    def served(
        cls, *, source: Source, provider: str, content: str, fallback_used: bool
    ) -> "GenerationResult":
        return cls(
            success=True,
            source=source,
            content=content,
            fallback_used=fallback_used,
            provider=provider,
        )

    @classmethod
    def failed(cls, error: str, *, fallback_used: bool = True) -> "GenerationResult":
        return cls(
            success=False,
            source=Source.NONE,
            error=error,
            fallback_used=fallback_used,
        )
