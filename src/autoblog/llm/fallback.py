from __future__ import annotations

import time
from typing import Optional

from autoblog import logger as logger_mod

from ._retry import RetryConfig, attempts_for, backoff_delay
from .base import TextProvider
from .types import GenerationResult, Source

log = logger_mod.get_logger()


class FallbackOrchestrator:
    """Primary provider with bounded retries, then one secondary attempt.

    Every provider exception counts as a failed attempt; only the combined
    error of a double failure reaches the caller, as an unsuccessful
    GenerationResult.
    """

    def __init__(
        self,
        *,
        primary: TextProvider,
        secondary: TextProvider,
        retry: Optional[RetryConfig] = None,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self._retry = retry or RetryConfig()

    @property
    def primary(self) -> TextProvider:
        return self._primary

    @property
    def secondary(self) -> TextProvider:
        return self._secondary

    def generate(self, prompt: str, max_retries: Optional[int] = None) -> GenerationResult:
        attempts = attempts_for(max_retries, self._retry)
        primary_name = self._primary.name
        last_error: Optional[Exception] = None

        for attempt in range(1, attempts + 1):
            try:
                log.info(f"Attempting {primary_name} (try {attempt}/{attempts})...")
                content = self._primary.generate_text(prompt)
            except Exception as e:  # noqa: BLE001
                last_error = e
                log.warning(f"❌ {primary_name} failed: {e}")
                if attempt < attempts:
                    time.sleep(backoff_delay(attempt, self._retry))
                continue

            log.info(f"✅ {primary_name} succeeded")
            return GenerationResult.served(
                source=Source.PRIMARY,
                provider=primary_name,
                content=content,
                fallback_used=False,
            )

        secondary_name = self._secondary.name
        log.info(f"🔄 Switching to {secondary_name} fallback...")
        try:
            content = self._secondary.generate_text(prompt)
        except Exception as e:  # noqa: BLE001
            log.error(f"❌ {secondary_name} also failed: {e}")
            return GenerationResult.failed(
                f"{primary_name}: {last_error} | {secondary_name}: {e}"
            )

        log.info(f"✅ {secondary_name} succeeded")
        return GenerationResult.served(
            source=Source.SECONDARY,
            provider=secondary_name,
            content=content,
            fallback_used=True,
        )


def generate_content(prompt: str, max_retries: Optional[int] = None) -> GenerationResult:
    """Generate with the providers named in config (primary, then secondary)."""

    from .factory import build_orchestrator

    return build_orchestrator().generate(prompt, max_retries=max_retries)
