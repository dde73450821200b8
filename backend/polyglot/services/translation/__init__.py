"""
Translation Module

- TranslationOrchestrator: direct and English-pivot translation
- TranslationResult: outcome of one request

Usage:
    from polyglot.services.translation import TranslationOrchestrator
"""

from polyglot.services.translation.orchestrator import (
    TranslationOrchestrator,
    TranslationResult,
    lang_pair,
    to_api_code,
    is_local_to_local,
)

__all__ = [
    "TranslationOrchestrator",
    "TranslationResult",
    "lang_pair",
    "to_api_code",
    "is_local_to_local",
]
