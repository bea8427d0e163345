"""Translation backends and the orchestrator driving them."""

from .backend import GoogleTranslator, Translator
from .orchestrator import ProgressCallback, TranslationOutcome, translate_keys

__all__ = [
    "GoogleTranslator",
    "ProgressCallback",
    "TranslationOutcome",
    "Translator",
    "translate_keys",
]
