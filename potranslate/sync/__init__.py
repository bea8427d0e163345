"""Synchronisation of target catalogs with their template."""

from .bootstrap import clone_template, localize_header, validate_language_code
from .incremental import append_entries, apply_translations, sync_file, sync_lines
from .plan import SyncPlan, plan_incremental
from .rewrite import extract_header_block, rewrite_file, rewrite_lines
from .template import load_template, resolve_source_language, update_template_language
from .types import SyncResult, TranslateStep

__all__ = [
    "SyncPlan",
    "SyncResult",
    "TranslateStep",
    "append_entries",
    "apply_translations",
    "clone_template",
    "extract_header_block",
    "load_template",
    "localize_header",
    "plan_incremental",
    "resolve_source_language",
    "rewrite_file",
    "rewrite_lines",
    "sync_file",
    "sync_lines",
    "update_template_language",
    "validate_language_code",
]
