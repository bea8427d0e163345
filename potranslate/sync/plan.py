"""Work planning for incremental synchronisation."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..catalog.model import Catalog, Entry

__all__ = ["SyncPlan", "plan_incremental"]


@dataclass(slots=True)
class SyncPlan:
    """Template entries to append and keys to translate, both in template order."""

    to_add: list[Entry] = field(default_factory=list)
    to_translate: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.to_add and not self.to_translate


def plan_incremental(template: Catalog, target: Catalog) -> SyncPlan:
    """Compare ``target`` with ``template``.

    A key is added when the target lacks it. A key is translated when it is
    new or empty in the target, unless the template already ships a
    non-empty default translation for it. Target entries written without a
    ``msgstr`` line are left alone since there is no block to fill.
    """
    plan = SyncPlan()
    for entry in template:
        existing = target.get(entry.key)
        if existing is None:
            plan.to_add.append(entry)
        if entry.is_translated:
            continue
        if existing is not None and _lacks_msgstr(existing):
            continue
        if existing is None or not existing.is_translated:
            plan.to_translate.append(entry.key)
    return plan


def _lacks_msgstr(entry: Entry) -> bool:
    return entry.location is not None and entry.location.msgstr_start is None

