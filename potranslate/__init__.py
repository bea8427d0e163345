"""Keep gettext PO catalogs in sync with their POT template."""

__version__ = "1.0.0"
