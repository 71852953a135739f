"""Compatibility helpers for importing piecash and opening books."""

from __future__ import annotations

import inspect
import warnings
from pathlib import Path
from urllib.parse import urlparse

from sqlalchemy.exc import SAWarning

_PIECASH = None


def _patch_sqlalchemy_for_piecash() -> None:
    """Drop the ``constructor`` argument newer SQLAlchemy rejects."""
    try:
        from sqlalchemy.orm import decl_api
    except ImportError:
        return

    signature = inspect.signature(decl_api.registry.generate_base)
    if "constructor" in signature.parameters:
        return
    original = decl_api.registry.generate_base
    if getattr(original, "_piecash_patched", False):
        return

    def _generate_base(self, *args, **kwargs):
        kwargs.pop("constructor", None)
        return original(self, *args, **kwargs)

    _generate_base._piecash_patched = True  # type: ignore[attr-defined]
    decl_api.registry.generate_base = _generate_base


def load_piecash():
    """Import piecash with compatibility patches applied.

    Raises:
        RuntimeError: If piecash is not installed.
    """
    global _PIECASH
    if _PIECASH is not None:
        return _PIECASH
    _patch_sqlalchemy_for_piecash()
    warnings.filterwarnings("ignore", category=SAWarning)
    try:
        import piecash
    except ImportError as exc:
        raise RuntimeError(
            "piecash is not installed; install it to read GnuCash books"
        ) from exc
    _PIECASH = piecash
    return piecash


def open_ledger_book(piecash, book_path: Path | str):
    """Open a GnuCash book read-only from a filesystem path or URI.

    Args:
        piecash: Loaded piecash module.
        book_path: SQLite file path or database URI.

    Returns:
        Book opened without a lock check and without backup.
    """
    sqlite_file: str | None = None
    uri: str | None = None
    if isinstance(book_path, Path):
        sqlite_file = str(book_path)
    else:
        parsed = urlparse(book_path)
        if parsed.scheme and parsed.scheme != "file":
            uri = book_path
        else:
            sqlite_file = str(Path(book_path).expanduser().resolve())
    return piecash.open_book(
        sqlite_file=sqlite_file,
        uri_conn=uri,
        readonly=True,
        open_if_lock=True,
        do_backup=False,
    )


__all__ = ["load_piecash", "open_ledger_book"]
