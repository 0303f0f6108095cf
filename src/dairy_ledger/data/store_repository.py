"""Access to the process-wide ledger book."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Optional

from ..config import settings
from ..persistence.filesystem import FileStorage
from ..services.book import DairyBook


@functools.lru_cache(maxsize=1)
def get_book(store_file: Optional[Path] = None) -> DairyBook:
    """Open the book from the configured snapshot file on first access."""

    return DairyBook.open(FileStorage(store_file or settings.store_file))
