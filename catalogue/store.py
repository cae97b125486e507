"""
JSON file backed book store.

Books are kept in memory as plain dicts in insertion order and the whole list
is rewritten to disk after every mutation.
"""

import json
import random
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog

from catalogue.config import CatalogueConfig
from catalogue.models import IdStrategy

logger = structlog.get_logger(__name__)

Book = Dict[str, Any]

_LEADING_INT = re.compile(r"^\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")


def parse_book_id(raw: str) -> Optional[int]:
    """
    Parse a path segment into a book id.

    Leading whitespace, an optional sign and a ``0x`` prefix are accepted and
    anything after the leading digits is ignored, so ``"12abc"`` parses as 12.

    Returns:
        The parsed integer, or None when the segment does not start with a number
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    sign, digits = match.groups()
    value = int(digits, 16) if digits[:2].lower() == "0x" else int(digits)
    return -value if sign == "-" else value


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def loads_json(data: Union[str, bytes]) -> Any:
    """Parse JSON text, rejecting the NaN and Infinity extensions."""
    return json.loads(data, parse_constant=_reject_constant)


def _id_matches(record: Book, book_id: int) -> bool:
    value = record.get("id")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == book_id


class BookStore:
    """In-memory list of books synchronised with a JSON file."""

    def __init__(
        self,
        path: Union[str, Path],
        id_strategy: IdStrategy = IdStrategy.RANDOM,
        max_random_id: int = 1000,
        rng: Optional[random.Random] = None,
    ):
        self.path = Path(path)
        self.id_strategy = IdStrategy(id_strategy)
        self.max_random_id = max_random_id
        self.books: List[Book] = []
        self._random = rng or random.Random()

    @classmethod
    def from_config(cls, settings: CatalogueConfig) -> "BookStore":
        """Build a store from service settings."""
        return cls(
            settings.get_books_file_path(),
            id_strategy=settings.id_strategy,
            max_random_id=settings.max_random_id,
        )

    def __len__(self) -> int:
        return len(self.books)

    def load(self) -> None:
        """
        Load books from the backing file.

        Any read or parse failure is logged and leaves the store empty.
        """
        self.books = []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f, parse_constant=_reject_constant)
        except Exception as e:
            logger.error("Failed to read or parse books file", path=str(self.path), error=str(e))
            return

        if not isinstance(data, list):
            logger.error(
                "Books file does not contain a JSON array",
                path=str(self.path),
                found=type(data).__name__
            )
            return

        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                logger.warning("Skipping non-object entry in books file", index=index)
                continue
            self.books.append(entry)

        logger.info("Loaded books", path=str(self.path), count=len(self.books))

    def persist(self) -> None:
        """
        Write every book to the backing file.

        Failures are logged only; in-memory state is never touched.
        """
        try:
            # Serialise before open() truncates the file
            content = json.dumps(self.books, indent=2, default=str, allow_nan=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(content)
        except Exception as e:
            logger.error("Failed to write books file", path=str(self.path), error=str(e))
            return

        logger.debug("Persisted books", path=str(self.path), count=len(self.books))

    def list_all(self) -> List[Book]:
        return list(self.books)

    def find_by_id(self, book_id: Optional[int]) -> Optional[Book]:
        """Return the first book with the given id, or None."""
        if book_id is None:
            return None
        for record in self.books:
            if _id_matches(record, book_id):
                return record
        return None

    def append(self, record: Book) -> Book:
        """Assign a fresh id to the record and add it to the end of the store."""
        record["id"] = self._next_id()
        self.books.append(record)
        return record

    def remove_by_id(self, book_id: Optional[int]) -> bool:
        """
        Remove the first book with the given id.

        Returns:
            True if a book was removed
        """
        if book_id is None:
            return False
        for index, record in enumerate(self.books):
            if _id_matches(record, book_id):
                del self.books[index]
                return True
        return False

    def _next_id(self) -> int:
        if self.id_strategy == IdStrategy.SEQUENTIAL:
            ids = [
                int(r["id"]) for r in self.books
                if isinstance(r.get("id"), (int, float)) and not isinstance(r.get("id"), bool)
            ]
            return max(ids, default=0) + 1
        # No collision check against existing ids
        return self._random.randrange(self.max_random_id)
