"""
Append-only flat file store for user records.

One record per line, fields separated by ``|`` in the order
``full_name|phone|email|age``. Field values are not escaped: a value that
contains ``|`` shifts the fields of its line when read back.
"""

import logging
from pathlib import Path
from typing import List, Union

from .exceptions import StoreError
from .models import UserRecord, FIELD_SEPARATOR

logger = logging.getLogger(__name__)


class UserStore:
    """Reads and appends user records in a pipe-delimited text file.

    A missing file is an empty store. Lines with too few fields are skipped.
    Fields are never validated here; callers validate before ``save``.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    def _read_lines(self) -> List[str]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding=self.encoding, newline="") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StoreError(f"Failed to read user store {self.path}: {e}") from e

        # Only "\n" ends a record; other line breaks may appear inside field values
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [line[:-1] if line.endswith("\r") else line for line in lines]

    def exists(self, full_name: str, phone: str, email: str) -> bool:
        """Return True if any stored record shares the full name, phone or email.

        Comparison is case-insensitive and a single matching field is enough.
        """
        wanted = (full_name.casefold(), phone.casefold(), email.casefold())

        for line in self._read_lines():
            parts = line.split(FIELD_SEPARATOR)
            if len(parts) < 3:
                continue
            if any(stored.casefold() == value for stored, value in zip(parts[:3], wanted)):
                return True

        return False

    def save(self, full_name: str, age: str, phone: str, email: str) -> UserRecord:
        """Append one record. Never rejects and never deduplicates."""
        record = UserRecord(full_name=full_name, phone=phone, email=email, age=age)

        if any(FIELD_SEPARATOR in value for value in record):
            logger.warning(f"Record for {full_name!r} contains '{FIELD_SEPARATOR}', it will not read back intact")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding=self.encoding, newline="") as f:
                f.write(record.to_line() + "\n")
        except (OSError, UnicodeEncodeError) as e:
            raise StoreError(f"Failed to write user store {self.path}: {e}") from e

        logger.info(f"Saved user record for {full_name!r} to {self.path}")
        return record

    def list_all(self) -> List[UserRecord]:
        """Return every record with at least four fields, in file order."""
        records = []
        for line_number, line in enumerate(self._read_lines(), 1):
            record = UserRecord.from_line(line)
            if record is None:
                logger.debug(f"Skipping malformed line {line_number} in {self.path}")
                continue
            records.append(record)
        return records

    def count(self) -> int:
        """Number of readable records in the store."""
        return len(self.list_all())
