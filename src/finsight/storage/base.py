"""Generic flat-file record store.

A ``RecordStore`` owns one UTF-8 text file holding one record per line. It
knows nothing about the records themselves: a ``RecordCodec`` turns a record
into a line and a line back into a ``ParseResult``.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Generic, Iterable, Optional, TypeVar, Union

import structlog

from finsight.domain.errors import CorruptedRecordError, PersistenceError

logger = structlog.get_logger(__name__)

T = TypeVar("T")

FIELD_DELIMITER = "|"
DELIMITER_SUBSTITUTE = "/"
TEMP_SUFFIX = ".temp"


@dataclass(frozen=True)
class Parsed(Generic[T]):
    """The line decoded to a record."""

    record: T


@dataclass(frozen=True)
class Skipped:
    """The line is not a record (blank, truncated or legacy) and is ignored."""

    line: str


@dataclass(frozen=True)
class Corrupted:
    """The line is well formed but holds a value that violates domain rules."""

    error: CorruptedRecordError


ParseResult = Union[Parsed[T], Skipped, Corrupted]


def sanitize(text: Optional[str]) -> str:
    """Replace the field delimiter in free text so it cannot split a line.

    The substitution is lossy: a stored "/" cannot be told apart from a
    substituted "|" on reload.
    """
    if text is None:
        return ""
    return text.replace(FIELD_DELIMITER, DELIMITER_SUBSTITUTE)


def unsanitize(text: str) -> str:
    """Reverse of ``sanitize``; a pass-through since the substitution is lossy."""
    return text


def split_fields(line: str) -> list[str]:
    """Split a line on the delimiter, keeping empty trailing fields."""
    return line.split(FIELD_DELIMITER)


def join_fields(*fields: str) -> str:
    """Join already-sanitized fields into a line."""
    return FIELD_DELIMITER.join(fields)


class RecordCodec(ABC, Generic[T]):
    """Translates between one record type and its line format."""

    #: Number of fields below which a line is skipped instead of parsed
    min_fields: int = 1

    def __init__(self, file_name: str):
        """Initialize codec.

        Args:
            file_name: Name of the backing file, quoted in corruption messages
        """
        self.file_name = file_name

    @abstractmethod
    def format(self, record: T) -> str:
        """Serialize a record to a single line (without newline)."""
        pass

    @abstractmethod
    def parse_fields(self, fields: list[str]) -> T:
        """Build a record from at least ``min_fields`` fields.

        Raises:
            CorruptedRecordError: If a field holds an invalid value
        """
        pass

    def parse(self, line: str) -> ParseResult[T]:
        """Decode a line into a tagged parse result."""
        fields = split_fields(line)
        if len(fields) < self.min_fields:
            return Skipped(line)
        try:
            return Parsed(self.parse_fields(fields))
        except CorruptedRecordError as e:
            return Corrupted(e)


class RecordStore(Generic[T]):
    """Line-oriented persistence for a sequence of records of one type."""

    def __init__(self, path: Path | str, codec: RecordCodec[T]):
        """Initialize record store.

        Args:
            path: Path to the backing file (created on first use)
            codec: Codec for the record type
        """
        self.path = Path(path)
        self.codec = codec

    @property
    def temp_path(self) -> Path:
        """Sibling file used for atomic rewrites."""
        return self.path.with_name(self.path.name + TEMP_SUFFIX)

    def ensure_file(self) -> None:
        """Create the parent directory and an empty backing file if missing."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.touch()
                logger.debug("created data file", path=str(self.path))
        except OSError as e:
            raise PersistenceError(f"Unable to create data file {self.path}: {e}") from e

    def load(self) -> list[T]:
        """Load every record in the file.

        Empty lines and lines the codec skips are dropped.

        Returns:
            Records in file order

        Raises:
            CorruptedRecordError: On the first line holding an invalid value
            PersistenceError: If the file cannot be read
        """
        self.ensure_file()
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Unable to read from {self.path}: {e}") from e

        records: list[T] = []
        for line_number, line in enumerate(text.split("\n"), start=1):
            line = line.rstrip("\r")
            if not line:
                continue
            result = self.codec.parse(line)
            if isinstance(result, Parsed):
                records.append(result.record)
            elif isinstance(result, Corrupted):
                logger.warning(
                    "corrupted record",
                    path=str(self.path),
                    line_number=line_number,
                    field=result.error.field,
                    value=result.error.value,
                )
                raise result.error
            else:
                logger.debug("skipped line", path=str(self.path), line_number=line_number)

        logger.debug("loaded records", path=str(self.path), count=len(records))
        return records

    def try_load(
        self, on_error: Optional[Callable[[Exception], None]] = None
    ) -> list[T]:
        """Load every record, or nothing at all if the file cannot be trusted.

        Args:
            on_error: Called with the error when the load aborts

        Returns:
            All records, or an empty list if loading failed
        """
        try:
            return self.load()
        except (CorruptedRecordError, PersistenceError) as e:
            logger.warning("load aborted", path=str(self.path), error=str(e))
            if on_error is not None:
                on_error(e)
            return []

    def write_all(self, records: Iterable[T]) -> None:
        """Replace the file contents with ``records``.

        Lines are written to a temporary sibling which then replaces the real
        file, so the real file is never left half written.

        Raises:
            PersistenceError: If writing or replacing fails; the real file is unchanged
        """
        self.ensure_file()
        lines = [self.codec.format(record) + "\n" for record in records]
        temp_path = self.temp_path
        try:
            with temp_path.open("w", encoding="utf-8", newline="\n") as handle:
                handle.writelines(lines)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(temp_path, self.path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Unable to write to {self.path}: {e}") from e
        logger.debug("rewrote data file", path=str(self.path), count=len(lines))

    def _ends_with_newline(self) -> bool:
        """Check if the file is empty or its last byte is a newline."""
        with self.path.open("rb") as handle:
            if handle.seek(0, os.SEEK_END) == 0:
                return True
            handle.seek(-1, os.SEEK_END)
            return handle.read(1) == b"\n"

    def append(self, record: T) -> None:
        """Append one record to the end of the file.

        Raises:
            PersistenceError: If the file cannot be written
        """
        self.ensure_file()
        line = self.codec.format(record) + "\n"
        try:
            if not self._ends_with_newline():
                line = "\n" + line
            with self.path.open("a", encoding="utf-8", newline="\n") as handle:
                handle.write(line)
        except OSError as e:
            raise PersistenceError(f"Unable to append to {self.path}: {e}") from e
        logger.debug("appended record", path=str(self.path))
