"""Unspanned storage of records in fixed-size blocks."""

from __future__ import annotations

from collections.abc import Iterable

_DIGITS = frozenset("0123456789")

NUMBER_FIELD_SIZE = 4
TEXT_FIELD_SIZE = 8
SEPARATOR_NAME = "SEP"
SEPARATOR_MARK = "$"

SAMPLE_QUERY: tuple[tuple[tuple[str, str], ...], ...] = (
    (("A", "23"), ("B", "hello")),
    (("C", "23"),),
)


class RecordTooLargeError(ValueError):
    """A record does not fit into an empty block."""


def is_number(text: str) -> bool:
    """Tell whether every character of ``text`` is an ASCII digit."""
    return all(char in _DIGITS for char in text)


def _fields_size(fields: Iterable[tuple[str, str]]) -> int:
    return sum(
        NUMBER_FIELD_SIZE if is_number(value) else TEXT_FIELD_SIZE
        for _, value in fields
    )


class Record:
    """A record made of (name, value) fields; its size is zero."""

    def __init__(self, fields: Iterable[tuple[str, str]]) -> None:
        self.fields: tuple[tuple[str, str], ...] = tuple(
            (name, value) for name, value in fields
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.fields)!r})"

    def size(self) -> int:
        return 0

    @property
    def is_separator(self) -> bool:
        return bool(self.fields) and self.fields[0][0] == SEPARATOR_NAME


class FixedLengthRecord(Record):
    """A record whose size is computed once and then kept."""

    def __init__(self, fields: Iterable[tuple[str, str]]) -> None:
        super().__init__(fields)
        self._size: int | None = None

    def size(self) -> int:
        if self._size is None:
            self._size = _fields_size(self.fields)
        return self._size


class VariableLengthRecord(Record):
    """A record whose size is computed from its fields on each call."""

    def size(self) -> int:
        return _fields_size(self.fields)


class Separator(Record):
    """The one-byte marker written after every record in a block."""

    def __init__(self) -> None:
        super().__init__([(SEPARATOR_NAME, SEPARATOR_MARK)])

    def size(self) -> int:
        return 1


class Block:
    """A block of fixed capacity holding records, each followed by a separator."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.used = 0
        self.records: list[Record] = []

    def has_space(self, record: Record) -> bool:
        """Tell whether the record and its separator fit in the free space."""
        return self.used + record.size() + 1 <= self.capacity

    def add_record(self, record: Record) -> None:
        """Store the record and a separator; raise if they do not fit."""
        if not self.has_space(record):
            raise RecordTooLargeError("Record Size Exceeds")
        self.used += record.size() + 1
        self.records.append(record)
        self.records.append(Separator())


class BlockFile:
    """A file of chained blocks filled with records in insertion order."""

    def __init__(self, block_size: int) -> None:
        self.block_size = block_size
        self._blocks: list[Block] = []

    def run_query(
        self, query: Iterable[Iterable[tuple[str, str]]] | None = None
    ) -> None:
        """Insert one variable-length record per field list in ``query``.

        Without a query the built-in sample data is inserted. A record that
        fits in no block raises RecordTooLargeError; records already inserted
        stay in place.
        """
        for fields in SAMPLE_QUERY if query is None else query:
            record = VariableLengthRecord(fields)
            if not self._blocks:
                self._blocks.append(Block(self.block_size))
            elif not self._blocks[-1].has_space(record):
                self._blocks.append(Block(self.block_size))
            self._blocks[-1].add_record(record)

    def blocks(self) -> list[Block]:
        """Return the blocks in chain order."""
        return list(self._blocks)

    def render(self) -> str:
        """Return the in-memory layout, one line per block."""
        lines = []
        for block in self._blocks:
            parts = []
            for record in block.records:
                if record.is_separator:
                    parts.append(SEPARATOR_MARK)
                else:
                    body = ", ".join(f"{name}:{value}" for name, value in record.fields)
                    parts.append("{" + body + "}")
            lines.append("|" + "".join(parts) + "|-------->\n")
        return "".join(lines)