"""Generic in-memory repository shared by every logistics table.

Each repository owns an insertion-ordered ``dict`` guarded by its own
re-entrant lock. Lookups that miss and constructions that fail validation are
returned as :class:`NotFound` / :class:`ValidationError` values instead of
being raised, so a caller can always keep issuing operations.
"""

from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from typing import (
    Any,
    ClassVar,
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Tuple,
    Type,
    TypeVar,
    Union,
)

from .logger import get_logger

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

logger = get_logger(__name__)

_NUMERIC_KEY = re.compile(r"[+-]?[0-9]+")


class RepositoryError(RuntimeError):
    """Base exception for repository errors."""


class InvalidFieldError(RepositoryError, ValueError):
    """Raised when a record is built with a missing or out-of-constraint field."""

    def __init__(self, field: str, value: Any, reason: str) -> None:
        super().__init__(f"{field} {reason}")
        self.field = field
        self.value = value
        self.reason = reason


class UnknownFieldError(RepositoryError, KeyError):
    """Raised when a query names a field the repository does not offer."""

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Unknown query field {self.field!r}"


@dataclass(frozen=True, slots=True)
class NotFound:
    """An operation referenced an identity that is absent from the store."""

    field: str
    value: str
    code: ClassVar[str] = "not_found"


@dataclass(frozen=True, slots=True)
class ValidationError:
    """A create or update was rejected before the store was touched."""

    field: str
    value: str
    message: str = ""
    code: ClassVar[str] = "invalid"

    @classmethod
    def from_error(cls, exc: "InvalidFieldError") -> "ValidationError":
        value = "" if exc.value is None else str(exc.value)
        return cls(field=exc.field, value=value, message=str(exc))


Failure = Union[NotFound, ValidationError]


def is_failure(result: object) -> bool:
    return isinstance(result, (NotFound, ValidationError))


def _exact_match(stored: Any, wanted: Any) -> bool:
    # bool and float never match an int field, nor numbers a text field
    if type(stored) is not type(wanted):
        return False
    return stored == wanted


class InMemoryRepository(Generic[K, T]):
    """Generic repository backed by an insertion-ordered dictionary.

    Subclasses set ``record_type`` (a dataclass from :mod:`.domain`),
    ``key_attrs`` (the attribute(s) forming the identity) and ``key_field``
    (the name reported in :class:`NotFound`). ``queryable_fields`` and
    ``range_fields`` hold the wire names accepted by :meth:`find_by` and
    :meth:`find_in_range`.
    """

    record_type: ClassVar[Type[Any]]
    key_attrs: ClassVar[Tuple[str, ...]]
    key_field: ClassVar[str]
    queryable_fields: ClassVar[Tuple[str, ...]] = ()
    range_fields: ClassVar[Tuple[str, ...]] = ()

    def __init__(self) -> None:
        self._items: Dict[K, T] = {}
        self._lock = threading.RLock()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.list())

    # ------------------------------------------------------------------
    # Identity helpers
    # ------------------------------------------------------------------
    def key_of(self, record: T) -> K:
        if len(self.key_attrs) == 1:
            return getattr(record, self.key_attrs[0])
        return tuple(getattr(record, attr) for attr in self.key_attrs)  # type: ignore[return-value]

    def key_kwargs(self, key: K) -> Dict[str, Any]:
        if len(self.key_attrs) == 1:
            return {self.key_attrs[0]: key}
        return dict(zip(self.key_attrs, key))  # type: ignore[arg-type]

    def describe_key(self, key: K) -> str:
        if isinstance(key, tuple):
            return "|".join("" if part is None else str(part) for part in key)
        return "" if key is None else str(key)

    def creation_specs(self) -> Tuple[Any, ...]:
        """Fields an operator supplies on create, identity first."""
        return self.record_type.key_specs() + self.record_type.value_specs()

    # ------------------------------------------------------------------
    # CRUD operations
    # ------------------------------------------------------------------
    def create(self, **attrs: Any) -> Union[T, ValidationError]:
        """Build a record from ``attrs`` and store it, overwriting any record
        that already holds the same identity."""
        with self._lock:
            record = self._build(attrs)
            if isinstance(record, ValidationError):
                return record
            return self._store(record)

    def get(self, key: K) -> Union[T, NotFound]:
        with self._lock:
            record = self._items.get(key)
        if record is None:
            return self._not_found(key)
        return record

    def list(self) -> List[T]:
        with self._lock:
            return list(self._items.values())

    def update(self, key: K, **attrs: Any) -> Union[T, NotFound, ValidationError]:
        """Replace every non-key attribute of the record stored at ``key``.

        A missing key is reported as :class:`NotFound`; it never creates a
        record. The replacement keeps the original slot in listing order.
        """
        with self._lock:
            if key not in self._items:
                return self._not_found(key)
            record = self._build({**attrs, **self.key_kwargs(key)})
            if isinstance(record, ValidationError):
                return record
            return self._store(record)

    def delete(self, key: K) -> Union[T, NotFound]:
        with self._lock:
            record = self._items.pop(key, None)
        if record is None:
            return self._not_found(key)
        logger.debug("Deleted %s %s", self.record_type.__name__, self.describe_key(key))
        return record

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def find_by(self, field: str, value: Any) -> List[T]:
        """Return every record whose ``field`` equals ``value`` exactly."""
        attr = self._query_attribute(field, self.queryable_fields)
        with self._lock:
            return [
                record
                for record in self._items.values()
                if _exact_match(getattr(record, attr), value)
            ]

    def find_in_range(self, field: str, low: int, high: int) -> List[T]:
        """Return every record with ``low <= field <= high``."""
        attr = self._query_attribute(field, self.range_fields)
        with self._lock:
            return [
                record
                for record in self._items.values()
                if low <= getattr(record, attr) <= high
            ]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _build(self, attrs: Dict[str, Any]) -> Union[T, ValidationError]:
        try:
            return self.record_type(**attrs)
        except InvalidFieldError as exc:
            logger.info("Rejected %s: %s", self.record_type.__name__, exc)
            return ValidationError.from_error(exc)

    def _store(self, record: T) -> T:
        key = self.key_of(record)
        action = "Replaced" if key in self._items else "Stored"
        self._items[key] = record
        logger.debug("%s %s %s", action, self.record_type.__name__, self.describe_key(key))
        return record

    def _not_found(self, key: K) -> NotFound:
        label = self.describe_key(key)
        logger.info("%s %s not found", self.record_type.__name__, label)
        return NotFound(field=self.key_field, value=label)

    def _query_attribute(self, field: str, allowed: Tuple[str, ...]) -> str:
        if field not in allowed:
            raise UnknownFieldError(field)
        return self.record_type.attribute_for(field)


class SequentialRepository(InMemoryRepository[str, T]):
    """Repository whose identities are assigned as ``"0"``, ``"1"``, ...

    The next identity is one greater than the largest key that parses as an
    integer; keys that do not parse are kept but ignored.
    """

    def creation_specs(self) -> Tuple[Any, ...]:
        return self.record_type.value_specs()

    def next_id(self) -> str:
        with self._lock:
            highest = -1
            for key in self._items:
                if isinstance(key, str) and _NUMERIC_KEY.fullmatch(key):
                    highest = max(highest, int(key))
            return str(highest + 1)

    def create(self, **attrs: Any) -> Union[T, ValidationError]:
        with self._lock:
            attrs[self.key_attrs[0]] = self.next_id()
            return super().create(**attrs)


__all__ = [
    "Failure",
    "InMemoryRepository",
    "InvalidFieldError",
    "NotFound",
    "RepositoryError",
    "SequentialRepository",
    "UnknownFieldError",
    "ValidationError",
    "is_failure",
]
