"""Core data structures for the logistics record tables."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Any, Dict, NamedTuple, Optional, Tuple

from .repository import InvalidFieldError

_INTEGER = re.compile(r"[+-]?[0-9]+")


class FieldSpec(NamedTuple):
    """Describes one serialized attribute of a record."""

    attr: str
    wire: str
    kind: type
    key: bool
    non_negative: bool


def _key(wire: str, kind: type = str) -> Any:
    return field(metadata={"wire": wire, "kind": kind, "key": True})


def _text(wire: str) -> Any:
    return field(metadata={"wire": wire, "kind": str})


def _number(wire: str, *, non_negative: bool = False) -> Any:
    return field(metadata={"wire": wire, "kind": int, "non_negative": non_negative})


class Record:
    """Mixin giving every entity metadata-driven validation and field lookup."""

    __slots__ = ()

    def __post_init__(self) -> None:
        for spec in self.field_specs():
            _check(spec, getattr(self, spec.attr))

    @classmethod
    def field_specs(cls) -> Tuple[FieldSpec, ...]:
        return _field_specs(cls)

    @classmethod
    def spec_for(cls, wire: str) -> FieldSpec:
        try:
            return _wire_index(cls)[wire]
        except KeyError:
            raise AttributeError(f"{cls.__name__} has no field {wire!r}") from None

    @classmethod
    def attribute_for(cls, wire: str) -> str:
        """Map a serialized field name (``zipCode``) to its attribute (``zip_code``)."""
        return cls.spec_for(wire).attr

    @classmethod
    def key_specs(cls) -> Tuple[FieldSpec, ...]:
        return tuple(spec for spec in cls.field_specs() if spec.key)

    @classmethod
    def value_specs(cls) -> Tuple[FieldSpec, ...]:
        return tuple(spec for spec in cls.field_specs() if not spec.key)


@lru_cache(maxsize=None)
def _field_specs(cls: type) -> Tuple[FieldSpec, ...]:
    return tuple(
        FieldSpec(
            attr=item.name,
            wire=item.metadata["wire"],
            kind=item.metadata["kind"],
            key=item.metadata.get("key", False),
            non_negative=item.metadata.get("non_negative", False),
        )
        for item in fields(cls)
    )


@lru_cache(maxsize=None)
def _wire_index(cls: type) -> Dict[str, FieldSpec]:
    return {spec.wire: spec for spec in _field_specs(cls)}


def _check(spec: FieldSpec, value: Any) -> None:
    if spec.kind is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidFieldError(spec.wire, value, "must be an integer")
        if spec.non_negative and value < 0:
            raise InvalidFieldError(spec.wire, value, "must be non-negative")
        return
    if not isinstance(value, str):
        raise InvalidFieldError(spec.wire, value, "must be a string")
    if spec.key and not value.strip():
        raise InvalidFieldError(spec.wire, value, "cannot be blank")


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse a base-10 integer with an optional sign; ``None`` when it is not one."""
    if text is None:
        return None
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def parse_field(spec: FieldSpec, raw: Optional[str]) -> Any:
    """Convert text typed by an operator into the value ``spec`` expects."""
    if raw is None:
        raise InvalidFieldError(spec.wire, raw, "is required")
    if spec.kind is int:
        value = parse_int(raw)
        if value is None:
            raise InvalidFieldError(spec.wire, raw, "must be an integer")
        return value
    return raw


@dataclass(slots=True)
class Warehouse(Record):
    """A warehouse site with its equipment and drone capacity."""

    id: str = _key("id")
    phone_number: str = _text("phoneNumber")
    city: str = _text("city")
    zip_code: str = _text("zipCode")
    street: str = _text("street")
    equipment_capacity: int = _number("equipmentCapacity", non_negative=True)
    drone_capacity: int = _number("droneCapacity", non_negative=True)
    manager_ssn: str = _text("managerSSN")


@dataclass(slots=True)
class Customer(Record):
    """Customer master data. Dates are kept as entered."""

    user_id: str = _key("userId")
    cust_start_date: str = _text("custStartDate")
    city: str = _text("city")
    zip_code: str = _text("zipCode")
    street: str = _text("street")
    email: str = _text("email")
    phone_number: str = _text("phoneNumber")
    cust_name: str = _text("custName")
    type: str = _text("type")


@dataclass(slots=True)
class Employee(Record):
    """Employee keyed by social security number."""

    ssn: str = _key("ssn")
    name: str = _text("name")
    phone_number: str = _text("phoneNumber")
    sex: str = _text("sex")
    salary: int = _number("salary")


@dataclass(slots=True)
class Order(Record):
    """A rental order placed by a customer."""

    order_id: str = _key("orderId")
    order_start_date: str = _text("orderStartDate")
    estimated_arrival_date: str = _text("estimatedArrivalDate")
    actual_arrival_date: str = _text("actualArrivalDate")
    due_date: str = _text("dueDate")
    actual_return_date: str = _text("actualReturnDate")
    cust_user_id: str = _text("custUserId")


@dataclass(slots=True)
class Review(Record):
    """A customer's review of one order, keyed by ``(order_id, user_id)``."""

    order_id: str = _key("orderId")
    user_id: str = _key("userId")
    comments: str = _text("comments")
    ratings: int = _number("ratings")


@dataclass(slots=True)
class Equipment(Record):
    id: int = _key("id", int)
    name: str = _text("name")


__all__ = [
    "Customer",
    "Employee",
    "Equipment",
    "FieldSpec",
    "Order",
    "Record",
    "Review",
    "Warehouse",
    "parse_field",
    "parse_int",
]
