"""In-memory record tables for a small logistics business.

This package provides the record types (warehouses, customers, employees,
orders, reviews and equipment), lock-guarded in-memory repositories with
exact-match queries, JSON text rendering, and console and HTTP front-ends.
"""

from .domain import Customer, Employee, Equipment, Order, Review, Warehouse
from .equipment import EquipmentDesk, Notice
from .repositories import (
    CustomerRepository,
    EmployeeRepository,
    OrderRepository,
    ReviewRepository,
    WarehouseRepository,
)
from .repository import (
    InMemoryRepository,
    InvalidFieldError,
    NotFound,
    RepositoryError,
    SequentialRepository,
    UnknownFieldError,
    ValidationError,
    is_failure,
)
from .serialization import to_json
from .services import LogisticsService, seed_demo_data

__all__ = [
    "Customer",
    "Employee",
    "Equipment",
    "Order",
    "Review",
    "Warehouse",
    "EquipmentDesk",
    "Notice",
    "CustomerRepository",
    "EmployeeRepository",
    "OrderRepository",
    "ReviewRepository",
    "WarehouseRepository",
    "InMemoryRepository",
    "SequentialRepository",
    "RepositoryError",
    "InvalidFieldError",
    "UnknownFieldError",
    "NotFound",
    "ValidationError",
    "is_failure",
    "to_json",
    "LogisticsService",
    "seed_demo_data",
]
