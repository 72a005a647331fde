"""Service facade bundling one repository per logistics table."""

from __future__ import annotations

from typing import Dict, Optional

from .equipment import EquipmentDesk
from .logger import get_logger
from .repositories import (
    CustomerRepository,
    EmployeeRepository,
    OrderRepository,
    ReviewRepository,
    WarehouseRepository,
)
from .repository import InMemoryRepository

logger = get_logger(__name__)


class LogisticsService:
    """Facade that owns the record tables used by the front-ends.

    Every repository is an independent resource with its own lock; the
    service holds no state of its own and never locks across tables.
    """

    def __init__(
        self,
        warehouse_repo: Optional[WarehouseRepository] = None,
        customer_repo: Optional[CustomerRepository] = None,
        employee_repo: Optional[EmployeeRepository] = None,
        order_repo: Optional[OrderRepository] = None,
        review_repo: Optional[ReviewRepository] = None,
        equipment_desk: Optional[EquipmentDesk] = None,
    ) -> None:
        self.warehouses = warehouse_repo or WarehouseRepository()
        self.customers = customer_repo or CustomerRepository()
        self.employees = employee_repo or EmployeeRepository()
        self.orders = order_repo or OrderRepository()
        self.reviews = review_repo or ReviewRepository()
        self.equipment = equipment_desk or EquipmentDesk()

    def tables(self) -> Dict[str, InMemoryRepository]:
        """Repositories by the plural name used in menus and URLs."""
        return {
            "warehouses": self.warehouses,
            "customers": self.customers,
            "employees": self.employees,
            "orders": self.orders,
            "reviews": self.reviews,
        }

    def counts(self) -> Dict[str, int]:
        counts = {name: len(repo) for name, repo in self.tables().items()}
        counts["equipment"] = len(self.equipment)
        return counts


def seed_demo_data(service: LogisticsService) -> None:
    """Populate empty tables with a small, consistent demo data set."""

    if any(service.counts().values()):
        logger.info("Skipping demo data, tables are not empty")
        return

    service.employees.create(
        ssn="123-45-6789",
        name="Dana Whitfield",
        phone_number="555-2000",
        sex="F",
        salary=64000,
    )
    service.employees.create(
        ssn="987-65-4321",
        name="Luis Ortega",
        phone_number="555-2001",
        sex="M",
        salary=58000,
    )
    service.warehouses.create(
        phone_number="555-1000",
        city="Reno",
        zip_code="89501",
        street="Main St",
        equipment_capacity=10,
        drone_capacity=2,
        manager_ssn="123-45-6789",
    )
    service.warehouses.create(
        phone_number="555-1001",
        city="Sparks",
        zip_code="89431",
        street="Victorian Ave",
        equipment_capacity=25,
        drone_capacity=6,
        manager_ssn="987-65-4321",
    )
    customer = service.customers.create(
        cust_start_date="01/15/2024",
        city="Reno",
        zip_code="89502",
        street="Plumas St",
        email="maya.chen@example.com",
        phone_number="555-3000",
        cust_name="Maya Chen",
        type="individual",
    )
    order = service.orders.create(
        order_start_date="03/01/2024",
        estimated_arrival_date="03/03/2024",
        actual_arrival_date="03/03/2024",
        due_date="03/10/2024",
        actual_return_date="03/09/2024",
        cust_user_id=customer.user_id,
    )
    service.reviews.create(
        order_id=order.order_id,
        user_id=customer.user_id,
        comments="Drone arrived on time",
        ratings=5,
    )
    service.equipment.add(100, "Pressure washer")
    service.equipment.add(101, "Ladder")
    logger.info("Seeded demo data: %s", service.counts())


__all__ = ["LogisticsService", "seed_demo_data"]
