"""Demonstration script for the logistics record tables."""

from __future__ import annotations

from . import LogisticsService, to_json


def main() -> None:
    service = LogisticsService()

    # Warehouses get sequential ids
    reno = service.warehouses.create(
        phone_number="555-1000",
        city="Reno",
        zip_code="89501",
        street="Main St",
        equipment_capacity=10,
        drone_capacity=2,
        manager_ssn="123-45-6789",
    )
    print("Created:", to_json(reno))
    second = service.warehouses.create(
        phone_number="555-1001",
        city="Reno",
        zip_code="89502",
        street="Kietzke Ln",
        equipment_capacity=4,
        drone_capacity=1,
        manager_ssn="123-45-6789",
    )
    print("Created:", to_json(second))
    print("Warehouses in Reno:", to_json(service.warehouses.query_by_city("Reno")))
    print(
        "Equipment capacity 4..10:",
        to_json(service.warehouses.query_by_equipment_capacity_range(4, 10)),
    )

    rejected = service.warehouses.create(
        phone_number="555-1002",
        city="Carson City",
        zip_code="89701",
        street="Curry St",
        equipment_capacity=-1,
        drone_capacity=0,
        manager_ssn="123-45-6789",
    )
    print("Rejected:", to_json(rejected))

    print("Deleted:", to_json(service.warehouses.delete("0")))
    print("Lookup after delete:", to_json(service.warehouses.get("0")))

    # Employees and reviews use caller supplied identities
    service.employees.create("123-45-6789", "Dana Whitfield", "555-2000", "F", 64000)
    service.employees.create("123-45-6789", "Dana Whitfield", "555-2009", "F", 66000)
    print("Employees:", to_json(service.employees.list()))

    service.reviews.create("7", "3", "Late by a day", 3)
    service.reviews.create("7", "3", "Arrived on time after all", 5)
    print("Reviews:", to_json(service.reviews.list()))
    print("Missing review:", to_json(service.reviews.get("7", "4")))

    # Equipment desk
    service.equipment.add(100, "Pressure washer")
    print("Rent 100:", service.equipment.rent(100))
    print("Rent 999:", to_json(service.equipment.rent(999)))
    print(service.equipment.deliver(100, 7, "03/01/2024").message)


if __name__ == "__main__":
    main()
