"""
Pytest configuration and shared fixtures for the record tables.
"""
import pytest

from logistics_records import (
    CustomerRepository,
    EmployeeRepository,
    EquipmentDesk,
    LogisticsService,
    OrderRepository,
    ReviewRepository,
    WarehouseRepository,
)


@pytest.fixture
def warehouses():
    return WarehouseRepository()


@pytest.fixture
def customers():
    return CustomerRepository()


@pytest.fixture
def employees():
    return EmployeeRepository()


@pytest.fixture
def orders():
    return OrderRepository()


@pytest.fixture
def reviews():
    return ReviewRepository()


@pytest.fixture
def equipment():
    return EquipmentDesk()


@pytest.fixture
def service():
    return LogisticsService()
