"""Concrete repositories for the logistics tables."""

from __future__ import annotations

from typing import List, Tuple, Union

from .domain import Customer, Employee, Order, Review, Warehouse
from .repository import (
    InMemoryRepository,
    NotFound,
    SequentialRepository,
    ValidationError,
)


class WarehouseRepository(SequentialRepository[Warehouse]):
    """Warehouses with sequential ids starting at ``"0"``."""

    record_type = Warehouse
    key_attrs = ("id",)
    key_field = "id"
    queryable_fields = (
        "city",
        "zipCode",
        "managerSSN",
        "phoneNumber",
        "street",
        "equipmentCapacity",
        "droneCapacity",
    )
    range_fields = ("equipmentCapacity", "droneCapacity")

    def create(  # type: ignore[override]
        self,
        phone_number: str,
        city: str,
        zip_code: str,
        street: str,
        equipment_capacity: int,
        drone_capacity: int,
        manager_ssn: str,
    ) -> Union[Warehouse, ValidationError]:
        return super().create(
            phone_number=phone_number,
            city=city,
            zip_code=zip_code,
            street=street,
            equipment_capacity=equipment_capacity,
            drone_capacity=drone_capacity,
            manager_ssn=manager_ssn,
        )

    def update(  # type: ignore[override]
        self,
        warehouse_id: str,
        phone_number: str,
        city: str,
        zip_code: str,
        street: str,
        equipment_capacity: int,
        drone_capacity: int,
        manager_ssn: str,
    ) -> Union[Warehouse, NotFound, ValidationError]:
        return super().update(
            warehouse_id,
            phone_number=phone_number,
            city=city,
            zip_code=zip_code,
            street=street,
            equipment_capacity=equipment_capacity,
            drone_capacity=drone_capacity,
            manager_ssn=manager_ssn,
        )

    def query_by_city(self, city: str) -> List[Warehouse]:
        return self.find_by("city", city)

    def query_by_zip_code(self, zip_code: str) -> List[Warehouse]:
        return self.find_by("zipCode", zip_code)

    def query_by_manager_ssn(self, manager_ssn: str) -> List[Warehouse]:
        return self.find_by("managerSSN", manager_ssn)

    def query_by_phone_number(self, phone_number: str) -> List[Warehouse]:
        return self.find_by("phoneNumber", phone_number)

    def query_by_street(self, street: str) -> List[Warehouse]:
        return self.find_by("street", street)

    def query_by_equipment_capacity(self, capacity: int) -> List[Warehouse]:
        return self.find_by("equipmentCapacity", capacity)

    def query_by_equipment_capacity_range(
        self, min_inclusive: int, max_inclusive: int
    ) -> List[Warehouse]:
        return self.find_in_range("equipmentCapacity", min_inclusive, max_inclusive)

    def query_by_drone_capacity(self, capacity: int) -> List[Warehouse]:
        return self.find_by("droneCapacity", capacity)

    def query_by_drone_capacity_range(
        self, min_inclusive: int, max_inclusive: int
    ) -> List[Warehouse]:
        return self.find_in_range("droneCapacity", min_inclusive, max_inclusive)


class CustomerRepository(SequentialRepository[Customer]):
    """Customers with sequential user ids starting at ``"0"``."""

    record_type = Customer
    key_attrs = ("user_id",)
    key_field = "userId"
    queryable_fields = (
        "city",
        "zipCode",
        "email",
        "phoneNumber",
        "custName",
        "type",
        "custStartDate",
    )

    def create(  # type: ignore[override]
        self,
        cust_start_date: str,
        city: str,
        zip_code: str,
        street: str,
        email: str,
        phone_number: str,
        cust_name: str,
        type: str,
    ) -> Union[Customer, ValidationError]:
        return super().create(
            cust_start_date=cust_start_date,
            city=city,
            zip_code=zip_code,
            street=street,
            email=email,
            phone_number=phone_number,
            cust_name=cust_name,
            type=type,
        )

    def update(  # type: ignore[override]
        self,
        user_id: str,
        cust_start_date: str,
        city: str,
        zip_code: str,
        street: str,
        email: str,
        phone_number: str,
        cust_name: str,
        type: str,
    ) -> Union[Customer, NotFound, ValidationError]:
        return super().update(
            user_id,
            cust_start_date=cust_start_date,
            city=city,
            zip_code=zip_code,
            street=street,
            email=email,
            phone_number=phone_number,
            cust_name=cust_name,
            type=type,
        )

    def query_by_city(self, city: str) -> List[Customer]:
        return self.find_by("city", city)

    def query_by_zip_code(self, zip_code: str) -> List[Customer]:
        return self.find_by("zipCode", zip_code)

    def query_by_email(self, email: str) -> List[Customer]:
        return self.find_by("email", email)

    def query_by_phone_number(self, phone_number: str) -> List[Customer]:
        return self.find_by("phoneNumber", phone_number)

    def query_by_cust_name(self, cust_name: str) -> List[Customer]:
        return self.find_by("custName", cust_name)

    def query_by_type(self, type: str) -> List[Customer]:
        return self.find_by("type", type)

    def query_by_cust_start_date(self, cust_start_date: str) -> List[Customer]:
        return self.find_by("custStartDate", cust_start_date)


class EmployeeRepository(InMemoryRepository[str, Employee]):
    """Employees keyed by the SSN supplied at creation.

    Creating an employee with an SSN that is already stored replaces the
    earlier record.
    """

    record_type = Employee
    key_attrs = ("ssn",)
    key_field = "ssn"
    queryable_fields = ("name", "phoneNumber", "sex", "salary")
    range_fields = ("salary",)

    def create(  # type: ignore[override]
        self, ssn: str, name: str, phone_number: str, sex: str, salary: int
    ) -> Union[Employee, ValidationError]:
        return super().create(
            ssn=ssn, name=name, phone_number=phone_number, sex=sex, salary=salary
        )

    def update(  # type: ignore[override]
        self, ssn: str, name: str, phone_number: str, sex: str, salary: int
    ) -> Union[Employee, NotFound, ValidationError]:
        return super().update(
            ssn, name=name, phone_number=phone_number, sex=sex, salary=salary
        )

    def query_by_name(self, name: str) -> List[Employee]:
        return self.find_by("name", name)

    def query_by_phone_number(self, phone_number: str) -> List[Employee]:
        return self.find_by("phoneNumber", phone_number)

    def query_by_sex(self, sex: str) -> List[Employee]:
        return self.find_by("sex", sex)

    def query_by_salary(self, salary: int) -> List[Employee]:
        return self.find_by("salary", salary)

    def query_by_salary_range(
        self, min_inclusive: int, max_inclusive: int
    ) -> List[Employee]:
        return self.find_in_range("salary", min_inclusive, max_inclusive)


class OrderRepository(SequentialRepository[Order]):
    """Orders with sequential order ids starting at ``"0"``."""

    record_type = Order
    key_attrs = ("order_id",)
    key_field = "orderId"
    queryable_fields = (
        "custUserId",
        "orderStartDate",
        "estimatedArrivalDate",
        "actualArrivalDate",
        "dueDate",
        "actualReturnDate",
    )

    def create(  # type: ignore[override]
        self,
        order_start_date: str,
        estimated_arrival_date: str,
        actual_arrival_date: str,
        due_date: str,
        actual_return_date: str,
        cust_user_id: str,
    ) -> Union[Order, ValidationError]:
        return super().create(
            order_start_date=order_start_date,
            estimated_arrival_date=estimated_arrival_date,
            actual_arrival_date=actual_arrival_date,
            due_date=due_date,
            actual_return_date=actual_return_date,
            cust_user_id=cust_user_id,
        )

    def update(  # type: ignore[override]
        self,
        order_id: str,
        order_start_date: str,
        estimated_arrival_date: str,
        actual_arrival_date: str,
        due_date: str,
        actual_return_date: str,
        cust_user_id: str,
    ) -> Union[Order, NotFound, ValidationError]:
        return super().update(
            order_id,
            order_start_date=order_start_date,
            estimated_arrival_date=estimated_arrival_date,
            actual_arrival_date=actual_arrival_date,
            due_date=due_date,
            actual_return_date=actual_return_date,
            cust_user_id=cust_user_id,
        )

    def query_by_cust_user_id(self, cust_user_id: str) -> List[Order]:
        return self.find_by("custUserId", cust_user_id)

    def query_by_order_start_date(self, order_start_date: str) -> List[Order]:
        return self.find_by("orderStartDate", order_start_date)

    def query_by_estimated_arrival_date(self, value: str) -> List[Order]:
        return self.find_by("estimatedArrivalDate", value)

    def query_by_actual_arrival_date(self, value: str) -> List[Order]:
        return self.find_by("actualArrivalDate", value)

    def query_by_due_date(self, due_date: str) -> List[Order]:
        return self.find_by("dueDate", due_date)

    def query_by_actual_return_date(self, value: str) -> List[Order]:
        return self.find_by("actualReturnDate", value)


ReviewKey = Tuple[str, str]


class ReviewRepository(InMemoryRepository[ReviewKey, Review]):
    """Reviews keyed by ``(order_id, user_id)``.

    Failures report the field ``compositeKey`` with the value
    ``"<order_id>|<user_id>"``.
    """

    record_type = Review
    key_attrs = ("order_id", "user_id")
    key_field = "compositeKey"
    queryable_fields = ("orderId", "userId", "ratings", "comments")

    def create(  # type: ignore[override]
        self, order_id: str, user_id: str, comments: str, ratings: int
    ) -> Union[Review, ValidationError]:
        return super().create(
            order_id=order_id, user_id=user_id, comments=comments, ratings=ratings
        )

    def get(self, order_id: str, user_id: str) -> Union[Review, NotFound]:  # type: ignore[override]
        return super().get((order_id, user_id))

    def update(  # type: ignore[override]
        self, order_id: str, user_id: str, comments: str, ratings: int
    ) -> Union[Review, NotFound, ValidationError]:
        return super().update((order_id, user_id), comments=comments, ratings=ratings)

    def delete(self, order_id: str, user_id: str) -> Union[Review, NotFound]:  # type: ignore[override]
        return super().delete((order_id, user_id))

    def query_by_order_id(self, order_id: str) -> List[Review]:
        return self.find_by("orderId", order_id)

    def query_by_user_id(self, user_id: str) -> List[Review]:
        return self.find_by("userId", user_id)

    def query_by_ratings(self, ratings: int) -> List[Review]:
        return self.find_by("ratings", ratings)

    def query_by_comments(self, comments: str) -> List[Review]:
        return self.find_by("comments", comments)


__all__ = [
    "CustomerRepository",
    "EmployeeRepository",
    "OrderRepository",
    "ReviewKey",
    "ReviewRepository",
    "WarehouseRepository",
]
