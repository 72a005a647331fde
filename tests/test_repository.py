"""
Tests for the generic repository contract

Covers identity assignment, full-replace updates, deletes, not-found results
and validation that happens before the store is touched.
"""
import threading

import pytest

from logistics_records import (
    InvalidFieldError,
    NotFound,
    UnknownFieldError,
    ValidationError,
    Warehouse,
    is_failure,
)
from tests.factories import warehouse_fields


class TestSequentialIdentity:
    """Tests for auto-assigned identities"""

    def test_first_ids_count_up_from_zero(self, warehouses):
        ids = [warehouses.create(**warehouse_fields()).id for _ in range(5)]

        assert ids == ["0", "1", "2", "3", "4"]

    def test_next_id_on_empty_store(self, warehouses):
        assert warehouses.next_id() == "0"

    def test_next_id_follows_highest_key_not_count(self, warehouses):
        for _ in range(3):
            warehouses.create(**warehouse_fields())
        warehouses.delete("1")

        assert warehouses.create(**warehouse_fields()).id == "3"

    def test_deleting_highest_id_allows_reuse(self, warehouses):
        warehouses.create(**warehouse_fields())
        warehouses.create(**warehouse_fields())
        warehouses.delete("1")

        assert warehouses.create(**warehouse_fields()).id == "1"

    def test_non_numeric_keys_are_ignored(self, warehouses):
        warehouses._items["north"] = Warehouse("north", "555", "Elko", "89801", "Idaho St", 1, 1, "x")

        assert warehouses.next_id() == "0"
        warehouses.create(**warehouse_fields())
        assert warehouses.next_id() == "1"
        assert "north" in warehouses

    def test_concurrent_creates_never_share_an_id(self, warehouses):
        def worker():
            for _ in range(50):
                warehouses.create(**warehouse_fields())

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [record.id for record in warehouses.list()]
        assert len(ids) == 200
        assert sorted(ids, key=int) == [str(i) for i in range(200)]


class TestReadOperations:
    """Tests for get and list"""

    def test_get_returns_record(self, warehouses):
        created = warehouses.create(**warehouse_fields())

        assert warehouses.get("0") == created

    def test_get_missing_returns_not_found(self, warehouses):
        result = warehouses.get("42")

        assert result == NotFound(field="id", value="42")
        assert is_failure(result)

    def test_list_empty(self, warehouses):
        assert warehouses.list() == []

    def test_list_keeps_creation_order(self, warehouses):
        cities = ["Reno", "Sparks", "Elko", "Ely"]
        for city in cities:
            warehouses.create(**warehouse_fields(city=city))

        assert [w.city for w in warehouses.list()] == cities
        assert len(warehouses) == 4


class TestUpdate:
    """Tests for full-replace updates"""

    def test_update_replaces_every_field(self, warehouses):
        warehouses.create(**warehouse_fields())
        new_fields = warehouse_fields(
            phone_number="555-9999",
            city="Sparks",
            zip_code="89431",
            street="Victorian Ave",
            equipment_capacity=3,
            drone_capacity=0,
            manager_ssn="987-65-4321",
        )

        updated = warehouses.update("0", **new_fields)

        assert updated == Warehouse(id="0", **new_fields)
        assert warehouses.get("0") == updated

    def test_update_keeps_listing_position(self, warehouses):
        for city in ["Reno", "Sparks", "Elko"]:
            warehouses.create(**warehouse_fields(city=city))

        warehouses.update("0", **warehouse_fields(city="Fallon"))

        assert [w.city for w in warehouses.list()] == ["Fallon", "Sparks", "Elko"]

    def test_update_missing_does_not_create(self, warehouses):
        result = warehouses.update("7", **warehouse_fields())

        assert result == NotFound(field="id", value="7")
        assert len(warehouses) == 0

    def test_update_with_negative_capacity_leaves_store_unchanged(self, warehouses):
        original = warehouses.create(**warehouse_fields())

        result = warehouses.update("0", **warehouse_fields(equipment_capacity=-1))

        assert isinstance(result, ValidationError)
        assert result.field == "equipmentCapacity"
        assert warehouses.get("0") == original


class TestDelete:
    """Tests for delete"""

    def test_delete_returns_removed_record(self, warehouses):
        created = warehouses.create(**warehouse_fields())

        assert warehouses.delete("0") == created
        assert warehouses.get("0") == NotFound(field="id", value="0")

    def test_delete_missing_leaves_store_unchanged(self, warehouses):
        warehouses.create(**warehouse_fields())

        result = warehouses.delete("5")

        assert result == NotFound(field="id", value="5")
        assert len(warehouses) == 1


class TestValidation:
    """Tests for validation before mutation"""

    @pytest.mark.parametrize("field,wire", [
        ("equipment_capacity", "equipmentCapacity"),
        ("drone_capacity", "droneCapacity"),
    ])
    def test_negative_capacity_rejected_on_create(self, warehouses, field, wire):
        result = warehouses.create(**warehouse_fields(**{field: -1}))

        assert result == ValidationError(
            field=wire, value="-1", message=f"{wire} must be non-negative"
        )
        assert warehouses.list() == []
        assert warehouses.next_id() == "0"

    def test_zero_capacity_accepted(self, warehouses):
        result = warehouses.create(**warehouse_fields(equipment_capacity=0, drone_capacity=0))

        assert not is_failure(result)

    def test_wrong_type_rejected(self, warehouses):
        result = warehouses.create(**warehouse_fields(drone_capacity="2"))

        assert isinstance(result, ValidationError)
        assert result.field == "droneCapacity"

    def test_bool_is_not_an_integer(self, warehouses):
        result = warehouses.create(**warehouse_fields(drone_capacity=True))

        assert isinstance(result, ValidationError)

    def test_constructor_raises_invalid_field_error(self):
        with pytest.raises(InvalidFieldError) as excinfo:
            Warehouse(**warehouse_fields(id=" "))

        assert excinfo.value.field == "id"


class TestQueries:
    """Tests for exact and range queries"""

    def test_exact_match_is_case_sensitive(self, warehouses):
        warehouses.create(**warehouse_fields(city="Reno"))
        warehouses.create(**warehouse_fields(city="reno"))
        warehouses.create(**warehouse_fields(city="Reno "))

        assert [w.id for w in warehouses.query_by_city("Reno")] == ["0"]

    def test_no_partial_matches(self, warehouses):
        warehouses.create(**warehouse_fields(street="Main St"))

        assert warehouses.query_by_street("Main") == []

    def test_integer_query_does_not_match_text(self, warehouses):
        warehouses.create(**warehouse_fields(equipment_capacity=10))

        assert warehouses.find_by("equipmentCapacity", "10") == []
        assert len(warehouses.query_by_equipment_capacity(10)) == 1

    @pytest.mark.parametrize("wanted", [True, 1.0])
    def test_bool_or_float_does_not_match_integer(self, warehouses, wanted):
        warehouses.create(**warehouse_fields(drone_capacity=1))

        assert warehouses.query_by_drone_capacity(wanted) == []
        assert len(warehouses.query_by_drone_capacity(1)) == 1

    def test_range_bounds_are_inclusive(self, warehouses):
        for capacity in [4, 5, 7, 10, 11]:
            warehouses.create(**warehouse_fields(equipment_capacity=capacity))

        result = warehouses.query_by_equipment_capacity_range(5, 10)

        assert [w.equipment_capacity for w in result] == [5, 7, 10]

    def test_inverted_range_is_empty(self, warehouses):
        warehouses.create(**warehouse_fields(drone_capacity=3))

        assert warehouses.query_by_drone_capacity_range(5, 1) == []

    def test_unknown_field_raises(self, warehouses):
        with pytest.raises(UnknownFieldError):
            warehouses.find_by("id", "0")

    def test_range_on_text_field_raises(self, warehouses):
        with pytest.raises(UnknownFieldError):
            warehouses.find_in_range("city", 0, 1)
