"""
Tests for the service facade and demo data
"""
from logistics_records import LogisticsService, WarehouseRepository, seed_demo_data


class TestLogisticsService:
    """Tests for table wiring"""

    def test_injected_repository_is_used(self):
        warehouses = WarehouseRepository()

        service = LogisticsService(warehouse_repo=warehouses)

        assert service.warehouses is warehouses
        assert service.tables()["warehouses"] is warehouses

    def test_table_names(self, service):
        assert list(service.tables()) == ["warehouses", "customers", "employees", "orders", "reviews"]


class TestSeedDemoData:
    """Tests for seed_demo_data"""

    def test_seed_is_consistent(self, service):
        seed_demo_data(service)

        assert service.counts() == {
            "warehouses": 2,
            "customers": 1,
            "employees": 2,
            "orders": 1,
            "reviews": 1,
            "equipment": 2,
        }
        manager_ssns = {w.manager_ssn for w in service.warehouses.list()}
        assert manager_ssns <= {e.ssn for e in service.employees.list()}
        review = service.reviews.list()[0]
        assert service.reviews.get(review.order_id, review.user_id) == review

    def test_seed_skips_populated_tables(self, service):
        service.equipment.add(1, "Hose")

        seed_demo_data(service)

        assert service.counts()["warehouses"] == 0
