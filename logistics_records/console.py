"""Console front-end: text menus over the logistics record tables.

Attributes are typed as a brace list such as ``{555-1000, Reno, 89501}``.
Every result is printed as the JSON text produced by :mod:`.serialization`.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .domain import FieldSpec, parse_int
from .repository import InMemoryRepository, is_failure
from .serialization import to_json
from .services import LogisticsService

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def parse_brace_list(text: Optional[str]) -> Optional[List[str]]:
    """Split ``{a, b, c}`` into trimmed parts; ``None`` when braces are missing."""
    if text is None:
        return None
    text = text.strip()
    if not text.startswith("{") or not text.endswith("}"):
        return None
    inner = text[1:-1].strip()
    if not inner:
        return []
    return [part.strip() for part in inner.split(",")]


class Console:
    """Menu loop driving a :class:`LogisticsService`."""

    def __init__(
        self,
        service: LogisticsService,
        *,
        input_fn: Optional[InputFn] = None,
        output_fn: Optional[OutputFn] = None,
    ) -> None:
        self.service = service
        self._input = input_fn or input
        self._output = output_fn or print
        self._entities: Dict[str, Tuple[str, InMemoryRepository]] = {
            "1": ("Warehouse", service.warehouses),
            "3": ("Customer", service.customers),
            "4": ("Employee", service.employees),
            "5": ("Order", service.orders),
            "6": ("Review", service.reviews),
        }

    # ------------------------------------------------------------------
    # I/O helpers
    # ------------------------------------------------------------------
    def println(self, text: str = "") -> None:
        self._output(text)

    def read_line(self, prompt: str) -> str:
        return (self._input(prompt) or "").strip()

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------
    def run(self) -> None:
        try:
            self._main_loop()
        except (EOFError, KeyboardInterrupt):
            self.println()
            self.println("Bye!")

    def _main_loop(self) -> None:
        while True:
            self.println()
            self.println("Main menu:")
            self.println("1. Warehouse")
            self.println("2. Equipment Management")
            self.println("3. Customer")
            self.println("4. Employee")
            self.println("5. Order")
            self.println("6. Review")
            self.println("0. Exit")
            choice = self.read_line("Please enter a number: ")
            if choice == "0":
                self.println("Bye!")
                return
            if choice == "2":
                self.equipment_menu()
            elif choice in self._entities:
                title, repo = self._entities[choice]
                self.entity_menu(title, repo)
            else:
                self.println(f"[Input Error] Unknown choice: {choice}")

    # ------------------------------------------------------------------
    # Record tables
    # ------------------------------------------------------------------
    def entity_menu(self, title: str, repo: InMemoryRepository) -> None:
        handlers = {
            "1": self.handle_create,
            "2": self.handle_update,
            "3": self.handle_query,
            "4": self.handle_delete,
        }
        while True:
            self.println()
            self.println(f"=== {title} Table ===")
            self.println("Current data:")
            self.println(to_json(repo.list()))
            self.println()
            self.println("Operations:")
            self.println("1. Create")
            self.println("2. Update")
            self.println("3. Query")
            self.println("4. Delete")
            self.println("5. Return to Main menu")
            op = self.read_line("Enter 1/2/3/4/5: ")
            if op == "5":
                return
            handler = handlers.get(op)
            if handler is None:
                self.println(f"[Input Error] Unknown operation: {op}")
                continue
            handler(title, repo)

    def handle_create(self, title: str, repo: InMemoryRepository) -> None:
        specs = repo.creation_specs()
        self.println()
        self.println(f"Create {title}")
        self.println("Please input attributes in format (with braces):")
        attrs = self._read_attributes(specs)
        if attrs is None:
            return
        result = repo.create(**attrs)
        self.println("Created:" if not is_failure(result) else "Create failed:")
        self.println(to_json(result))

    def handle_update(self, title: str, repo: InMemoryRepository) -> None:
        self.println()
        self.println(f"Update {title}")
        keys = self._read_keys(repo)
        self.println("Please input attributes in format:")
        attrs = self._read_attributes(repo.record_type.value_specs())
        if attrs is None:
            return
        result = repo.update(*keys, **attrs)
        self.println("Updated (or error):")
        self.println(to_json(result))

    def handle_delete(self, title: str, repo: InMemoryRepository) -> None:
        self.println()
        self.println(f"Delete {title}")
        keys = self._read_keys(repo)
        result = repo.delete(*keys)
        self.println("Deleted (or error):")
        self.println(to_json(result))

    def handle_query(self, title: str, repo: InMemoryRepository) -> None:
        options = list(repo.queryable_fields)
        options.extend(f"{name}Range" for name in repo.range_fields)
        while True:
            self.println()
            self.println("Query by which field?")
            self.println("Options: " + " | ".join(options))
            self.println(f"Or enter 9 to return to {title} menu.")
            choice = self.read_line("Field: ")
            if choice == "9":
                return
            if choice not in options:
                self.println(f"[Input Error] Unknown field: {choice}")
                continue
            if choice.endswith("Range") and choice[: -len("Range")] in repo.range_fields:
                results = self._query_range(repo, choice[: -len("Range")])
            else:
                results = self._query_exact(repo, choice)
            if results is None:
                continue
            self.println("Query result:")
            self.println(to_json(results))
            if not self._after_query(title, repo):
                return

    def _after_query(self, title: str, repo: InMemoryRepository) -> bool:
        """Offer the next step; ``False`` means go back to the table menu."""
        self.println()
        self.println("Next step:")
        self.println(
            f"1. Create   2. Update   3. Query   4. Delete   5. Back to {title} menu"
        )
        choice = self.read_line("Enter 1/2/3/4/5: ")
        if choice == "5":
            return False
        actions = {
            "1": self.handle_create,
            "2": self.handle_update,
            "4": self.handle_delete,
        }
        if choice in actions:
            actions[choice](title, repo)
        elif choice != "3":
            self.println(f"[Input Error] Unknown choice: {choice}")
        return True

    def _query_exact(self, repo: InMemoryRepository, field: str) -> Optional[List[Any]]:
        if repo.record_type.spec_for(field).kind is int:
            value = parse_int(self.read_line(f"Enter {field} (int): "))
            if value is None:
                self.println(f"[Input Error] {field} must be an integer.")
                return None
            return repo.find_by(field, value)
        return repo.find_by(field, self.read_line(f"Enter {field}: "))

    def _query_range(self, repo: InMemoryRepository, field: str) -> Optional[List[Any]]:
        low = parse_int(self.read_line(f"Enter min {field} (int): "))
        high = parse_int(self.read_line(f"Enter max {field} (int): "))
        if low is None or high is None:
            self.println(f"[Input Error] {field} bounds must be integers.")
            return None
        return repo.find_in_range(field, low, high)

    def _read_keys(self, repo: InMemoryRepository) -> List[str]:
        return [
            self.read_line(f"Enter {spec.wire}: ")
            for spec in repo.record_type.key_specs()
        ]

    def _read_attributes(self, specs: Sequence[FieldSpec]) -> Optional[Dict[str, Any]]:
        self.println("{" + ", ".join(spec.wire for spec in specs) + "}")
        parts = parse_brace_list(self.read_line("> "))
        if parts is None or len(parts) != len(specs):
            self.println(f"[Input Error] Expect {len(specs)} attributes inside braces.")
            return None
        attrs: Dict[str, Any] = {}
        bad: List[str] = []
        for spec, raw in zip(specs, parts):
            if spec.kind is int:
                value = parse_int(raw)
                if value is None:
                    bad.append(spec.wire)
                attrs[spec.attr] = value
            else:
                attrs[spec.attr] = raw
        if bad:
            self.println(f"[Input Error] {' / '.join(bad)} must be integers.")
            return None
        return attrs

    # ------------------------------------------------------------------
    # Equipment desk
    # ------------------------------------------------------------------
    def equipment_menu(self) -> None:
        handlers = {
            "1": self.handle_equipment_add,
            "2": self.handle_equipment_rent,
            "3": self.handle_equipment_return,
            "4": self.handle_equipment_delivery,
            "5": self.handle_equipment_pickup,
        }
        while True:
            self.println()
            self.println("=== Equipment Management ===")
            self.println("Current data:")
            self.println(to_json(self.service.equipment.list()))
            self.println()
            self.println("Operations:")
            self.println("1. Add Equipment")
            self.println("2. Rent Equipment")
            self.println("3. Return Equipment")
            self.println("4. Deliver Equipment")
            self.println("5. Pickup Equipment")
            self.println("6. Return to Main menu")
            op = self.read_line("Enter 1/2/3/4/5/6: ")
            if op == "6":
                return
            handler = handlers.get(op)
            if handler is None:
                self.println(f"[Input Error] Unknown operation: {op}")
                continue
            handler()

    def _read_equipment_id(self, prompt: str) -> Optional[int]:
        equipment_id = parse_int(self.read_line(prompt))
        if equipment_id is None:
            self.println("[Input Error] Equipment id must be an integer. Exiting...")
        return equipment_id

    def handle_equipment_add(self) -> None:
        self.println()
        self.println("=== Equipment Add ===")
        equipment_id = self._read_equipment_id("Please enter a unique equipment id: ")
        if equipment_id is None:
            return
        name = self.read_line("Please enter the equipment name: ")
        result = self.service.equipment.add(equipment_id, name)
        if is_failure(result):
            self.println(to_json(result))
            return
        self.println(f"Success! Equipment {name} added with id {equipment_id}.")

    def handle_equipment_rent(self) -> None:
        self.println()
        self.println("=== Equipment Rent ===")
        equipment_id = self._read_equipment_id("Please enter a unique equipment id: ")
        if equipment_id is None:
            return
        result = self.service.equipment.rent(equipment_id)
        if is_failure(result):
            self.println(
                "[Input Error] This id does not correspond with any equipment. Exiting..."
            )
            return
        self.println(f"Success! Equipment {result} rented with id {equipment_id}.")

    def handle_equipment_return(self) -> None:
        self.println()
        self.println("=== Return Equipment ===")
        equipment_id = self._read_equipment_id("Enter id of the equipment to return: ")
        if equipment_id is None:
            return
        self.println(self.service.equipment.return_equipment(equipment_id).message)
        self.println("Exiting...")

    def handle_equipment_delivery(self) -> None:
        self._drone_trip("Delivery", "delivery", self.service.equipment.deliver)

    def handle_equipment_pickup(self) -> None:
        self._drone_trip("Pickup", "pickup", self.service.equipment.pickup)

    def _drone_trip(self, title: str, noun: str, action: Callable[..., Any]) -> None:
        self.println()
        self.println(f"=== Equipment {title} ===")
        equipment_id = self._read_equipment_id("Please enter the unique equipment id: ")
        if equipment_id is None:
            return
        drone_id = parse_int(self.read_line("Please enter the drone id: "))
        if drone_id is None:
            self.println("[Input Error] Drone id must be an integer. Exiting...")
            return
        date = self.read_line(f"Please enter the {noun} date (MM/DD/YYYY): ")
        self.println(action(equipment_id, drone_id, date).message)
        self.println("Exiting...")


__all__ = ["Console", "parse_brace_list", "parse_int"]
