from dataclasses import dataclass

from src.errors import EmptySnapshotError


@dataclass(frozen=True)
class ProductSnapshot:
    """Name and price of a product as rendered in one view of the shop."""

    name: str
    price: str

    def __post_init__(self):
        for field_name in ("name", "price"):
            value = getattr(self, field_name)
            if value is None or not str(value).strip():
                raise EmptySnapshotError(f"Product {field_name} is empty")
            object.__setattr__(self, field_name, str(value).strip())
