"""Location entity — a street address that can be geocoded."""

from dataclasses import dataclass

from geokit.domain.value_objects.lat_lng import MappableRecord


@dataclass
class Location(MappableRecord):
    id: int | None
    name: str | None = None
    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    lat: float | None = None
    lng: float | None = None

    @property
    def address(self) -> str:
        return f"{self.street or ''} {self.city or ''},{self.state or ''} {self.postal_code or ''}".strip()
