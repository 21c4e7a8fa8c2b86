from abc import ABC, abstractmethod
from typing import Iterable, Mapping


class BaseConnector(ABC):
    name: str

    @abstractmethod
    def fetch_listings(self) -> Iterable[Mapping]:  # pragma: no cover - interface
        """Fetch raw listing payloads from the source."""

    @abstractmethod
    def parse_listing(self, payload: Mapping) -> Mapping:  # pragma: no cover - interface
        """Turn a source payload into a raw listing record."""

    @abstractmethod
    def normalize_fields(self, parsed: Mapping) -> Mapping:  # pragma: no cover - interface
        """Derive marca/modelo/version while keeping every original field."""
