from abc import ABC, abstractmethod


class BasePaginatedSource(ABC):
    @abstractmethod
    def fetch_page(self, entity_type, page) -> dict:
        """Fetch one 1-indexed page of an entity type as {data, meta}."""
