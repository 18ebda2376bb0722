from abc import ABC, abstractmethod

import requests


class BaseIndexClient(ABC):
    @abstractmethod
    def make_session(self) -> requests.Session:
        """Create and configure an HTTP session with auth headers."""

    @abstractmethod
    def upsert(self, index_name, document) -> dict:
        """Create or replace a document keyed by its objectID. Returns {objectID, taskID}."""

    @abstractmethod
    def delete(self, index_name, object_id):
        """Remove a single document from the index."""
