from dataclasses import dataclass

from django.conf import settings


@dataclass(frozen=True)
class IntegrationConfig:
    application_id: str = ''
    admin_api_key: str = ''
    products_index: str = 'products'
    categories_index: str = 'categories'

    @classmethod
    def from_settings(cls):
        return cls(
            application_id=getattr(settings, 'ALGOLIA_APPLICATION_ID', ''),
            admin_api_key=getattr(settings, 'ALGOLIA_ADMIN_API_KEY', ''),
            products_index=getattr(settings, 'ALGOLIA_PRODUCTS_INDEX', 'products'),
            categories_index=getattr(settings, 'ALGOLIA_CATEGORIES_INDEX', 'categories'),
        )

    @property
    def has_credentials(self):
        return bool(self.application_id and self.admin_api_key)
