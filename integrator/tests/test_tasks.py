from unittest.mock import MagicMock, patch

from django.test import SimpleTestCase, override_settings

from integrator.config import IntegrationConfig
from integrator.dispatcher import MISSING_CREDENTIALS_MESSAGE
from integrator.tasks import resync_catalog


def _source():
    source = MagicMock()
    source.fetch_page.side_effect = lambda entity_type, page: {
        'data': [{'id': f"{entity_type}_{n}"} for n in range(3)],
        'meta': {'pagination': {'total_pages': 1}},
    }
    return source


class TestResyncCatalogTask(SimpleTestCase):
    @patch('integrator.dispatcher.import_string')
    def test_resync_returns_tally(self, import_string):
        client_class = MagicMock()
        client_class.return_value.upsert.return_value = {'objectID': 'x', 'taskID': 1}
        source = _source()
        import_string.side_effect = lambda path: {
            'integrator.clients.algolia_client.AlgoliaClient': client_class,
            'integrator.sources.commerce_source.CommerceApiSource': lambda: source,
        }[path]

        result = resync_catalog()

        self.assertEqual(result, {'message': 'Sync completed!', 'products': 3, 'categories': 3})
        client_class.assert_called_once_with('TESTAPP', 'test-admin-key')

    @override_settings(ALGOLIA_ADMIN_API_KEY='')
    def test_resync_without_credentials(self):
        result = resync_catalog()

        self.assertEqual(result, {'error': MISSING_CREDENTIALS_MESSAGE})


class TestIntegrationConfig(SimpleTestCase):
    def test_from_settings(self):
        config = IntegrationConfig.from_settings()

        self.assertEqual(config.application_id, 'TESTAPP')
        self.assertEqual(config.products_index, 'products')
        self.assertEqual(config.categories_index, 'categories')
        self.assertTrue(config.has_credentials)

    @override_settings(ALGOLIA_PRODUCTS_INDEX='shop_products')
    def test_index_name_override(self):
        self.assertEqual(IntegrationConfig.from_settings().products_index, 'shop_products')

    def test_defaults(self):
        config = IntegrationConfig()

        self.assertFalse(config.has_credentials)
        self.assertEqual(config.products_index, 'products')
        self.assertEqual(config.categories_index, 'categories')
