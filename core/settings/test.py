from .base import *  # noqa: F401,F403

ALGOLIA_APPLICATION_ID = 'TESTAPP'
ALGOLIA_ADMIN_API_KEY = 'test-admin-key'
ALGOLIA_PRODUCTS_INDEX = 'products'
ALGOLIA_CATEGORIES_INDEX = 'categories'

COMMERCE_API_BASE_URL = 'https://api.chec.test/v1'
COMMERCE_API_KEY = 'sk_test_123'

CELERY_TASK_ALWAYS_EAGER = True
