PRODUCT_FIELDS = (
    'id', 'name', 'description', 'permalink', 'sku', 'inventory', 'price',
    'assets', 'image', 'seo', 'sort_order', 'extra_fields', 'attributes',
    'categories', 'related_products', 'meta', 'active', 'created', 'updated',
)

CATEGORY_FIELDS = (
    'id', 'name', 'slug', 'parent_id', 'description', 'products', 'assets',
    'children', 'meta', 'created', 'updated',
)


def _project(entity, fields):
    # Absent fields stay absent; None is only carried when the source sends null.
    document = {'objectID': entity.get('id')}
    for field in fields:
        if field in entity:
            document[field] = entity[field]
    return document


def transform_product(product):
    return _project(product, PRODUCT_FIELDS)


def transform_category(category):
    return _project(category, CATEGORY_FIELDS)
