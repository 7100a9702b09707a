from shopify_orders.schemas.base import ShopifyModel


class CountResource(ShopifyModel):
    """Envelope of every ``*/count.json`` endpoint."""

    count: int = 0
