"""
Resource services built on top of the shared Shopify REST client.
"""
