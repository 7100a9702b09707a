"""
Acceso a la API REST de Shopify.
"""
