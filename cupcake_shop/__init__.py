"""
Cupcake Shop.

A guided cupcake order: quantity, flavor, pickup date, then a summary that
is shared and the order starts over.

Nothing is imported here so that cupcake_shop.main can load .env before any
module reads its settings.
"""
