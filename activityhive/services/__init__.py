"""
ActivityHive Backend — Services Layer
======================================

What:  Business logic between routes (HTTP) and MongoStore (persistence).

Service Inventory:
    - CollectionService: list every document of a resolved collection
    - OrderService: validate and insert orders
    - ProductService: validate and merge-update products by integer id
"""
