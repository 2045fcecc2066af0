"""
ActivityHive Backend — API Routes Package
==========================================

Route Inventory:
    - health.py:       GET /                      (welcome text)
                       GET /health                (MongoDB ping)
    - collections.py:  GET /api/{collection_name} (all documents)
    - orders.py:       POST /api/orders           (create order)
    - products.py:     PUT /api/products/{id}     (merge-update product)

Routes stay thin: they pull dependencies and delegate to services.
Errors are raised as ActivityHiveError subclasses and rendered by the
handlers registered in main.py.
"""
