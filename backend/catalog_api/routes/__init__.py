# Routes package init
"""
Catalog API — API Routes Package
=================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - resources.py: five routes per resource (/books, /jobs, /api/products)
    - health.py:    GET /health

Routes are built by factories that receive their collaborators (handlers,
store) from the application factory in main.py.
"""
