# Services package init
"""
Catalog API — Services Layer
=============================

What:  Logic between the routes (HTTP) and the document store (persistence).

Service Inventory:
    - validation.py:       validate_document() → ValidationResult
    - resource_service.py: ResourceCreateHandler, PlaceholderHandler

Routes stay thin: they read the request, call a handler and turn its
outcome into a response.
"""
