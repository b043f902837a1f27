"""
Library Catalog — API Routes Package
======================================

Route Inventory:
    - books.py:    GET    /books            (paged list)
                   GET    /books/{id}       (detail)
                   POST   /books            (create)
                   PUT    /books/{id}       (replace all fields)
                   DELETE /books/{id}       (delete)
    - authors.py:  GET    /authors
    - genres.py:   GET    /genres
    - health.py:   GET    /health

Routes stay thin: read the request, call a service, set the status code.
Errors are raised by services and formatted by the handlers in main.py.
"""
