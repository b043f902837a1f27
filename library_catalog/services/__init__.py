"""
Library Catalog — Services Layer
==================================

What:  Validation and SQL between the routes (HTTP) and the database.
How:   Services receive the per-request AsyncSession and either return a
       value or raise an application exception (see exceptions.py).

Service Inventory:
    - SeedService: creates tables and loads reference data at startup
    - BookService: list / get / create / update / delete books
    - ReferenceService: list authors and genres
"""
