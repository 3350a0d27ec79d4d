# Repositories package init
"""
ProjectBoard Backend: Repositories (Persistence Boundary)
==========================================================

    - bindings.py:                 searchable-field allow-list and sort columns
    - article_repository.py:       paged article queries, lookup, save, delete
    - user_account_repository.py:  author lookup

Repositories receive the request's AsyncSession through their constructor
and are handed to services explicitly (see services/dependencies.py).
"""
