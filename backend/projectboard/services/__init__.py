# Services package init
"""
ProjectBoard Backend: Services Layer
=====================================

What:  Business logic between routes (HTTP) and repositories (persistence).
How:   Services receive repositories through their constructors and return
       DTOs. FastAPI builds them per request in dependencies.py.

Service Inventory:
    - ArticleService:      search, lookup, create, partial update, delete, hashtags
    - UserAccountService:  author lookup by user_id
"""
