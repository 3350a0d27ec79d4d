# Routes package init
"""
ProjectBoard Backend: API Routes Package
=========================================

Route Inventory:
    - articles.py:     GET/POST /articles, GET/PATCH/DELETE /articles/{id},
                       GET /articles/search-hashtag, GET /articles/hashtags
    - article_api.py:  GET /api/articles (generic field filters)
    - health.py:       GET /health
    - params.py:       shared paging query parameters

Routes stay thin: parse the request, call a service, shape the response.
"""
