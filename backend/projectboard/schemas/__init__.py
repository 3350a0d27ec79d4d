# Schemas package init
"""
ProjectBoard Backend: DTOs and API Schemas
===========================================

    - pagination.py:    PageRequest, SortOrder, Page
    - user_account.py:  UserAccountDto, UserAccountResponse
    - article.py:       ArticleDto, ArticleWithCommentsDto, ArticleUpdateDto,
                        request/response models
    - common.py:        ErrorResponse, HealthResponse

DTOs are frozen and are the only shapes routes depend on; ORM entities stop
at the service layer.
"""
