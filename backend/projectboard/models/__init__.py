# Models package init
from projectboard.models.article import Article
from projectboard.models.search_type import SearchType
from projectboard.models.user_account import UserAccount

__all__ = ["Article", "SearchType", "UserAccount"]
