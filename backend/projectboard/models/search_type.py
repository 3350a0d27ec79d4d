from enum import Enum


class SearchType(str, Enum):
    """Fields a board search can target; each one has a containment binding."""

    TITLE = "TITLE"
    CONTENT = "CONTENT"
    HASHTAG = "HASHTAG"
    USER_ID = "USER_ID"
    NICKNAME = "NICKNAME"
