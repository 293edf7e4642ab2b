"""Data storage module for scraped patent information."""

from .connection import get_db_connection, init_database
from .models import DEFAULT_PATENTS_TO_DISPLAY, PatentRecord, UserScholarProfile
from .patents_db import (
    init_patents_table,
    list_patents_for_user,
    count_patents_for_user,
    delete_all_patents_for_user,
    insert_patents,
    replace_patents_for_user,
)
from .users_db import (
    init_users_table,
    store_user_profile,
    get_user_profile,
    get_scholar_profile_url,
    get_users_with_scholar_url,
)

__all__ = [
    "get_db_connection",
    "init_database",
    "DEFAULT_PATENTS_TO_DISPLAY",
    "PatentRecord",
    "UserScholarProfile",
    "init_patents_table",
    "list_patents_for_user",
    "count_patents_for_user",
    "delete_all_patents_for_user",
    "insert_patents",
    "replace_patents_for_user",
    "init_users_table",
    "store_user_profile",
    "get_user_profile",
    "get_scholar_profile_url",
    "get_users_with_scholar_url",
]
