from enum import Enum


class StorageKey(str, Enum):
    """Keys the service keeps in the key-value store."""

    PATTERN_OBJECT = "PATTERN_OBJECT"
    URL = "URL"
    SEARCH_RESULTS = "SEARCH_RESULTS"
    SEARCH_RESULTS_TRUNCATED = "SEARCH_RESULTS_TRUNCATED"
