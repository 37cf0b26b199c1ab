import os
import sys
from typing import Optional

_DEBUG_ENABLED = bool(os.getenv("RONDO_DEBUG"))


def debug(*args, **kwargs):
    if _DEBUG_ENABLED:
        prefix = "\033[1m[DEBUG]\033[0m"
        print(prefix, *args, file=sys.stderr, **kwargs)


def info(*args, **kwargs):
    prefix = "\033[1;34m[INFO]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


def warn(*args, **kwargs):
    prefix = "\033[1;33m[WARNING]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


def error(*args, **kwargs):
    prefix = "\033[1;31m[ERROR]\033[0m"
    print(prefix, *args, file=sys.stderr, **kwargs)


# Identifier utilities


def format_ids(ids, limit: Optional[int] = None) -> str:
    """Render edge ids as a comma-separated list, optionally cut to `limit` (1, 2, 3 (+4 more))."""
    ids = list(ids)
    if limit is None or len(ids) <= limit:
        return ", ".join(str(i) for i in ids)
    return ", ".join(str(i) for i in ids[:limit]) + f" (+{len(ids) - limit} more)"
