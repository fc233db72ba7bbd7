"""
Utility Functions Module
"""

import uuid


def generate_post_id() -> str:
    """
    Generate a post identifier

    Uses UUID4 in hex form, so ids are opaque and safe to embed in URLs and Redis keys.

    Returns:
        str: 32-character hex id

    Example:
        >>> generate_post_id()
        '5f0c6a3e9b2d4e1f8a7c6b5d4e3f2a1b'
    """
    return uuid.uuid4().hex
