import re

_WHITESPACE_RE = re.compile(r"\s+")


def build_storage_key(user_id: str, timestamp_ms: int, title: str, file_name: str) -> str:
    """Build the object key: {user_id}/{timestamp_ms}-{title_with_underscores}.{ext}"""
    safe_title = _WHITESPACE_RE.sub("_", title)
    extension = file_name.rsplit(".", 1)[-1]
    return f"{user_id}/{timestamp_ms}-{safe_title}.{extension}"
