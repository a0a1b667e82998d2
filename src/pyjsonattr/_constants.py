"""Default settings for path access and the JSON codec."""

DEFAULT_PATH_DELIMITER = "."
"""Separator used to split string paths into keys."""

JSON_ENSURE_ASCII = False
"""Keep non-ASCII characters as-is in encoded text."""

JSON_SEPARATORS = (",", ":")
"""Compact item and key separators for encoded text."""

JSON_ALLOW_NAN = False
"""Reject NaN and Infinity, which have no JSON representation."""

HOOK_NAME_PREFIX = "json_"
"""Prefix of lifecycle hook names, one hook per registered attribute."""
