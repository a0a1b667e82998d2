"""Exception hierarchy for JSON attribute access."""


class JSONAttributeError(Exception):
    """Base exception for JSON attribute access errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnknownAttributeError(JSONAttributeError):
    """Raised when path access is requested on an unregistered attribute."""


class InvalidPathError(JSONAttributeError):
    """Raised when a path specification has an unsupported shape."""


class InvalidArgumentError(JSONAttributeError):
    """Raised when an operation receives an operand of the wrong kind."""


class CodecError(JSONAttributeError):
    """Raised when a value cannot be encoded to or decoded from JSON text."""


# Sanitized user-facing error message constants
ERR_MSG_UNKNOWN_ATTRIBUTE = "unknown JSON attribute"
ERR_MSG_INVALID_REGISTRY = "invalid JSON attribute registry"
ERR_MSG_INVALID_PATH = "invalid key path"
ERR_MSG_INVALID_PATH_KEY = "invalid key in path"
ERR_MSG_INVALID_DELIMITER = "invalid path delimiter"
ERR_MSG_MERGE_REQUIRES_MAPPINGS = "deep merge requires mappings"
ERR_MSG_DEFAULTS_REQUIRE_MAPPING = "defaults must be a mapping"
ERR_MSG_DECODE_FAILED = "malformed JSON text"
ERR_MSG_ENCODE_FAILED = "value is not JSON serializable"
ERR_MSG_UNKNOWN_EVENT = "unsupported lifecycle event"
ERR_MSG_NO_ATTRIBUTES = "no JSON attributes given"
