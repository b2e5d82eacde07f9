"""Exception classes raised while authenticating and decoding webhooks."""


class WebhookError(Exception):
    """Base exception for webhook verification and decoding."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 400):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class MissingHeadersError(WebhookError):
    """The event or signature header is absent or empty."""

    def __init__(self, missing: list[str]):
        super().__init__(
            "MISSING_HEADERS",
            f"Missing required header(s): {', '.join(missing)}",
            details={"missing": missing},
            status_code=400,
        )


class BodyReadError(WebhookError):
    """The request body could not be read in full."""

    def __init__(self, message: str = "Request body could not be read"):
        super().__init__("BODY_READ_ERROR", message, status_code=400)


class SignatureMismatchError(WebhookError):
    """The body does not match the declared signature."""

    def __init__(self, message: str = "Signature does not match"):
        super().__init__("SIGNATURE_MISMATCH", message, status_code=401)


class MalformedPayloadError(WebhookError):
    """The body is not a JSON:API document of the expected shape."""

    def __init__(self, message: str, details=None):
        super().__init__("MALFORMED_PAYLOAD", message, details, status_code=400)


class UnknownEntityKindError(WebhookError):
    """An ``included`` entry has a ``type`` this package does not model."""

    def __init__(self, kind: str, index: int):
        self.kind = kind
        self.index = index
        super().__init__(
            "UNKNOWN_ENTITY_KIND",
            f"Unsupported included resource type '{kind}' at index {index}",
            details={"kind": kind, "index": index},
            status_code=422,
        )
