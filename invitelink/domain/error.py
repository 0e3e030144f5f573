"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvitationLinkError(DomainError):
    """Base error for invitation links that cannot be trusted."""

    pass


class FormatError(InvitationLinkError):
    """Raised when a field's raw value fails its format check."""

    def __init__(self, key: str, value: str | None):
        self.key = key
        self.value = value
        super().__init__(f"Invalid value '{value}' for key '{key}' in invitation link")


class UrlParamValidatorError(FormatError):
    """Raised by field validators for a malformed URL parameter."""

    pass


class MissingRequiredFieldError(InvitationLinkError):
    """Raised when a required key is absent from the link."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing required key '{key}' in invitation link")


class NoValidPeersError(InvitationLinkError):
    """Raised when no peer pair survives validation."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"No valid peer addresses found in invitation link '{url}'")


class NestingTooDeepError(InvitationLinkError):
    """Raised when nested sub-payloads exceed the allowed depth."""

    def __init__(self, key: str, max_depth: int):
        self.key = key
        self.max_depth = max_depth
        super().__init__(
            f"Nested value for key '{key}' exceeds maximum depth {max_depth}"
        )


class InvalidUrlError(InvitationLinkError):
    """Raised when the link is not a URL we know how to read."""

    def __init__(self, url: str, reason: str = "Invalid url"):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason}: '{url}'")
