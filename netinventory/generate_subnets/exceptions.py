"""Exception hierarchy for subnet inventory generation."""


class InventoryError(Exception):
    """Base exception for all inventory generation errors."""


class ConfigError(InventoryError):
    """An input file could not be read, decoded or validated."""


class APIError(InventoryError):
    """Remote inventory API request failed."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(APIError):
    """Remote inventory API rejected the account credentials."""


class MissingFieldError(InventoryError):
    """A raw VLAN or subnet record lacks a field the builder requires."""

    def __init__(self, record: str, field: str):
        self.record = record
        self.field = field
        super().__init__(f"{record} is missing required field '{field}'")


class InvalidVlanNumberError(InventoryError):
    """VLAN number cannot be placed into the IPv6 prefix template."""


class EmptyEndpointListError(InventoryError):
    """Endpoint list for an owner/router pair exists but is empty."""
