"""Error types raised while validating derivation inputs."""


class HutchError(ValueError):
    """Base class for every input problem that aborts a derivation."""


class InvalidSiteIdentifier(HutchError):
    def __init__(self, site: str, reason: str = "not an absolute URI with a host"):
        self.site = site
        super().__init__(f"Invalid site {site!r}: {reason}")


class EmptyAccount(HutchError):
    def __init__(self):
        super().__init__("Account name must not be empty.")


class EmptySecret(HutchError):
    def __init__(self):
        super().__init__("Master password must not be empty.")


class EncodingFailure(HutchError):
    def __init__(self, field: str, exc: UnicodeError):
        self.field = field
        super().__init__(f"{field} cannot be encoded as UTF-8: {exc.reason}")


__all__ = [
    "EmptyAccount",
    "EmptySecret",
    "EncodingFailure",
    "HutchError",
    "InvalidSiteIdentifier",
]
