# link-shortener/exceptions.py


class LinkStoreError(Exception):
    """Generic base class for link store exceptions."""

    pass


class LinkNotFoundError(LinkStoreError):
    """Raised when no link is stored under the requested token."""

    def __init__(self, token: str):
        super().__init__(f"URL not found: {token!r}")
        self.token = token
