"""Custom exceptions for the biodata browser."""


class BiodataError(Exception):
    """Base exception for biodata errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FetchError(BiodataError):
    """Raised when searching or fetching from Entrez fails."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class EntrezRequestError(FetchError):
    """Raised when an E-utilities request fails at the transport or HTTP level."""

    pass


class RecordDecodeError(FetchError):
    """Raised when an E-utilities response cannot be decoded."""

    pass


class UnknownPageError(BiodataError):
    """Raised when a page id does not resolve in the registry."""

    def __init__(self, page_id: int):
        super().__init__(f"Page not registered: {page_id}")
        self.page_id = page_id
