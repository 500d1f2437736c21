"""Exceptions raised while decoding torrent metadata."""


class TorrentError(Exception):
    pass


class MalformedDocumentError(TorrentError):
    """Input is not bencoding, the top level is not a dict, or 'info' is unusable."""


class InvalidPieceHashesError(TorrentError):
    pass


class MissingRequiredFieldError(TorrentError):
    def __init__(self, field: str, message: str | None = None):
        super().__init__(message or f"Missing or invalid '{field}'")
        self.field = field


class InvalidFieldValueError(TorrentError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
