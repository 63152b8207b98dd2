class FeedError(Exception):
    """Base class for every error raised by feed_normalizer."""


class FeedLoadError(FeedError):
    """Raised when a source cannot be fetched or parsed as an XML document."""


class UnrecognizedFormatError(FeedError):
    """Raised when a document is neither RSS nor Atom."""


class UnknownOptionError(FeedError):
    """Raised when reading or writing an option that does not exist."""


class CacheWriteError(FeedError):
    """Describes a cache entry that could not be persisted. Never fatal."""


class InvalidOptionError(FeedError, ValueError):
    """Raised when an option is given a value it cannot take."""
