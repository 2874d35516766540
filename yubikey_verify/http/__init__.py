from .fetcher import HttpFetcher, HttpxFetcher, Response

__all__ = [
    "HttpFetcher",
    "HttpxFetcher",
    "Response",
]
