"""sigv4gate — offline AWS account identification and allow-listing for SigV4 requests."""

__version__ = "0.1.0"
