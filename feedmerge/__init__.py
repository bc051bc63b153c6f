"""RFC 822 date conversion and RSS 0.91 item parsing."""

__version__ = "0.1.0"
__all__ = ["rfc822", "rss091"]