from .youtube_client import YouTubeAPIClient

__all__ = ["YouTubeAPIClient"]
