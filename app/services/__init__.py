"""
Services package
Request validation and orchestration for each resource

- video_service: video listing, publishing, updates and publish toggling
- comment_service: video comments
- tweet_service: user tweets
"""

__all__ = []
