"""
Models package
MongoDB documents as dataclasses, plus one repository per collection

- Video / VideoRepository: videos
- Comment / CommentRepository: comments
- Tweet / TweetRepository: tweets
- OwnerSummary: public user fields joined in by $lookup (users is owned by the user service)
"""

from app.models.user import OwnerSummary
from app.models.video import Video, VideoRepository
from app.models.comment import Comment, CommentRepository
from app.models.tweet import Tweet, TweetRepository

__all__ = [
    'OwnerSummary',
    'Video',
    'VideoRepository',
    'Comment',
    'CommentRepository',
    'Tweet',
    'TweetRepository'
]
