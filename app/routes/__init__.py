"""
Routes package
Flask Blueprints for each resource
"""

from app.routes.video import video_blueprint
from app.routes.comment import comment_blueprint
from app.routes.tweet import tweet_blueprint

__all__ = [
    'video_blueprint',
    'comment_blueprint',
    'tweet_blueprint'
]
