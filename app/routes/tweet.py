from flask import g
from flask_smorest import Blueprint

from app.schemas.tweet import (
    TweetContentRequestSchema, TweetResponseSchema, TweetListResponseSchema
)
from app.services.tweet_service import TweetService
from common.decorator.auth_decorators import login_required

tweet_blueprint = Blueprint(
    'tweet',
    __name__,
    url_prefix='/api/v1/tweets',
    description='User tweet (community post) API'
)


@tweet_blueprint.route('', methods=['POST'])
@login_required
@tweet_blueprint.arguments(TweetContentRequestSchema)
@tweet_blueprint.response(200, TweetResponseSchema)
@tweet_blueprint.doc(security=[{"BearerAuth": []}])
def create_tweet(data):
    return TweetService.create_tweet(g.user_id, data.get('content'))


@tweet_blueprint.route('/user/<user_id>', methods=['GET'])
@tweet_blueprint.response(200, TweetListResponseSchema)
def get_user_tweets(user_id):
    return TweetService.get_user_tweets(user_id)


@tweet_blueprint.route('/<tweet_id>', methods=['PATCH'])
@login_required
@tweet_blueprint.arguments(TweetContentRequestSchema)
@tweet_blueprint.response(200, TweetResponseSchema)
@tweet_blueprint.doc(security=[{"BearerAuth": []}])
def update_tweet(data, tweet_id):
    return TweetService.update_tweet(tweet_id, g.user_id, data.get('content'))


@tweet_blueprint.route('/<tweet_id>', methods=['DELETE'])
@login_required
@tweet_blueprint.response(200, TweetResponseSchema)
@tweet_blueprint.doc(security=[{"BearerAuth": []}])
def delete_tweet(tweet_id):
    return TweetService.delete_tweet(tweet_id, g.user_id)
