from typing import Dict, List, Optional

from bson import ObjectId

from common import extensions
from common.exception.exceptions import BusinessError
from common.enum.error_code import APIError
from common.utils.object_id import to_object_id
from app.dto.common import ApiResponseDto
from app.models.tweet import TweetRepository


def _require_content(content: Optional[str]) -> str:
    if content is None or not content.strip():
        raise BusinessError(APIError.TWEET_CONTENT_REQUIRED)
    return content.strip()


class TweetService:
    @staticmethod
    def build_user_tweets_pipeline(owner_id: ObjectId) -> List[Dict]:
        return [
            {'$match': {'owner': owner_id}},
            {
                '$project': {
                    'content': 1,
                    'owner': 1,
                    'createdAt': 1,
                    'updatedAt': 1,
                }
            },
            {'$sort': {'createdAt': -1}},
        ]

    @staticmethod
    def create_tweet(user_id: ObjectId, content: Optional[str]) -> ApiResponseDto:
        tweet = TweetRepository(extensions.mongo_db).create(_require_content(content), user_id)
        return ApiResponseDto(status=200, data=tweet, message='Tweet created successfully')

    @staticmethod
    def get_user_tweets(user_id: str) -> ApiResponseDto:
        owner_id = to_object_id(user_id, 'userId')

        tweets = TweetRepository(extensions.mongo_db).aggregate(
            TweetService.build_user_tweets_pipeline(owner_id)
        )
        if not tweets:
            raise BusinessError(APIError.TWEET_LIST_EMPTY)

        return ApiResponseDto(status=200, data=tweets, message='Tweets fetched successfully')

    @staticmethod
    def _get_owned_tweet(tweet_id: str, user_id: ObjectId) -> ObjectId:
        oid = to_object_id(tweet_id, 'tweetId')
        tweet = TweetRepository(extensions.mongo_db).find_by_id(oid)

        if not tweet:
            raise BusinessError(APIError.TWEET_NOT_FOUND)
        if tweet.owner_id != str(user_id):
            raise BusinessError(APIError.AUTH_FORBIDDEN)

        return oid

    @staticmethod
    def update_tweet(tweet_id: str, user_id: ObjectId, content: Optional[str]) -> ApiResponseDto:
        oid = to_object_id(tweet_id, 'tweetId')
        content = _require_content(content)
        TweetService._get_owned_tweet(oid, user_id)

        tweet = TweetRepository(extensions.mongo_db).update_content(oid, content)
        if not tweet:
            raise BusinessError(APIError.TWEET_NOT_FOUND)

        return ApiResponseDto(status=200, data=tweet, message='Tweet edited successfully')

    @staticmethod
    def delete_tweet(tweet_id: str, user_id: ObjectId) -> ApiResponseDto:
        oid = TweetService._get_owned_tweet(tweet_id, user_id)

        tweet = TweetRepository(extensions.mongo_db).delete(oid)
        if not tweet:
            raise BusinessError(APIError.TWEET_NOT_FOUND)

        return ApiResponseDto(status=200, data=tweet, message='Tweet deleted successfully')
