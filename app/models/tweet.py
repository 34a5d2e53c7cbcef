from datetime import datetime
from typing import Dict, List, Optional
from dataclasses import dataclass

from bson import ObjectId
from pymongo import ReturnDocument

from app.models.user import split_owner


@dataclass
class Tweet:
    tweet_id: Optional[str] = None
    content: str = ''
    owner_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'Tweet':
        owner_id, _ = split_owner(data.get('owner'))
        return cls(
            tweet_id=str(data['_id']) if data.get('_id') is not None else None,
            content=data.get('content', ''),
            owner_id=owner_id,
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt')
        )


class TweetRepository:

    COLLECTION_NAME = 'tweets'

    def __init__(self, db):
        self.collection = db[self.COLLECTION_NAME]

    def find_by_id(self, tweet_id: ObjectId) -> Optional[Tweet]:
        doc = self.collection.find_one({'_id': tweet_id})
        return Tweet.from_dict(doc) if doc else None

    def create(self, content: str, owner_id: ObjectId) -> Tweet:
        now = datetime.utcnow()
        doc = {
            'content': content,
            'owner': owner_id,
            'createdAt': now,
            'updatedAt': now
        }
        result = self.collection.insert_one(doc)
        doc['_id'] = result.inserted_id
        return Tweet.from_dict(doc)

    def update_content(self, tweet_id: ObjectId, content: str) -> Optional[Tweet]:
        doc = self.collection.find_one_and_update(
            {'_id': tweet_id},
            {'$set': {'content': content, 'updatedAt': datetime.utcnow()}},
            return_document=ReturnDocument.AFTER
        )
        return Tweet.from_dict(doc) if doc else None

    def delete(self, tweet_id: ObjectId) -> Optional[Tweet]:
        doc = self.collection.find_one_and_delete({'_id': tweet_id})
        return Tweet.from_dict(doc) if doc else None

    def aggregate(self, pipeline: List[Dict]) -> List[Tweet]:
        return [Tweet.from_dict(doc) for doc in self.collection.aggregate(pipeline)]
