from datetime import datetime
from typing import Dict, List, Optional
from dataclasses import dataclass

from bson import ObjectId
from pymongo import ReturnDocument

from app.dto.common import PageDto
from app.models.user import OwnerSummary, split_owner
from common.utils.logging_utils import get_logger
from common.utils.pipeline import run_paginated

logger = get_logger('comment')


@dataclass
class Comment:
    comment_id: Optional[str] = None
    content: str = ''
    video_id: Optional[str] = None
    owner_id: Optional[str] = None
    owner: Optional[OwnerSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'Comment':
        owner_id, owner = split_owner(data.get('owner'))
        return cls(
            comment_id=str(data['_id']) if data.get('_id') is not None else None,
            content=data.get('content', ''),
            video_id=str(data['video']) if data.get('video') is not None else None,
            owner_id=owner_id,
            owner=owner,
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt')
        )


class CommentRepository:

    COLLECTION_NAME = 'comments'

    def __init__(self, db):
        self.collection = db[self.COLLECTION_NAME]

    def find_by_id(self, comment_id: ObjectId) -> Optional[Comment]:
        doc = self.collection.find_one({'_id': comment_id})
        return Comment.from_dict(doc) if doc else None

    def create(self, content: str, video_id: ObjectId, owner_id: ObjectId) -> Comment:
        now = datetime.utcnow()
        doc = {
            'content': content,
            'video': video_id,
            'owner': owner_id,
            'createdAt': now,
            'updatedAt': now
        }
        result = self.collection.insert_one(doc)
        doc['_id'] = result.inserted_id
        return Comment.from_dict(doc)

    def update_content(self, comment_id: ObjectId, content: str) -> Optional[Comment]:
        doc = self.collection.find_one_and_update(
            {'_id': comment_id},
            {'$set': {'content': content, 'updatedAt': datetime.utcnow()}},
            return_document=ReturnDocument.AFTER
        )
        return Comment.from_dict(doc) if doc else None

    def delete(self, comment_id: ObjectId) -> Optional[Comment]:
        doc = self.collection.find_one_and_delete({'_id': comment_id})
        return Comment.from_dict(doc) if doc else None

    def delete_by_video_id(self, video_id: ObjectId) -> int:
        result = self.collection.delete_many({'video': video_id})
        if result.deleted_count:
            logger.info(f"Deleted {result.deleted_count} comments of video {video_id}")
        return result.deleted_count

    def find_page(self, pipeline: List[Dict], page: int, limit: int) -> PageDto:
        docs, total_docs = run_paginated(self.collection, pipeline, page, limit)
        return PageDto(
            page=page,
            limit=limit,
            total_docs=total_docs,
            docs=[Comment.from_dict(doc) for doc in docs]
        )
