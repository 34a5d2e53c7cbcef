from datetime import datetime
from typing import Dict, List, Optional
from dataclasses import dataclass, field

from bson import ObjectId
from pymongo import ReturnDocument

from app.dto.common import PageDto
from app.models.user import OwnerSummary, split_owner
from common.utils.logging_utils import get_logger
from common.utils.pipeline import run_paginated

logger = get_logger('video')


@dataclass
class Video:
    video_id: Optional[str] = None
    video_file: Optional[str] = None
    thumbnail: Optional[str] = None
    title: str = ''
    description: str = ''
    duration: float = 0.0
    views: int = 0
    is_published: bool = True
    owner_id: Optional[str] = None
    owner: Optional[OwnerSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'Video':
        owner_id, owner = split_owner(data.get('owner'))
        return cls(
            video_id=str(data['_id']) if data.get('_id') is not None else None,
            video_file=data.get('videoFile'),
            thumbnail=data.get('thumbnail'),
            title=data.get('title', ''),
            description=data.get('description', ''),
            duration=data.get('duration') or 0.0,
            views=data.get('views', 0),
            is_published=data.get('isPublished', True),
            owner_id=owner_id,
            owner=owner,
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt')
        )


class VideoRepository:

    COLLECTION_NAME = 'videos'

    def __init__(self, db):
        self.collection = db[self.COLLECTION_NAME]

    def find_by_id(self, video_id: ObjectId) -> Optional[Video]:
        doc = self.collection.find_one({'_id': video_id})
        return Video.from_dict(doc) if doc else None

    def create(self, video_file: str, thumbnail: str, title: str, description: str,
               duration: float, owner_id: ObjectId) -> Video:
        now = datetime.utcnow()
        doc = {
            'videoFile': video_file,
            'thumbnail': thumbnail,
            'title': title,
            'description': description,
            'duration': duration,
            'views': 0,
            'isPublished': True,
            'owner': owner_id,
            'createdAt': now,
            'updatedAt': now
        }
        result = self.collection.insert_one(doc)
        doc['_id'] = result.inserted_id

        logger.info(f"Video created: {result.inserted_id} (owner={owner_id})")
        return Video.from_dict(doc)

    def update_fields(self, video_id: ObjectId, fields: Dict) -> Optional[Video]:
        doc = self.collection.find_one_and_update(
            {'_id': video_id},
            {'$set': {**fields, 'updatedAt': datetime.utcnow()}},
            return_document=ReturnDocument.AFTER
        )
        return Video.from_dict(doc) if doc else None

    def delete(self, video_id: ObjectId) -> Optional[Video]:
        doc = self.collection.find_one_and_delete({'_id': video_id})
        if doc:
            logger.info(f"Video deleted: {video_id}")
        return Video.from_dict(doc) if doc else None

    def find_page(self, pipeline: List[Dict], page: int, limit: int) -> PageDto:
        docs, total_docs = run_paginated(self.collection, pipeline, page, limit)
        return PageDto(
            page=page,
            limit=limit,
            total_docs=total_docs,
            docs=[Video.from_dict(doc) for doc in docs]
        )
