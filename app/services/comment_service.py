from typing import Dict, List, Optional

from bson import ObjectId

from common import extensions
from common.exception.exceptions import BusinessError
from common.enum.error_code import APIError
from common.utils.object_id import to_object_id
from common.utils.pipeline import owner_lookup_stages, owner_projection
from app.dto.common import ApiResponseDto
from app.models.comment import CommentRepository
from app.models.video import VideoRepository


def _require_content(content: Optional[str]) -> str:
    if content is None or not content.strip():
        raise BusinessError(APIError.COMMENT_CONTENT_REQUIRED)
    return content.strip()


class CommentService:
    @staticmethod
    def build_list_pipeline(video_id: ObjectId) -> List[Dict]:
        return [
            {'$match': {'video': video_id}},
            *owner_lookup_stages(),
            {
                '$project': {
                    'content': 1,
                    'video': 1,
                    **owner_projection(),
                    'createdAt': 1,
                    'updatedAt': 1,
                }
            },
            {'$sort': {'updatedAt': -1}},
        ]

    @staticmethod
    def get_video_comments(video_id: str, page: int = 1, limit: int = 10) -> ApiResponseDto:
        oid = to_object_id(video_id, 'videoId')

        pipeline = CommentService.build_list_pipeline(oid)
        result = CommentRepository(extensions.mongo_db).find_page(pipeline, page, limit)

        if result.total_docs == 0:
            return ApiResponseDto(status=200, data=result, message='No comments found')

        return ApiResponseDto(status=200, data=result, message='Comments fetched successfully')

    @staticmethod
    def add_comment(video_id: str, user_id: ObjectId, content: Optional[str]) -> ApiResponseDto:
        oid = to_object_id(video_id, 'videoId')

        if not VideoRepository(extensions.mongo_db).find_by_id(oid):
            raise BusinessError(APIError.VIDEO_NOT_FOUND, 'Video not found for the videoId')

        comment = CommentRepository(extensions.mongo_db).create(
            content=_require_content(content),
            video_id=oid,
            owner_id=user_id
        )

        return ApiResponseDto(status=200, data=comment, message='Comment added successfully')

    @staticmethod
    def _get_owned_comment(comment_id: str, user_id: ObjectId) -> ObjectId:
        oid = to_object_id(comment_id, 'commentId')
        comment = CommentRepository(extensions.mongo_db).find_by_id(oid)

        if not comment:
            raise BusinessError(APIError.COMMENT_NOT_FOUND)
        if comment.owner_id != str(user_id):
            raise BusinessError(APIError.AUTH_FORBIDDEN)

        return oid

    @staticmethod
    def update_comment(comment_id: str, user_id: ObjectId, content: Optional[str]) -> ApiResponseDto:
        content = _require_content(content)
        oid = CommentService._get_owned_comment(comment_id, user_id)

        comment = CommentRepository(extensions.mongo_db).update_content(oid, content)
        if not comment:
            raise BusinessError(APIError.COMMENT_NOT_FOUND)

        return ApiResponseDto(status=200, data=comment, message='Comment updated successfully')

    @staticmethod
    def delete_comment(comment_id: str, user_id: ObjectId) -> ApiResponseDto:
        oid = CommentService._get_owned_comment(comment_id, user_id)

        comment = CommentRepository(extensions.mongo_db).delete(oid)
        if not comment:
            raise BusinessError(APIError.COMMENT_NOT_FOUND)

        return ApiResponseDto(status=200, data=comment, message='Comment deleted successfully')
