import re
from typing import Dict, List, Optional

from bson import ObjectId
from pymongo.errors import PyMongoError

from common import extensions
from common.exception.exceptions import BusinessError
from common.enum.error_code import APIError
from common.utils.object_id import to_object_id
from common.utils.media_storage import stage_file, discard_file, upload_on_cloud, remove_from_cloud
from common.utils.pipeline import owner_lookup_stages, owner_projection
from common.utils.logging_utils import get_logger
from app.dto.common import ApiResponseDto
from app.models.video import VideoRepository
from app.models.comment import CommentRepository

logger = get_logger('video_service')


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _has_file(file_storage) -> bool:
    return file_storage is not None and bool(getattr(file_storage, 'filename', None))


def _uploaded_url(response: Dict) -> str:
    return response.get('secure_url') or response.get('url')


class VideoService:
    @staticmethod
    def build_list_pipeline(owner_id: ObjectId, query: Optional[str] = None,
                            sort_by: Optional[str] = None, sort_type: Optional[str] = None) -> List[Dict]:
        pipeline = []

        if query:
            pattern = {'$regex': re.escape(query), '$options': 'i'}
            pipeline.append({
                '$match': {'$or': [{'title': pattern}, {'description': pattern}]}
            })

        pipeline.append({'$match': {'owner': owner_id}})
        pipeline.extend(owner_lookup_stages())
        pipeline.append({
            '$project': {
                '_id': 1,
                'videoFile': 1,
                'thumbnail': 1,
                'title': 1,
                'description': 1,
                'duration': 1,
                'views': 1,
                'isPublished': 1,
                **owner_projection(),
                'createdAt': 1,
                'updatedAt': 1,
            }
        })

        if sort_by and sort_type:
            pipeline.append({'$sort': {sort_by: 1 if sort_type == 'asc' else -1}})

        return pipeline

    @staticmethod
    def get_all_videos(user_id: Optional[str], query: Optional[str], sort_by: Optional[str],
                       sort_type: Optional[str], page: int = 1, limit: int = 10) -> ApiResponseDto:
        owner_id = to_object_id(user_id, 'userId')

        pipeline = VideoService.build_list_pipeline(owner_id, query, sort_by, sort_type)
        result = VideoRepository(extensions.mongo_db).find_page(pipeline, page, limit)

        if result.total_docs == 0:
            raise BusinessError(APIError.VIDEO_LIST_EMPTY)

        return ApiResponseDto(status=200, data=result, message='Videos fetched successfully')

    @staticmethod
    def publish_video(title: Optional[str], description: Optional[str], video_file, thumbnail_file,
                      owner_id: ObjectId) -> ApiResponseDto:
        if _is_blank(title) or _is_blank(description):
            raise BusinessError(APIError.VIDEO_FIELDS_REQUIRED)
        if not _has_file(video_file):
            raise BusinessError(APIError.VIDEO_FILE_REQUIRED)
        if not _has_file(thumbnail_file):
            raise BusinessError(APIError.THUMBNAIL_REQUIRED)

        staged = []
        try:
            video_path = stage_file(video_file)
            staged.append(video_path)
            thumbnail_path = stage_file(thumbnail_file)
            staged.append(thumbnail_path)

            uploaded_video = upload_on_cloud(video_path)
            if not uploaded_video:
                raise BusinessError(APIError.VIDEO_UPLOAD_FAIL)

            uploaded_thumbnail = upload_on_cloud(thumbnail_path)
            if not uploaded_thumbnail:
                remove_from_cloud(uploaded_video)
                raise BusinessError(APIError.THUMBNAIL_UPLOAD_FAIL)
        finally:
            for path in staged:
                discard_file(path)

        try:
            video = VideoRepository(extensions.mongo_db).create(
                video_file=_uploaded_url(uploaded_video),
                thumbnail=_uploaded_url(uploaded_thumbnail),
                title=title.strip(),
                description=description.strip(),
                duration=float(uploaded_video.get('duration') or 0.0),
                owner_id=owner_id
            )
        except PyMongoError:
            logger.error("Video insert failed, removing uploaded assets")
            remove_from_cloud(uploaded_video)
            remove_from_cloud(uploaded_thumbnail)
            raise

        return ApiResponseDto(status=200, data=video, message='Video uploaded successfully')

    @staticmethod
    def get_video_by_id(video_id: str) -> ApiResponseDto:
        video = VideoRepository(extensions.mongo_db).find_by_id(to_object_id(video_id, 'videoId'))
        if not video:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        return ApiResponseDto(status=200, data=video, message='Video details fetched successfully')

    @staticmethod
    def _get_owned_video(video_id: str, user_id: ObjectId):
        oid = to_object_id(video_id, 'videoId')
        video = VideoRepository(extensions.mongo_db).find_by_id(oid)

        if not video:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)
        if video.owner_id != str(user_id):
            raise BusinessError(APIError.AUTH_FORBIDDEN)

        return oid, video

    @staticmethod
    def update_video(video_id: str, user_id: ObjectId, title: Optional[str] = None,
                     description: Optional[str] = None, thumbnail_file=None) -> ApiResponseDto:
        if _is_blank(title) and _is_blank(description):
            raise BusinessError(APIError.VIDEO_UPDATE_EMPTY)

        oid, _ = VideoService._get_owned_video(video_id, user_id)

        fields = {}
        if not _is_blank(title):
            fields['title'] = title.strip()
        if not _is_blank(description):
            fields['description'] = description.strip()

        if _has_file(thumbnail_file):
            thumbnail_path = None
            try:
                thumbnail_path = stage_file(thumbnail_file)
                uploaded_thumbnail = upload_on_cloud(thumbnail_path)
            finally:
                discard_file(thumbnail_path)

            if not uploaded_thumbnail:
                raise BusinessError(APIError.THUMBNAIL_UPLOAD_FAIL)
            fields['thumbnail'] = _uploaded_url(uploaded_thumbnail)

        updated = VideoRepository(extensions.mongo_db).update_fields(oid, fields)
        if not updated:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        return ApiResponseDto(status=200, data=updated, message='Video updated successfully')

    @staticmethod
    def delete_video(video_id: str, user_id: ObjectId) -> ApiResponseDto:
        oid, _ = VideoService._get_owned_video(video_id, user_id)

        deleted = VideoRepository(extensions.mongo_db).delete(oid)
        if not deleted:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        CommentRepository(extensions.mongo_db).delete_by_video_id(oid)

        return ApiResponseDto(status=200, data=deleted, message='Video deleted successfully')

    @staticmethod
    def toggle_publish_status(video_id: str, user_id: ObjectId) -> ApiResponseDto:
        oid, video = VideoService._get_owned_video(video_id, user_id)

        updated = VideoRepository(extensions.mongo_db).update_fields(
            oid, {'isPublished': not video.is_published}
        )
        if not updated:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        logger.info(f"Video {oid} publish status -> {updated.is_published}")
        return ApiResponseDto(status=200, data=updated, message='Publish status toggled')
