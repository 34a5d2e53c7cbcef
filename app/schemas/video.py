from marshmallow import Schema, fields, validate, EXCLUDE
from flask_smorest.fields import Upload

from app.schemas.common_schema import ApiResponseSchema, PaginationRequestSchema, PageSchema, dump_owner

SORTABLE_FIELDS = ('createdAt', 'updatedAt', 'views', 'duration', 'title')


class VideoSchema(Schema):
    video_id = fields.String(data_key='_id', metadata={'description': 'Video ID'})
    video_file = fields.String(data_key='videoFile', metadata={'description': 'Video file URL'})
    thumbnail = fields.String(metadata={'description': 'Thumbnail URL'})
    title = fields.String(metadata={'description': 'Title'})
    description = fields.String(metadata={'description': 'Description'})
    duration = fields.Float(metadata={'description': 'Duration (seconds)'})
    views = fields.Integer(metadata={'description': 'View count'})
    is_published = fields.Boolean(data_key='isPublished', metadata={'description': 'Publish flag'})
    owner = fields.Function(dump_owner, metadata={'description': 'Owner ID, or owner profile on list endpoints'})
    created_at = fields.DateTime(data_key='createdAt', metadata={'description': 'Created at (ISO 8601)'})
    updated_at = fields.DateTime(data_key='updatedAt', metadata={'description': 'Updated at (ISO 8601)'})


class GetAllVideosRequestSchema(PaginationRequestSchema):
    user_id = fields.String(
        data_key='userId',
        load_default=None,
        metadata={'description': 'Owner user ID (required)'}
    )
    query = fields.String(
        load_default=None,
        metadata={'description': 'Case-insensitive search on title and description'}
    )
    sort_by = fields.String(
        data_key='sortBy',
        load_default=None,
        validate=validate.OneOf(SORTABLE_FIELDS),
        metadata={'description': f'Sort field ({", ".join(SORTABLE_FIELDS)})'}
    )
    sort_type = fields.String(
        data_key='sortType',
        load_default=None,
        validate=validate.OneOf(('asc', 'desc')),
        metadata={'description': 'Sort direction (asc, desc)'}
    )


class VideoFormSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.String(load_default=None, metadata={'description': 'Title'})
    description = fields.String(load_default=None, metadata={'description': 'Description'})


class PublishVideoFilesSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    video_file = Upload(data_key='videoFile', load_default=None)
    thumbnail = Upload(load_default=None)


class UpdateVideoFilesSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    thumbnail = Upload(load_default=None)


class VideoPageSchema(PageSchema):
    docs = fields.List(fields.Nested(VideoSchema), metadata={'description': 'Videos'})


class VideoResponseSchema(ApiResponseSchema):
    data = fields.Nested(VideoSchema, allow_none=True)


class VideoPageResponseSchema(ApiResponseSchema):
    data = fields.Nested(VideoPageSchema)
