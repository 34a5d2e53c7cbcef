from marshmallow import Schema, fields, EXCLUDE

from app.schemas.common_schema import ApiResponseSchema, PageSchema, dump_owner


class CommentSchema(Schema):
    comment_id = fields.String(data_key='_id', metadata={'description': 'Comment ID'})
    content = fields.String(metadata={'description': 'Comment content'})
    video_id = fields.String(data_key='video', metadata={'description': 'Video ID'})
    owner = fields.Function(dump_owner, metadata={'description': 'Owner ID, or owner profile on list endpoints'})
    created_at = fields.DateTime(data_key='createdAt', metadata={'description': 'Created at (ISO 8601)'})
    updated_at = fields.DateTime(data_key='updatedAt', metadata={'description': 'Updated at (ISO 8601)'})


class CommentContentRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    content = fields.String(load_default=None, metadata={'description': 'Comment content'})


class CommentPageSchema(PageSchema):
    docs = fields.List(fields.Nested(CommentSchema), metadata={'description': 'Comments'})


class CommentResponseSchema(ApiResponseSchema):
    data = fields.Nested(CommentSchema, allow_none=True)


class CommentPageResponseSchema(ApiResponseSchema):
    data = fields.Nested(CommentPageSchema)
