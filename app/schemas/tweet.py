from marshmallow import Schema, fields, EXCLUDE

from app.schemas.common_schema import ApiResponseSchema


class TweetSchema(Schema):
    tweet_id = fields.String(data_key='_id', metadata={'description': 'Tweet ID'})
    content = fields.String(metadata={'description': 'Tweet content'})
    owner_id = fields.String(data_key='owner', metadata={'description': 'Owner user ID'})
    created_at = fields.DateTime(data_key='createdAt', metadata={'description': 'Created at (ISO 8601)'})
    updated_at = fields.DateTime(data_key='updatedAt', metadata={'description': 'Updated at (ISO 8601)'})


class TweetContentRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    content = fields.String(load_default=None, metadata={'description': 'Tweet content'})


class TweetResponseSchema(ApiResponseSchema):
    data = fields.Nested(TweetSchema, allow_none=True)


class TweetListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(TweetSchema))
