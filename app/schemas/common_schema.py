from marshmallow import Schema, fields, validate, EXCLUDE


class ApiResponseSchema(Schema):
    status = fields.Integer(metadata={'description': 'HTTP status code'})
    message = fields.String(metadata={'description': 'Human readable message'})


class PaginationRequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    page = fields.Integer(
        load_default=1,
        validate=validate.Range(min=1),
        metadata={'description': 'Page number (starts at 1)'}
    )
    limit = fields.Integer(
        load_default=10,
        validate=validate.Range(min=1, max=100),
        metadata={'description': 'Page size (1~100)'}
    )


class PageSchema(Schema):
    total_docs = fields.Integer(data_key='totalDocs', metadata={'description': 'Total matching documents'})
    limit = fields.Integer(metadata={'description': 'Page size'})
    page = fields.Integer(metadata={'description': 'Current page'})
    total_pages = fields.Integer(data_key='totalPages', metadata={'description': 'Total pages'})
    has_next_page = fields.Boolean(data_key='hasNextPage', metadata={'description': 'Whether a next page exists'})
    has_prev_page = fields.Boolean(data_key='hasPrevPage', metadata={'description': 'Whether a previous page exists'})


class OwnerSchema(Schema):
    username = fields.String(metadata={'description': 'Username'})
    full_name = fields.String(data_key='fullName', metadata={'description': 'Full name'})
    avatar = fields.String(metadata={'description': 'Avatar URL'})


def dump_owner(obj):
    """Joined owner document when present, otherwise the raw owner id."""
    if obj.owner is not None:
        return OwnerSchema().dump(obj.owner)
    return obj.owner_id
