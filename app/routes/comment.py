from flask import g
from flask_smorest import Blueprint

from app.schemas.common_schema import PaginationRequestSchema
from app.schemas.comment import (
    CommentPageResponseSchema,
    CommentContentRequestSchema, CommentResponseSchema
)
from app.services.comment_service import CommentService
from common.decorator.auth_decorators import login_required

comment_blueprint = Blueprint(
    'comment',
    __name__,
    url_prefix='/api/v1/comments',
    description='Video comment API'
)


@comment_blueprint.route('/<video_id>', methods=['GET'])
@comment_blueprint.arguments(PaginationRequestSchema, location='query')
@comment_blueprint.response(200, CommentPageResponseSchema)
def get_video_comments(args, video_id):
    return CommentService.get_video_comments(video_id, args.get('page', 1), args.get('limit', 10))


@comment_blueprint.route('/<video_id>', methods=['POST'])
@login_required
@comment_blueprint.arguments(CommentContentRequestSchema)
@comment_blueprint.response(200, CommentResponseSchema)
@comment_blueprint.doc(security=[{"BearerAuth": []}])
def add_comment(data, video_id):
    return CommentService.add_comment(video_id, g.user_id, data.get('content'))


@comment_blueprint.route('/c/<comment_id>', methods=['PATCH'])
@login_required
@comment_blueprint.arguments(CommentContentRequestSchema)
@comment_blueprint.response(200, CommentResponseSchema)
@comment_blueprint.doc(security=[{"BearerAuth": []}])
def update_comment(data, comment_id):
    return CommentService.update_comment(comment_id, g.user_id, data.get('content'))


@comment_blueprint.route('/c/<comment_id>', methods=['DELETE'])
@login_required
@comment_blueprint.response(200, CommentResponseSchema)
@comment_blueprint.doc(security=[{"BearerAuth": []}])
def delete_comment(comment_id):
    return CommentService.delete_comment(comment_id, g.user_id)
