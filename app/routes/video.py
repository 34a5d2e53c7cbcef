from flask import g
from flask_smorest import Blueprint

from app.schemas.video import (
    GetAllVideosRequestSchema, VideoPageResponseSchema,
    VideoFormSchema, PublishVideoFilesSchema, UpdateVideoFilesSchema,
    VideoResponseSchema
)
from app.services.video_service import VideoService
from common.decorator.auth_decorators import login_required

video_blueprint = Blueprint(
    'video',
    __name__,
    url_prefix='/api/v1/videos',
    description='Video upload, listing and management API'
)


@video_blueprint.route('', methods=['GET'])
@video_blueprint.arguments(GetAllVideosRequestSchema, location='query')
@video_blueprint.response(200, VideoPageResponseSchema)
def get_all_videos(args):
    return VideoService.get_all_videos(
        args.get('user_id'),
        args.get('query'),
        args.get('sort_by'),
        args.get('sort_type'),
        args.get('page', 1),
        args.get('limit', 10)
    )


@video_blueprint.route('', methods=['POST'])
@login_required
@video_blueprint.arguments(VideoFormSchema, location='form')
@video_blueprint.arguments(PublishVideoFilesSchema, location='files')
@video_blueprint.response(200, VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def publish_video(form, files):
    return VideoService.publish_video(
        form.get('title'),
        form.get('description'),
        files.get('video_file'),
        files.get('thumbnail'),
        g.user_id
    )


@video_blueprint.route('/<video_id>', methods=['GET'])
@video_blueprint.response(200, VideoResponseSchema)
def get_video_by_id(video_id):
    return VideoService.get_video_by_id(video_id)


@video_blueprint.route('/<video_id>', methods=['PATCH'])
@login_required
@video_blueprint.arguments(VideoFormSchema, location='form')
@video_blueprint.arguments(UpdateVideoFilesSchema, location='files')
@video_blueprint.response(200, VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def update_video(form, files, video_id):
    return VideoService.update_video(
        video_id,
        g.user_id,
        title=form.get('title'),
        description=form.get('description'),
        thumbnail_file=files.get('thumbnail')
    )


@video_blueprint.route('/<video_id>', methods=['DELETE'])
@login_required
@video_blueprint.response(200, VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def delete_video(video_id):
    return VideoService.delete_video(video_id, g.user_id)


@video_blueprint.route('/toggle/publish/<video_id>', methods=['PATCH'])
@login_required
@video_blueprint.response(200, VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_publish_status(video_id):
    return VideoService.toggle_publish_status(video_id, g.user_id)
