"""
Media storage helpers

Uploaded files are staged in UPLOAD_FOLDER and then forwarded to Cloudinary.
A staged file never outlives the request: upload_on_cloud removes it whether
the upload succeeded or not, and callers discard anything they staged but
did not upload.
"""

import os
import uuid
from pathlib import Path
from typing import Dict, Optional

import cloudinary
import cloudinary.uploader
from flask import current_app
from werkzeug.utils import secure_filename

from common.utils.logging_utils import get_logger

logger = get_logger('media_storage')


def init_cloudinary(app):
    cloudinary.config(
        cloud_name=app.config.get('CLOUDINARY_CLOUD_NAME'),
        api_key=app.config.get('CLOUDINARY_API_KEY'),
        api_secret=app.config.get('CLOUDINARY_API_SECRET'),
        secure=True
    )


def stage_file(file_storage) -> Path:
    upload_dir = Path(current_app.config['UPLOAD_FOLDER'])
    upload_dir.mkdir(parents=True, exist_ok=True)

    original_name = secure_filename(file_storage.filename or '') or 'upload'
    local_path = upload_dir / f"{uuid.uuid4().hex}_{original_name}"
    file_storage.save(str(local_path))

    logger.debug(f"Staged upload {original_name} at {local_path}")
    return local_path


def discard_file(local_path) -> None:
    if not local_path:
        return
    try:
        os.remove(local_path)
    except FileNotFoundError:
        pass


def upload_on_cloud(local_path, resource_type: str = 'auto') -> Optional[Dict]:
    if not local_path:
        return None

    try:
        response = cloudinary.uploader.upload(str(local_path), resource_type=resource_type)
        logger.info(f"Uploaded {Path(local_path).name} to Cloudinary: {response.get('url')}")
        return response
    except Exception as e:
        #NOTE: any provider failure is reported as None; callers turn it into a 500
        logger.error(f"Cloudinary upload failed for {local_path}: {e}")
        return None
    finally:
        discard_file(local_path)


def remove_from_cloud(upload_response: Optional[Dict]) -> bool:
    """Delete an already uploaded asset, given the response upload_on_cloud returned."""
    if not upload_response or not upload_response.get('public_id'):
        return False

    public_id = upload_response['public_id']
    try:
        result = cloudinary.uploader.destroy(
            public_id,
            resource_type=upload_response.get('resource_type', 'image')
        )
        return result.get('result') == 'ok'
    except Exception as e:
        logger.error(f"Cloudinary destroy failed for {public_id}: {e}")
        return False
