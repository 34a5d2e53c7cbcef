"""
Utils package

- jwt_utils: access token encoding / decoding
- object_id: path and query identifier parsing
- media_storage: staging uploads and forwarding them to Cloudinary
- pipeline: aggregation pipeline building blocks
"""

from common.utils.jwt_utils import (
    decode_token,
    create_access_token
)
from common.utils.object_id import to_object_id

__all__ = [
    'decode_token',
    'create_access_token',
    'to_object_id'
]
