from bson import ObjectId
from bson.errors import InvalidId

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError


def to_object_id(value, name='id') -> ObjectId:
    if isinstance(value, ObjectId):
        return value

    if not value:
        raise BusinessError(APIError.INVALID_INPUT_VALUE, f"{name} is required")

    #NOTE: ObjectId() also accepts 12-byte strings, so only 24-char hex ids are let through
    if not isinstance(value, str) or len(value) != 24:
        raise BusinessError(APIError.INVALID_OBJECT_ID, f"Invalid {name}")

    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise BusinessError(APIError.INVALID_OBJECT_ID, f"Invalid {name}")
