from functools import wraps
from flask import request, g

from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils import decode_token, to_object_id

def login_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get('Authorization')

        if not auth_header or not auth_header.startswith("Bearer "):
            raise BusinessError(APIError.AUTH_INVALID_TOKEN)

        token = auth_header.split(" ", 1)[1].strip()
        payload = decode_token(token)

        if payload.get('type') != 'access' or not payload.get('sub'):
            raise BusinessError(APIError.AUTH_INVALID_TOKEN)

        try:
            g.user_id = to_object_id(payload['sub'], 'userId')
        except BusinessError:
            raise BusinessError(APIError.AUTH_INVALID_TOKEN)

        return f(*args, **kwargs)
    return decorated_function
