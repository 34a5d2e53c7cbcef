from enum import Enum

class APIError(Enum):
    # 1. Common
    INTERNAL_SERVER_ERROR = ("C001", "Internal server error", 500)
    INVALID_INPUT_VALUE  = ("C002", "Invalid input value", 400)
    DB_ERROR = ("C003", "Database operation failed", 500)
    INVALID_OBJECT_ID = ("C004", "Invalid identifier", 400)

    # 2. Auth
    AUTH_TOKEN_EXPIRED   = ("A001", "Access token expired", 401)
    AUTH_INVALID_TOKEN   = ("A002", "Invalid access token", 401)
    AUTH_FORBIDDEN       = ("A003", "You are not allowed to modify this resource", 403)

    # 3. Video
    VIDEO_NOT_FOUND      = ("V001", "Video not found", 404)
    VIDEO_LIST_EMPTY     = ("V002", "No videos found", 400)
    VIDEO_FIELDS_REQUIRED = ("V003", "Title and description of video are required", 400)
    VIDEO_FILE_REQUIRED  = ("V004", "Video file is required", 400)
    THUMBNAIL_REQUIRED   = ("V005", "Video thumbnail is required", 400)
    VIDEO_UPDATE_EMPTY   = ("V006", "Title or description is required", 400)
    VIDEO_UPLOAD_FAIL    = ("V007", "Error uploading video file", 500)
    THUMBNAIL_UPLOAD_FAIL = ("V008", "Error uploading thumbnail", 500)

    # 4. Comment
    COMMENT_NOT_FOUND    = ("M001", "Comment not found", 404)
    COMMENT_CONTENT_REQUIRED = ("M002", "Comment content must be provided", 400)

    # 5. Tweet
    TWEET_NOT_FOUND      = ("T001", "Tweet not found", 404)
    TWEET_LIST_EMPTY     = ("T002", "No tweets found", 404)
    TWEET_CONTENT_REQUIRED = ("T003", "Tweet content is required", 400)

    def __init__(self, code, message, status):
        self.code = code
        self.message = message
        self.status = status
