"""
VidTube Application
Flask based video sharing REST backend (videos, comments, tweets)
"""

from urllib.parse import quote_plus

from flask import Flask
from flask_cors import CORS
from pymongo import MongoClient
import logging
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration
from sentry_sdk.integrations.pymongo import PyMongoIntegration
from common.extensions import api
import common.extensions as extensions
from common.utils.logging_utils import setup_logger
from common.utils.media_storage import init_cloudinary


def _build_mongo_uri(config):
    if config.get('MONGODB_URI'):
        return config['MONGODB_URI']

    mongo_host = config.get('MONGO_HOST', 'localhost')
    mongo_port = config.get('MONGO_PORT', 27017)
    mongo_username = config.get('MONGO_USERNAME')
    mongo_password = config.get('MONGO_PASSWORD')

    if mongo_username and mongo_password:
        return f"mongodb://{quote_plus(mongo_username)}:{quote_plus(mongo_password)}@{mongo_host}:{mongo_port}/"
    return f"mongodb://{mongo_host}:{mongo_port}/"


def create_app(config_name='default', mongo_client=None):
    """
    Application Factory Pattern

    mongo_client: an already built client (tests pass a mongomock client);
    when omitted a pymongo client is created from the config and pinged.
    """
    app = Flask(__name__)

    from common.config.config import config
    config_class = config.get(config_name, config['default'])
    app.config.from_object(config_class)

    app.json.ensure_ascii = False

    if app.config.get('SENTRY_DSN'):
        sentry_sdk.init(
            dsn=app.config['SENTRY_DSN'],
            integrations=[
                FlaskIntegration(),
                PyMongoIntegration(),
            ],
            environment=app.config.get('SENTRY_ENVIRONMENT', 'development'),
            traces_sample_rate=app.config.get('SENTRY_TRACES_SAMPLE_RATE', 1.0),
            send_default_pii=False,
            attach_stacktrace=True,
        )

    log_level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'))
    logger = setup_logger(app, log_level, log_to_file=app.config.get('LOG_TO_FILE', True))

    if not app.config.get('TESTING'):
        required = [
            'MONGO_DB_NAME', 'JWT_SECRET_KEY',
            'CLOUDINARY_CLOUD_NAME', 'CLOUDINARY_API_KEY', 'CLOUDINARY_API_SECRET'
        ]
        missing = [k for k in required if not app.config.get(k)]
        if missing:
            raise RuntimeError(f"Missing required environment variables: {missing}")

    app.config['API_TITLE'] = 'VidTube API'
    app.config['API_VERSION'] = 'v1'
    app.config['OPENAPI_VERSION'] = '3.0.3'
    app.config['OPENAPI_URL_PREFIX'] = '/'
    app.config['OPENAPI_SWAGGER_UI_PATH'] = '/swagger'
    app.config['OPENAPI_SWAGGER_UI_URL'] = 'https://cdn.jsdelivr.net/npm/swagger-ui-dist/'
    app.config['OPENAPI_REDOC_PATH'] = '/redoc'
    app.config['OPENAPI_REDOC_URL'] = 'https://cdn.jsdelivr.net/npm/redoc@latest/bundles/redoc.standalone.js'

    app.config['API_SPEC_OPTIONS'] = {
        'components': {
            'securitySchemes': {
                'BearerAuth': {
                    'type': 'http',
                    'scheme': 'bearer',
                    'bearerFormat': 'JWT',
                    'description': 'Access token issued by the user service (without the Bearer prefix)'
                }
            }
        }
    }

    CORS(app,
         supports_credentials=True,
         origins=app.config.get('CORS_ORIGINS', []),
         allow_headers=["Content-Type", "Authorization", "Accept", "X-Requested-With"],
         expose_headers=["Authorization", "Content-Type"],
         methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
         max_age=3600)

    api.init_app(app)

    if mongo_client is None:
        mongo_uri = _build_mongo_uri(app.config)
        logger.info("MongoDB connection attempt")

        try:
            mongo_client = MongoClient(
                mongo_uri,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=5000
            )
            mongo_client.admin.command('ping')
            logger.info("MongoDB connected")
        except Exception as e:
            logger.error(f"MongoDB connection failed: {e}")
            raise

    extensions.mongo_client = mongo_client
    extensions.mongo_db = mongo_client[app.config['MONGO_DB_NAME']]
    app.mongo = extensions.mongo_db

    init_cloudinary(app)

    from app.routes import video_blueprint, comment_blueprint, tweet_blueprint

    api.register_blueprint(video_blueprint)
    api.register_blueprint(comment_blueprint)
    api.register_blueprint(tweet_blueprint)

    from common.exception.error_handler import register_error_handlers
    register_error_handlers(app)

    @app.route('/health')
    def health_check():
        return {
            'status': 'healthy',
            'service': 'vidtube'
        }, 200

    return app
