import mongomock
import pytest
from bson import ObjectId
from datetime import datetime
from pathlib import Path

import cloudinary.exceptions
import cloudinary.uploader

from app import create_app
from common import extensions
from common.utils.jwt_utils import create_access_token


@pytest.fixture(scope='session')
def app():
    return create_app('testing', mongo_client=mongomock.MongoClient())


@pytest.fixture(autouse=True)
def _clean_state(app, tmp_path):
    db = extensions.mongo_db
    for name in db.list_collection_names():
        db[name].delete_many({})

    app.config['UPLOAD_FOLDER'] = str(tmp_path / 'uploads')
    yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db():
    return extensions.mongo_db


@pytest.fixture()
def user_id():
    return ObjectId()


@pytest.fixture()
def auth_headers(app, user_id):
    with app.app_context():
        token = create_access_token(str(user_id))
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture()
def other_auth_headers(app):
    with app.app_context():
        token = create_access_token(str(ObjectId()))
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture()
def upload_dir(app):
    return Path(app.config['UPLOAD_FOLDER'])


@pytest.fixture()
def fake_cloudinary(monkeypatch):
    """Replace the Cloudinary uploader; set .fail_on to a filename fragment to make that upload fail."""

    class FakeUploader:
        def __init__(self):
            self.uploaded = []
            self.destroyed = []
            self.fail_on = None

        def upload(self, path, **options):
            if self.fail_on and self.fail_on in path:
                raise cloudinary.exceptions.Error('upload rejected')
            self.uploaded.append((path, options))
            index = len(self.uploaded)
            response = {
                'public_id': f'asset_{index}',
                'resource_type': 'video' if path.endswith('.mp4') else 'image',
                'url': f'http://res.cloudinary.com/demo/asset_{index}',
                'secure_url': f'https://res.cloudinary.com/demo/asset_{index}',
            }
            if path.endswith('.mp4'):
                response['duration'] = 12.5
            return response

        def destroy(self, public_id, **options):
            self.destroyed.append((public_id, options))
            return {'result': 'ok'}

    fake = FakeUploader()
    monkeypatch.setattr(cloudinary.uploader, 'upload', fake.upload)
    monkeypatch.setattr(cloudinary.uploader, 'destroy', fake.destroy)
    return fake


@pytest.fixture()
def make_video(db):
    def _make(owner, **overrides):
        now = datetime.utcnow()
        doc = {
            'videoFile': 'https://res.cloudinary.com/demo/video.mp4',
            'thumbnail': 'https://res.cloudinary.com/demo/thumb.png',
            'title': 'First video',
            'description': 'A description',
            'duration': 30.0,
            'views': 0,
            'isPublished': True,
            'owner': owner,
            'createdAt': now,
            'updatedAt': now,
        }
        doc.update(overrides)
        doc['_id'] = db.videos.insert_one(doc).inserted_id
        return doc
    return _make
