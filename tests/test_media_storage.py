import io
from pathlib import Path

import cloudinary.exceptions
import cloudinary.uploader
import pytest
from werkzeug.datastructures import FileStorage

from common.utils.media_storage import stage_file, discard_file, upload_on_cloud, remove_from_cloud


@pytest.fixture()
def staged(app):
    with app.test_request_context():
        storage = FileStorage(stream=io.BytesIO(b'frames'), filename='../../etc/My Clip.mp4')
        yield stage_file(storage)


def test_stage_file_sanitizes_name(app, staged):
    assert staged.exists()
    assert staged.parent == Path(app.config['UPLOAD_FOLDER'])
    assert staged.name.endswith('etc_My_Clip.mp4')
    assert staged.read_bytes() == b'frames'


def test_upload_success_removes_staged_file(monkeypatch, staged):
    calls = []

    def fake_upload(path, **options):
        calls.append((path, options))
        return {'url': 'http://cdn/x', 'public_id': 'x'}

    monkeypatch.setattr(cloudinary.uploader, 'upload', fake_upload)

    response = upload_on_cloud(staged)
    assert response['url'] == 'http://cdn/x'
    assert calls == [(str(staged), {'resource_type': 'auto'})]
    assert not staged.exists()


def test_upload_failure_returns_none_and_removes_staged_file(monkeypatch, staged):
    def failing_upload(path, **options):
        raise cloudinary.exceptions.Error('quota exceeded')

    monkeypatch.setattr(cloudinary.uploader, 'upload', failing_upload)

    assert upload_on_cloud(staged) is None
    assert not staged.exists()


def test_upload_without_path():
    assert upload_on_cloud(None) is None


def test_discard_missing_file_is_noop(tmp_path):
    discard_file(tmp_path / 'never-created.png')
    discard_file(None)


def test_remove_from_cloud(monkeypatch):
    calls = []

    def fake_destroy(public_id, **options):
        calls.append((public_id, options))
        return {'result': 'ok'}

    monkeypatch.setattr(cloudinary.uploader, 'destroy', fake_destroy)

    assert remove_from_cloud({'public_id': 'abc', 'resource_type': 'video'}) is True
    assert calls == [('abc', {'resource_type': 'video'})]
    assert remove_from_cloud(None) is False
