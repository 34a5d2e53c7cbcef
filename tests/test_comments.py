from datetime import datetime, timedelta

from bson import ObjectId

import app.models.comment as comment_model


def _make_comment(db, video_id, owner, content='Nice video'):
    now = datetime.utcnow()
    doc = {'content': content, 'video': video_id, 'owner': owner, 'createdAt': now, 'updatedAt': now}
    doc['_id'] = db.comments.insert_one(doc).inserted_id
    return doc


def test_get_video_comments_rejects_malformed_id(client):
    r = client.get('/api/v1/comments/xyz')
    assert r.status_code == 400
    assert r.get_json()['message'] == 'Invalid videoId'


def test_get_video_comments_forwards_pagination(client, monkeypatch, user_id):
    video_id = ObjectId()
    captured = {}

    def fake_run_paginated(collection, pipeline, page, limit):
        captured.update(pipeline=pipeline, page=page, limit=limit)
        return [{
            '_id': ObjectId(),
            'content': 'first!',
            'owner': {'_id': user_id, 'username': 'trinity', 'fullName': 'Trinity', 'avatar': None},
        }], 1

    monkeypatch.setattr(comment_model, 'run_paginated', fake_run_paginated)

    r = client.get(f'/api/v1/comments/{video_id}?page=3&limit=20')
    assert r.status_code == 200
    assert captured['page'] == 3
    assert captured['limit'] == 20
    assert captured['pipeline'][0] == {'$match': {'video': video_id}}
    assert captured['pipeline'][-1] == {'$sort': {'updatedAt': -1}}

    body = r.get_json()
    assert body['message'] == 'Comments fetched successfully'
    assert body['data']['docs'][0]['content'] == 'first!'
    assert body['data']['docs'][0]['owner']['username'] == 'trinity'


def test_get_video_comments_runs_lookup_against_users(client, db, user_id):
    video_id = ObjectId()
    db.users.insert_one({
        '_id': user_id, 'username': 'trinity', 'fullName': 'Trinity',
        'avatar': 'https://res.cloudinary.com/demo/trinity.png', 'password': 'secret',
    })
    base = datetime(2024, 1, 1)
    for day, content in enumerate(['oldest', 'middle', 'newest']):
        db.comments.insert_one({
            'content': content, 'video': video_id, 'owner': user_id,
            'createdAt': base, 'updatedAt': base + timedelta(days=day),
        })
    db.comments.insert_one({'content': 'other video', 'video': ObjectId(), 'owner': user_id,
                            'createdAt': base, 'updatedAt': base})

    r = client.get(f'/api/v1/comments/{video_id}?page=1&limit=2')
    assert r.status_code == 200

    data = r.get_json()['data']
    assert data['totalDocs'] == 3
    assert data['hasNextPage'] is True
    assert [doc['content'] for doc in data['docs']] == ['newest', 'middle']
    assert data['docs'][0]['owner'] == {
        'username': 'trinity',
        'fullName': 'Trinity',
        'avatar': 'https://res.cloudinary.com/demo/trinity.png',
    }
    assert data['docs'][0]['video'] == str(video_id)

    r = client.get(f'/api/v1/comments/{video_id}?page=2&limit=2')
    docs = r.get_json()['data']['docs']
    assert [doc['content'] for doc in docs] == ['oldest']
    assert 'password' not in docs[0]['owner']


def test_get_video_comments_empty(client, monkeypatch):
    monkeypatch.setattr(comment_model, 'run_paginated', lambda *args: ([], 0))

    r = client.get(f'/api/v1/comments/{ObjectId()}')
    assert r.status_code == 200
    body = r.get_json()
    assert body['message'] == 'No comments found'
    assert body['data']['docs'] == []
    assert body['data']['totalDocs'] == 0


def test_get_video_comments_rejects_bad_limit(client):
    r = client.get(f'/api/v1/comments/{ObjectId()}?limit=0')
    assert r.status_code == 400


def test_add_comment(client, db, make_video, user_id, auth_headers):
    video = make_video(user_id)

    r = client.post(f"/api/v1/comments/{video['_id']}", json={'content': 'Great stuff'}, headers=auth_headers)
    assert r.status_code == 200

    body = r.get_json()
    assert body['message'] == 'Comment added successfully'
    assert body['data']['content'] == 'Great stuff'
    assert body['data']['video'] == str(video['_id'])
    assert body['data']['owner'] == str(user_id)
    assert db.comments.count_documents({'video': video['_id']}) == 1


def test_add_comment_requires_content(client, make_video, user_id, auth_headers):
    video = make_video(user_id)

    for payload in ({}, {'content': ''}, {'content': '   '}):
        r = client.post(f"/api/v1/comments/{video['_id']}", json=payload, headers=auth_headers)
        assert r.status_code == 400
        assert r.get_json()['message'] == 'Comment content must be provided'


def test_add_comment_to_missing_video(client, auth_headers):
    r = client.post(f'/api/v1/comments/{ObjectId()}', json={'content': 'hi'}, headers=auth_headers)
    assert r.status_code == 404


def test_add_comment_requires_login(client, make_video, user_id):
    video = make_video(user_id)
    r = client.post(f"/api/v1/comments/{video['_id']}", json={'content': 'hi'})
    assert r.status_code == 401


def test_update_comment(client, db, user_id, auth_headers):
    comment = _make_comment(db, ObjectId(), user_id)

    r = client.patch(f"/api/v1/comments/c/{comment['_id']}", json={'content': 'Edited'}, headers=auth_headers)
    assert r.status_code == 200
    assert r.get_json()['data']['content'] == 'Edited'
    assert db.comments.find_one({'_id': comment['_id']})['content'] == 'Edited'


def test_update_comment_validation(client, db, user_id, auth_headers, other_auth_headers):
    comment = _make_comment(db, ObjectId(), user_id)

    r = client.patch(f"/api/v1/comments/c/{comment['_id']}", json={'content': ''}, headers=auth_headers)
    assert r.status_code == 400

    r = client.patch('/api/v1/comments/c/bad-id', json={'content': 'x'}, headers=auth_headers)
    assert r.status_code == 400

    r = client.patch(f'/api/v1/comments/c/{ObjectId()}', json={'content': 'x'}, headers=auth_headers)
    assert r.status_code == 404

    r = client.patch(f"/api/v1/comments/c/{comment['_id']}", json={'content': 'x'}, headers=other_auth_headers)
    assert r.status_code == 403
    assert db.comments.find_one({'_id': comment['_id']})['content'] == 'Nice video'


def test_delete_comment(client, db, user_id, auth_headers):
    comment = _make_comment(db, ObjectId(), user_id)

    r = client.delete(f"/api/v1/comments/c/{comment['_id']}", headers=auth_headers)
    assert r.status_code == 200
    assert r.get_json()['data']['_id'] == str(comment['_id'])
    assert db.comments.count_documents({}) == 0

    r = client.delete(f"/api/v1/comments/c/{comment['_id']}", headers=auth_headers)
    assert r.status_code == 404


def test_delete_comment_by_other_user(client, db, user_id, other_auth_headers):
    comment = _make_comment(db, ObjectId(), user_id)

    r = client.delete(f"/api/v1/comments/c/{comment['_id']}", headers=other_auth_headers)
    assert r.status_code == 403
    assert db.comments.count_documents({}) == 1
