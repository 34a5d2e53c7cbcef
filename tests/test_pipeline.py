from unittest.mock import MagicMock

from bson import ObjectId

from app.dto.common import PageDto
from app.services.comment_service import CommentService
from app.services.video_service import VideoService
from common.utils.pipeline import owner_lookup_stages, paginate_stage, run_paginated


def test_paginate_stage_window():
    assert paginate_stage(3, 5) == {
        '$facet': {
            'docs': [{'$skip': 10}, {'$limit': 5}],
            'meta': [{'$count': 'totalDocs'}]
        }
    }
    assert paginate_stage(1, 10)['$facet']['docs'][0] == {'$skip': 0}


def test_run_paginated_appends_facet_and_reads_total():
    collection = MagicMock()
    collection.aggregate.return_value = iter([{'docs': [{'_id': 1}, {'_id': 2}], 'meta': [{'totalDocs': 7}]}])
    pipeline = [{'$match': {'a': 1}}]

    docs, total = run_paginated(collection, pipeline, 2, 2)

    assert docs == [{'_id': 1}, {'_id': 2}]
    assert total == 7
    sent = collection.aggregate.call_args[0][0]
    assert sent[0] == {'$match': {'a': 1}}
    assert sent[-1] == paginate_stage(2, 2)
    assert pipeline == [{'$match': {'a': 1}}]


def test_run_paginated_with_no_matches():
    collection = MagicMock()
    collection.aggregate.return_value = iter([{'docs': [], 'meta': []}])

    assert run_paginated(collection, [], 1, 10) == ([], 0)


def test_owner_lookup_joins_users_and_unwraps_first():
    lookup, add_fields = owner_lookup_stages()
    assert lookup['$lookup'] == {'from': 'users', 'localField': 'owner', 'foreignField': '_id', 'as': 'owner'}
    assert add_fields == {'$addFields': {'owner': {'$first': '$owner'}}}


def test_video_list_pipeline_escapes_search_text():
    owner = ObjectId()
    pipeline = VideoService.build_list_pipeline(owner, query='a.b*', sort_by='createdAt', sort_type='desc')

    title_filter = pipeline[0]['$match']['$or'][0]['title']
    assert title_filter == {'$regex': r'a\.b\*', '$options': 'i'}
    assert pipeline[-1] == {'$sort': {'createdAt': -1}}
    project = next(stage['$project'] for stage in pipeline if '$project' in stage)
    assert 'owner' not in project
    assert {key for key in project if key.startswith('owner.')} == {'owner.fullName', 'owner.username', 'owner.avatar'}


def test_video_list_pipeline_without_query_starts_with_owner_match():
    owner = ObjectId()
    pipeline = VideoService.build_list_pipeline(owner)
    assert pipeline[0] == {'$match': {'owner': owner}}


def test_comment_pipeline_sorts_by_last_update():
    video_id = ObjectId()
    pipeline = CommentService.build_list_pipeline(video_id)
    assert pipeline[0] == {'$match': {'video': video_id}}
    assert pipeline[-1] == {'$sort': {'updatedAt': -1}}


def test_page_dto_navigation():
    page = PageDto(page=1, limit=10, total_docs=25)
    assert page.total_pages == 3
    assert page.has_next_page is True
    assert page.has_prev_page is False

    last = PageDto(page=3, limit=10, total_docs=25)
    assert last.has_next_page is False
    assert last.has_prev_page is True
