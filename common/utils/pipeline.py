from typing import Dict, List

OWNER_PUBLIC_FIELDS = ('fullName', 'username', 'avatar')


def owner_lookup_stages() -> List[Dict]:
    """Replace the owner ObjectId with the matching users document."""
    return [
        {
            '$lookup': {
                'from': 'users',
                'localField': 'owner',
                'foreignField': '_id',
                'as': 'owner'
            }
        },
        {
            '$addFields': {
                'owner': {'$first': '$owner'}
            }
        }
    ]


def owner_projection() -> Dict:
    """Dotted inclusion paths, to be spread into a $project stage."""
    return {f'owner.{field}': 1 for field in OWNER_PUBLIC_FIELDS}


def paginate_stage(page: int, limit: int) -> Dict:
    skip = (page - 1) * limit
    return {
        '$facet': {
            'docs': [{'$skip': skip}, {'$limit': limit}],
            'meta': [{'$count': 'totalDocs'}]
        }
    }


def run_paginated(collection, pipeline: List[Dict], page: int, limit: int):
    """Run pipeline with a $facet page window. Returns (docs, total_docs)."""
    result = list(collection.aggregate(pipeline + [paginate_stage(page, limit)]))
    if not result:
        return [], 0

    facet = result[0]
    meta = facet.get('meta') or []
    total_docs = meta[0].get('totalDocs', 0) if meta else 0
    return facet.get('docs', []), total_docs
