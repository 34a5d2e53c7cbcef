from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class OwnerSummary:
    """Public fields of a users document, as returned by an owner $lookup."""
    user_id: Optional[str] = None
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> 'OwnerSummary':
        return cls(
            user_id=str(data['_id']) if data.get('_id') is not None else None,
            username=data.get('username'),
            full_name=data.get('fullName'),
            avatar=data.get('avatar')
        )


def split_owner(value):
    """owner is either a raw ObjectId or the document joined in by $lookup."""
    if value is None:
        return None, None
    if isinstance(value, dict):
        owner = OwnerSummary.from_dict(value)
        return owner.user_id, owner
    return str(value), None
