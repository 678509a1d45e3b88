from pydantic import ValidationError

from reddit.domain.schemas import ListingData, Thing
from reddit.models.basic_model import BasicModel
from reddit.models.comment import Comment
from reddit.models.listing import Listing
from reddit.models.private_message import PrivateMessage
from reddit.models.submission import Submission
from reddit.models.subreddit import Subreddit
from reddit.models.user import User

MAPPING = {
    't1': Comment,
    't2': User,
    't3': Submission,
    't4': PrivateMessage,
    't5': Subreddit,
}


class Unmarshaller:
    """Turns JSON responses into model instances based on their `kind`."""

    def __init__(self, client):
        self.client = client

    def unmarshal(self, data):
        if isinstance(data, list):
            return [self.unmarshal(item) for item in data]

        if not (isinstance(data, dict) and 'kind' in data and 'data' in data):
            return data

        try:
            thing = Thing.model_validate(data)
        except ValidationError:
            # e.g. `{"kind": ..., "data": [...]}`, leave it to the caller
            return data

        if thing.kind == 'Listing':
            return self._listing(thing.data)

        model = MAPPING.get(thing.kind, BasicModel)
        return model.from_response(self.client, thing.data)

    def _listing(self, data: dict) -> Listing:
        listing = ListingData.model_validate(data)
        attributes = listing.model_dump()
        attributes['children'] = [
            self.unmarshal(child) for child in listing.children
        ]
        return Listing(self.client, attributes)
