import json
from typing import Optional

from reddit.domain.value_objects import ResponseVO
from reddit.models.lazy_model import LazyModel
from reddit.models.messageable import Messageable

LISTING_TYPES = (
    'overview',
    'submitted',
    'comments',
    'liked',
    'disliked',
    'hidden',
    'saved',
    'gilded',
)

# Keyword arguments renamed to the query parameter Reddit expects
LISTING_PARAM_NAMES = {'time': 't'}


class User(LazyModel, Messageable):
    """A reddit user, loaded from `/user/{name}/about` on demand."""

    @classmethod
    def from_id(cls, client, name: str) -> 'User':
        return cls(client, {'name': name})

    def about(self) -> ResponseVO:
        return self.client.get(f"/user/{self._attributes['name']}/about")

    def unblock(self, me: Optional['User'] = None) -> ResponseVO:
        """Unblock a previously blocked user.

        `me` is the user doing the unblocking; when omitted it is looked up
        with an extra request to `/api/v1/me`.
        """
        if isinstance(me, User):
            my_id = me.get_attribute('id')
        else:
            my_id = self.client.get('/api/v1/me').body['id']

        return self.client.post(
            '/api/unfriend',
            container=f't2_{my_id}',
            name=self.get_attribute('name'),
            type='enemy',
        )

    def send_message(self, subject: str, text: str, from_=None) -> ResponseVO:
        return super().send_message(
            to=self.get_attribute('name'),
            subject=subject,
            text=text,
            from_=from_,
        )

    def friend(self, note: Optional[str] = None) -> ResponseVO:
        name = self.get_attribute('name')
        data = {'name': name}
        if note is not None:
            data['note'] = note

        return self.client.request(
            'put',
            f'/api/v1/me/friends/{name}',
            body=json.dumps(data),
        )

    def unfriend(self) -> ResponseVO:
        name = self.get_attribute('name')
        return self.client.request(
            'delete',
            f'/api/v1/me/friends/{name}',
            raw=True,
            form={'id': name},
        )

    def listing(self, type: str, **params):
        """
        Get one of the user's listings.

        Supported params: `sort` (hot, new, top, controversial), `after`,
        `before`, `count`, `limit` (1..100), `time` (hour, day, week, month,
        year, all; only for the top and controversial sorts) and `show`
        (`given` to list gildings given).
        """
        if type not in LISTING_TYPES:
            raise ValueError(f'Unknown listing type: {type!r}')

        params = {
            LISTING_PARAM_NAMES.get(key, key): value
            for key, value in params.items()
        }
        return self.client.model(
            'get', f"/user/{self.get_attribute('name')}/{type}.json", params
        )

    def overview(self, **params):
        return self.listing('overview', **params)

    def submitted(self, **params):
        return self.listing('submitted', **params)

    def comments(self, **params):
        return self.listing('comments', **params)

    def liked(self, **params):
        return self.listing('liked', **params)

    def disliked(self, **params):
        return self.listing('disliked', **params)

    def hidden(self, **params):
        return self.listing('hidden', **params)

    def saved(self, **params):
        return self.listing('saved', **params)

    def gilded(self, **params):
        return self.listing('gilded', **params)

    def gift_gold(self, months: int = 1) -> ResponseVO:
        return self.client.post(
            f"/api/v1/gold/give/{self.get_attribute('name')}", months=months
        )

    def default_loader(self) -> dict:
        return self.about().body['data']
