from reddit.models.lazy_model import LazyModel
from reddit.models.messageable import Messageable


class Subreddit(LazyModel, Messageable):
    @classmethod
    def from_id(cls, client, display_name: str) -> 'Subreddit':
        return cls(client, {'display_name': display_name})

    def send_message(self, subject: str, text: str, from_=None):
        """Message the moderators of this subreddit."""
        return super().send_message(
            to=f"/r/{self.get_attribute('display_name')}",
            subject=subject,
            text=text,
            from_=from_,
        )

    def default_loader(self) -> dict:
        return self.client.get(
            f"/r/{self._attributes['display_name']}/about"
        ).body['data']
