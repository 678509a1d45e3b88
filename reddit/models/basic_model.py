from typing import Optional

from reddit.services.exceptions import ModelAttributeError


class BasicModel:
    """A model holding a plain mapping of attributes returned by the API."""

    @classmethod
    def from_response(cls, client, data: dict) -> 'BasicModel':
        return cls(client, data)

    def __init__(self, client, attributes: Optional[dict] = None):
        self._client = client
        self._attributes = dict(attributes or {})

    @property
    def client(self):
        return self._client

    def get_attribute(self, name: str):
        try:
            return self._attributes[name]
        except KeyError:
            raise ModelAttributeError(
                f'{type(self).__name__!r} has no attribute {name!r}'
            )

    def respond_to(self, name: str) -> bool:
        return name in self._attributes

    def to_dict(self) -> dict:
        return dict(self._attributes)

    def __getattr__(self, name: str):
        # Only called when normal lookup fails
        if name.startswith('_'):
            raise AttributeError(name)
        return self.get_attribute(name)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._attributes!r})'
