from reddit.models.basic_model import BasicModel


class Listing(BasicModel):
    """A page of items returned by the API, with its pagination anchors."""

    def __init__(self, client, attributes=None):
        attributes = dict(attributes or {})
        attributes.setdefault('children', [])
        attributes.setdefault('before', None)
        attributes.setdefault('after', None)
        super().__init__(client, attributes)

    @property
    def children(self) -> list:
        return self._attributes['children']

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, index):
        return self.children[index]

    def empty(self) -> bool:
        return not self.children

    def first(self):
        return self.children[0] if self.children else None

    def last(self):
        return self.children[-1] if self.children else None
