import logging
from typing import Callable, Optional

from reddit.models.basic_model import BasicModel

logger = logging.getLogger(__name__)


class LazyModel(BasicModel):
    """
    A model whose attributes are fetched on first access to a missing
    attribute, then cached for the lifetime of the object.

    Subclasses provide `default_loader()`; a custom `loader` callable can be
    passed instead. The loader returns a dict which is merged over the
    attributes already known.
    """

    def __init__(
        self,
        client,
        attributes: Optional[dict] = None,
        loader: Optional[Callable[[], dict]] = None,
    ):
        super().__init__(client, attributes)
        self._loader = loader or self.default_loader
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def default_loader(self) -> dict:
        raise NotImplementedError(
            f'{type(self).__name__} does not define a default loader'
        )

    def get_attribute(self, name: str):
        if name not in self._attributes:
            self.ensure_fully_loaded()
        return super().get_attribute(name)

    def respond_to(self, name: str) -> bool:
        if name not in self._attributes:
            self.ensure_fully_loaded()
        return super().respond_to(name)

    def ensure_fully_loaded(self) -> 'LazyModel':
        if not self._loaded:
            logger.debug('Loading %s', type(self).__name__)
            self._attributes.update(self._loader() or {})
            self._loaded = True
        return self

    def invalidate(self) -> 'LazyModel':
        self._loaded = False
        return self

    def reload(self) -> 'LazyModel':
        return self.invalidate().ensure_fully_loaded()

    def to_dict(self) -> dict:
        self.ensure_fully_loaded()
        return super().to_dict()
