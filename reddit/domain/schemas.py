from typing import Optional

from pydantic import BaseModel, ConfigDict


class Thing(BaseModel):
    model_config = ConfigDict(extra='ignore')

    kind: str
    data: dict


class ListingData(BaseModel):
    model_config = ConfigDict(extra='ignore')

    children: list = []
    after: Optional[str] = None
    before: Optional[str] = None
    dist: Optional[int] = None
