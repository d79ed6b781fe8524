from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PhoneIn(BaseModel):
    phone: Optional[Union[str, int, float]] = None


class CatalogIngestIn(BaseModel):
    items: Any = None
    mode: Any = Field(default=None, description="merge|replace (default replace)")


class ClientStatusIn(BaseModel):
    status: Any = None


class PlaybackEventIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    event: Any = None
    source: Any = None
    content_id: Any = Field(default=None, alias="contentId")
    reason: Any = None
