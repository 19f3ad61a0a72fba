from typing import Any

from pydantic import BaseModel, ConfigDict


class OpenbankBaseModel(BaseModel):
    """Base for every wire model, unknown fields sent by the API are ignored."""

    model_config = ConfigDict(extra='ignore', populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)
