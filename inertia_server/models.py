"""
Wire Models for the page-transition protocol.

This module defines the Pydantic model for the page object exchanged with
the client-side router. The JSON form uses the protocol's field names
(`component`, `props`, `url`, `version` and the optional `viewData`).
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class PageObject(BaseModel):
    """
    Canonical payload describing one screen.

    `props` holds only the keys that were in scope for the request; lazy
    props skipped on a full load are absent rather than null.
    """
    model_config = ConfigDict(populate_by_name=True)

    component: str
    props: Dict[str, Any] = Field(default_factory=dict)
    url: str
    version: Union[str, int, float]
    view_data: Optional[Dict[str, Any]] = Field(default=None, alias="viewData")

    def to_json(self) -> str:
        """Serialize to compact JSON text, omitting `viewData` when unset."""
        exclude = {"view_data"} if self.view_data is None else None
        return self.model_dump_json(by_alias=True, exclude=exclude)
