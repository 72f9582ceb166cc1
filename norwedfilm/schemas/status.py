from pydantic import Field

from norwedfilm.schemas.base import CamelModel


class StatusUpdate(CamelModel):
    """
    Body of the status-only PATCH. The value is checked against the
    resource's closed status set by the CRUD layer.
    """

    status: str = Field(..., min_length=1)
