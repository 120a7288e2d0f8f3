# taskpulse/schemas/client.py
from pydantic import Field
from typing import Optional, List, Literal

from taskpulse.schemas.common import CamelModel, UpdateModel, new_id

ClientStatus = Literal["active", "inactive"]


class ClientRecord(CamelModel):
    id: str = Field(default_factory=new_id)
    name: str
    contact_info: Optional[str] = None
    description: Optional[str] = None
    status: ClientStatus = "active"
    links: List[str] = []
    created_by: Optional[str] = None


ClientOut = ClientRecord


class ClientCreate(CamelModel):
    name: str = Field(..., min_length=1)
    contact_info: Optional[str] = None
    description: Optional[str] = None
    status: ClientStatus = "active"
    links: List[str] = []


class AdminClientCreate(CamelModel):
    name: str = Field(..., min_length=1)
    contact_info: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    links: List[str]


class ClientUpdate(UpdateModel):
    name: Optional[str] = Field(None, min_length=1)
    contact_info: Optional[str] = None
    description: Optional[str] = None
    status: Optional[ClientStatus] = None
    links: Optional[List[str]] = None
