from pydantic import BaseModel
import datetime
from typing import List, Optional


class AttachmentLinkBase(BaseModel):
    table_id: str
    record_id: str
    field_id: str
    attachment_id: str
    token: str
    name: str


class AttachmentLinkIn(AttachmentLinkBase):
    pass


class AttachmentLinkOut(AttachmentLinkBase):
    id: int
    created_by: str
    created_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True


class ReconcileOut(BaseModel):
    created: List[str] = []
    deleted: List[str] = []


class AttachmentIdsIn(BaseModel):
    attachment_ids: List[str]


class FieldIdsIn(BaseModel):
    field_ids: List[str]


class RecordIdsIn(BaseModel):
    record_ids: List[str]


class DeletedOut(BaseModel):
    deleted: int
