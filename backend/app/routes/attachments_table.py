from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional

from ..db import schemas
from ..db.database import unit_of_work
from ..controllers import attachments_table_controller
from ..deps.db import get_db
from ..deps.auth import get_current_user_id

router = APIRouter()


@router.put("/attachments-table/records", response_model=schemas.ReconcileOut)
def update_by_records(body: List[schemas.AttachmentLinkIn], db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    try:
        with unit_of_work(db):
            result = attachments_table_controller.update_by_records(db, user_id, body)
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Attachment link conflict")
    return schemas.ReconcileOut(**result)


@router.get("/attachments-table/{table_id}", response_model=List[schemas.AttachmentLinkOut])
def list_links(table_id: str, record_id: Optional[str] = None, field_id: Optional[str] = None, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    return attachments_table_controller.list_links(db, table_id, record_id=record_id, field_id=field_id)


@router.post("/attachments-table/delete", response_model=schemas.DeletedOut)
def delete_attachments(body: schemas.AttachmentIdsIn, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    with unit_of_work(db):
        count = attachments_table_controller.delete(db, body.attachment_ids)
    return schemas.DeletedOut(deleted=count)


@router.post("/attachments-table/{table_id}/fields/delete", response_model=schemas.DeletedOut)
def delete_fields(table_id: str, body: schemas.FieldIdsIn, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    with unit_of_work(db):
        count = attachments_table_controller.delete_fields(db, table_id, body.field_ids)
    return schemas.DeletedOut(deleted=count)


@router.post("/attachments-table/{table_id}/records/delete", response_model=schemas.DeletedOut)
def delete_records(table_id: str, body: schemas.RecordIdsIn, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    with unit_of_work(db):
        count = attachments_table_controller.delete_records(db, table_id, body.record_ids)
    return schemas.DeletedOut(deleted=count)


@router.delete("/attachments-table/{table_id}", response_model=schemas.DeletedOut)
def delete_table(table_id: str, db: Session = Depends(get_db), user_id: str = Depends(get_current_user_id)):
    with unit_of_work(db):
        count = attachments_table_controller.delete_table(db, table_id)
    return schemas.DeletedOut(deleted=count)
