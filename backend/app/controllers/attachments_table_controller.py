import logging
from typing import Iterable, List, Optional, Sequence

from sqlalchemy.orm import Session

from ..db import models, schemas

logger = logging.getLogger(__name__)

# None of these functions commit: the caller owns the transaction.


def get_existing_links(db: Session, attachment_ids: List[str]):
    return (
        db.query(
            models.AttachmentLink.attachment_id,
            models.AttachmentLink.table_id,
            models.AttachmentLink.record_id,
            models.AttachmentLink.field_id,
        )
        .filter(models.AttachmentLink.attachment_id.in_(attachment_ids))
        .all()
    )


def list_links(db: Session, table_id: str, record_id: Optional[str] = None, field_id: Optional[str] = None):
    q = db.query(models.AttachmentLink).filter(models.AttachmentLink.table_id == table_id)
    if record_id is not None:
        q = q.filter(models.AttachmentLink.record_id == record_id)
    if field_id is not None:
        q = q.filter(models.AttachmentLink.field_id == field_id)
    return q.order_by(models.AttachmentLink.id.asc()).all()


def update_by_records(db: Session, user_id: str, attachments: Sequence[schemas.AttachmentLinkIn]) -> dict:
    """Make the stored links for the given attachment ids match ``attachments``.

    Links are keyed by ``attachment_id``. Missing ones are inserted one at a
    time, in input order, and stored ones absent from the input are removed
    with a single bulk delete. A store error stops the run where it happened;
    earlier inserts are left to the caller's transaction to roll back.
    """
    exist_links = get_existing_links(db, [a.attachment_id for a in attachments])
    exist_map = {row.attachment_id: row for row in exist_links}

    attachments_map: dict[str, dict] = {}
    for a in attachments:
        attachments_map[a.attachment_id] = {**a.model_dump(), "created_by": user_id}
    if len(attachments_map) < len(attachments):
        logger.warning(
            f"Duplicate attachment ids collapsed (last wins) received={len(attachments)} unique={len(attachments_map)}"
        )

    need_delete = [k for k in exist_map if k not in attachments_map]
    need_create = [k for k in attachments_map if k not in exist_map]

    for key in need_create:
        db.add(models.AttachmentLink(**attachments_map[key]))
        db.flush()

    delete(db, need_delete)
    logger.info(f"Reconciled attachments user={user_id} created={len(need_create)} deleted={len(need_delete)}")
    return {"created": need_create, "deleted": need_delete}


def delete(db: Session, attachment_ids: Iterable[str]) -> int:
    attachment_ids = list(attachment_ids)
    if not attachment_ids:
        return 0
    return (
        db.query(models.AttachmentLink)
        .filter(models.AttachmentLink.attachment_id.in_(attachment_ids))
        .delete(synchronize_session=False)
    )


def delete_fields(db: Session, table_id: str, field_ids: Iterable[str]) -> int:
    field_ids = list(field_ids)
    if not field_ids:
        return 0
    count = (
        db.query(models.AttachmentLink)
        .filter(models.AttachmentLink.table_id == table_id, models.AttachmentLink.field_id.in_(field_ids))
        .delete(synchronize_session=False)
    )
    logger.info(f"Deleted attachments table={table_id} fields={len(field_ids)} rows={count}")
    return count


def delete_table(db: Session, table_id: str) -> int:
    count = (
        db.query(models.AttachmentLink)
        .filter(models.AttachmentLink.table_id == table_id)
        .delete(synchronize_session=False)
    )
    logger.info(f"Deleted attachments table={table_id} rows={count}")
    return count


def delete_records(db: Session, table_id: str, record_ids: Iterable[str]) -> int:
    record_ids = list(record_ids)
    if not record_ids:
        return 0
    count = (
        db.query(models.AttachmentLink)
        .filter(models.AttachmentLink.table_id == table_id, models.AttachmentLink.record_id.in_(record_ids))
        .delete(synchronize_session=False)
    )
    logger.info(f"Deleted attachments table={table_id} records={len(record_ids)} rows={count}")
    return count
