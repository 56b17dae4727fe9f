from dataclasses import dataclass
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from inquiry.config import SETTINGS
from inquiry.errors import EmptyContent, InvalidInput, NotFound, StoreError

# Table schema: PK=id (S). Attributes: reviewText, category, answer, status
STATUS_UNPROCESSED = "unprocessed"
STATUS_CATEGORIZED = "categorized"
STATUS_ANSWERED = "answered"

# Lazy init to avoid import-time failures; reused across warm invocations
_dynamodb = None
_table = None

def _log(msg: str):
    print(f"[INQUIRY-STORE] {msg}", flush=True)

def _get_table():
    global _dynamodb, _table
    if _table is None:
        _dynamodb = boto3.resource("dynamodb", region_name=SETTINGS.aws_region)
        _table = _dynamodb.Table(SETTINGS.inquiry_table_name)
    return _table

@dataclass
class Inquiry:
    id: str
    review_text: str = ""
    category: str = ""
    answer: str = ""
    status: str = ""

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "Inquiry":
        return cls(
            id=str(item.get("id", "")),
            review_text=item.get("reviewText") or "",
            category=item.get("category") or "",
            answer=item.get("answer") or "",
            status=item.get("status") or "",
        )

def get_inquiry(inquiry_id: str) -> Inquiry:
    try:
        resp = _get_table().get_item(Key={"id": inquiry_id})
    except (ClientError, BotoCoreError) as e:
        raise StoreError(f"failed to get item from dynamodb: {e}") from e
    item = resp.get("Item")
    if not item:
        raise NotFound(inquiry_id)
    return Inquiry.from_item(item)

def load_reviewable(inquiry_id: Optional[str]) -> Inquiry:
    """
    Fetch an inquiry both handlers can work on.

    Raises InvalidInput for an empty id, NotFound when the record is missing and
    EmptyContent when it has no review text. Nothing is written on any of these.
    """
    if not inquiry_id:
        raise InvalidInput("missing inquiry id")
    inquiry = get_inquiry(inquiry_id)
    if not inquiry.review_text:
        raise EmptyContent(inquiry_id)
    return inquiry

def _update(inquiry_id: str, field_name: str, value: str, status: str):
    # Only touches the caller's own field + status; other attributes are left as-is
    try:
        _get_table().update_item(
            Key={"id": inquiry_id},
            UpdateExpression=f"SET {field_name} = :{field_name}, #status = :status",
            ExpressionAttributeNames={"#status": "status"},
            ExpressionAttributeValues={f":{field_name}": value, ":status": status},
        )
    except (ClientError, BotoCoreError) as e:
        raise StoreError(f"failed to update item in dynamodb: {e}") from e
    if SETTINGS.debug_inquiry:
        _log(f"updated id={inquiry_id} {field_name} status={status}")

def save_category(inquiry_id: str, category: str):
    _update(inquiry_id, "category", category, STATUS_CATEGORIZED)

def save_answer(inquiry_id: str, answer: str):
    _update(inquiry_id, "answer", answer, STATUS_ANSWERED)

def put_inquiry(inquiry_id: str, review_text: str):
    """Seed a fresh, unprocessed inquiry. Used by local tooling only."""
    try:
        _get_table().put_item(Item={
            "id": inquiry_id,
            "reviewText": review_text,
            "status": STATUS_UNPROCESSED,
        })
    except (ClientError, BotoCoreError) as e:
        raise StoreError(f"failed to put item to dynamodb: {e}") from e
