# judge_category_app/router.py
#
# Local development route; production invocations come through handler.lambda_handler.

from fastapi import APIRouter
from pydantic import BaseModel

from inquiry.errors import InquiryError
from inquiry.http_errors import to_http_exception
from judge_category_app.handler import lambda_handler

router = APIRouter(
    prefix="/judge-category",
    tags=["Inquiry Category Classifier"],
)

class InquiryEvent(BaseModel):
    id: str = ""

@router.post("")
def judge_category_endpoint(event: InquiryEvent):
    try:
        return lambda_handler({"id": event.id}, None)
    except InquiryError as e:
        raise to_http_exception(e) from e
