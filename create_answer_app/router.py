# create_answer_app/router.py
#
# Local development route; production invocations come through handler.lambda_handler.

from fastapi import APIRouter
from pydantic import BaseModel

from inquiry.errors import InquiryError
from inquiry.http_errors import to_http_exception
from create_answer_app.handler import lambda_handler

router = APIRouter(
    prefix="/create-answer",
    tags=["Inquiry Answer Generator"],
)

class InquiryEvent(BaseModel):
    id: str = ""

@router.post("")
def create_answer_endpoint(event: InquiryEvent):
    try:
        return lambda_handler({"id": event.id}, None)
    except InquiryError as e:
        raise to_http_exception(e) from e
