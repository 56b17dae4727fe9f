# create_answer_app/handler.py
#
# Lambda entry point. Event: {"id": "<inquiry id>"}

from inquiry.answerer import create_answer
from inquiry.errors import InquiryError

def lambda_handler(event, context):
    inquiry_id = (event or {}).get("id")
    try:
        return create_answer(inquiry_id)
    except InquiryError as e:
        print(f"ERROR: create-answer failed for id={inquiry_id!r}: {type(e).__name__}: {e}", flush=True)
        raise
