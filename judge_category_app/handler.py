# judge_category_app/handler.py
#
# Lambda entry point. Event: {"id": "<inquiry id>"}

from inquiry.classifier import judge_category
from inquiry.errors import InquiryError

def lambda_handler(event, context):
    inquiry_id = (event or {}).get("id")
    try:
        return judge_category(inquiry_id)
    except InquiryError as e:
        print(f"ERROR: judge-category failed for id={inquiry_id!r}: {type(e).__name__}: {e}", flush=True)
        raise
