"""
Judge-category step: review text → one category from the fixed set.
"""
from typing import Any, Dict, Optional

from inquiry import bedrock_client, inquiry_store
from inquiry.categories import build_classification_prompt, parse_category
from inquiry.config import SETTINGS

def _log(msg: str):
    print(f"[JUDGE-CATEGORY] {msg}", flush=True)

def classify_text(review_text: str) -> str:
    reply = bedrock_client.invoke_classifier(build_classification_prompt(review_text))
    category = parse_category(reply)
    if SETTINGS.debug_inquiry:
        _log(f"raw reply={reply!r} -> {category}")
    return category

def judge_category(inquiry_id: Optional[str]) -> Dict[str, Any]:
    inquiry = inquiry_store.load_reviewable(inquiry_id)
    category = classify_text(inquiry.review_text)
    inquiry_store.save_category(inquiry_id, category)
    _log(f"id={inquiry_id} category={category}")
    return {
        "inquiry_id": inquiry_id,
        "category": category,
        "status": "success",
    }
