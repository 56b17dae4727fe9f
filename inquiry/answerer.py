"""
Create-answer step: review text (+ category tone) → Knowledge Base answer.

Generation failures are soft: the canned fallback answer is stored instead and
the record still moves to "answered". Store failures stay fatal.
"""
from typing import Any, Dict, Optional

from inquiry import bedrock_client, inquiry_store
from inquiry.categories import build_answer_input
from inquiry.config import SETTINGS
from inquiry.errors import ModelInvocationError

def _log(msg: str):
    print(f"[CREATE-ANSWER] {msg}", flush=True)

def generate_answer(review_text: str, category: Optional[str]) -> str:
    try:
        return bedrock_client.retrieve_and_generate(build_answer_input(review_text, category))
    except ModelInvocationError as e:
        _log(f"Error generating answer with Bedrock KB: {e}")
        return SETTINGS.answer_fallback_message

def create_answer(inquiry_id: Optional[str]) -> Dict[str, Any]:
    inquiry = inquiry_store.load_reviewable(inquiry_id)
    answer = generate_answer(inquiry.review_text, inquiry.category)
    inquiry_store.save_answer(inquiry_id, answer)
    _log(f"id={inquiry_id} category={inquiry.category or '-'} answer_chars={len(answer)}")
    return {
        "inquiry_id": inquiry_id,
        "answer": answer,
        "status": "success",
    }
