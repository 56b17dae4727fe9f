#!/usr/bin/env python3
"""
Debug helper for the inquiry triage handlers.

Run from repo root with:
  PYTHONPATH=. python scripts/invoke_handler.py --help

Common usages
- Seed a record, then classify and answer it:
    PYTHONPATH=. python scripts/invoke_handler.py --id demo-1 --seed "配送が遅れています。いつ届きますか？" --step all

- Re-run only the classifier on an existing record:
    PYTHONPATH=. python scripts/invoke_handler.py --id demo-1 --step judge

- Point at another table / knowledge base:
    PYTHONPATH=. python scripts/invoke_handler.py --id demo-1 --table InquiryDev --kb-id ABCDEFGHIJ --step answer
"""

import os
import sys
import json
import argparse

def main():
    ap = argparse.ArgumentParser(description="Invoke the inquiry triage handlers in-process")
    ap.add_argument("--id", required=True, help="Inquiry id.")
    ap.add_argument("--seed", default=None, help="Write an unprocessed record with this review text first.")
    ap.add_argument("--step", choices=("judge", "answer", "all"), default="all",
                    help="Which handler(s) to run (default all).")
    ap.add_argument("--table", default=os.environ.get("INQUIRY_TABLE_NAME"),
                    help="DynamoDB table name. Default reads INQUIRY_TABLE_NAME env.")
    ap.add_argument("--kb-id", default=os.environ.get("BEDROCK_KNOWLEDGE_BASE_ID"),
                    help="Knowledge base id. Default reads BEDROCK_KNOWLEDGE_BASE_ID env.")
    ap.add_argument("--debug", action="store_true", help="Log raw model replies and prompts.")
    args = ap.parse_args()

    # Configure environment BEFORE importing modules (SETTINGS is read at import)
    if args.table:
        os.environ["INQUIRY_TABLE_NAME"] = args.table
    if args.kb_id:
        os.environ["BEDROCK_KNOWLEDGE_BASE_ID"] = args.kb_id
    if args.debug:
        os.environ["DEBUG_INQUIRY"] = "true"
        os.environ["DEBUG_INQUIRY_LOG_PROMPT"] = "true"

    from inquiry import inquiry_store
    from inquiry.errors import InquiryError
    from judge_category_app.handler import lambda_handler as judge_handler
    from create_answer_app.handler import lambda_handler as answer_handler

    event = {"id": args.id}
    try:
        if args.seed:
            inquiry_store.put_inquiry(args.id, args.seed)
            print(f"Seeded {args.id}")
        if args.step in ("judge", "all"):
            print(json.dumps(judge_handler(event, None), ensure_ascii=False, indent=2))
        if args.step in ("answer", "all"):
            print(json.dumps(answer_handler(event, None), ensure_ascii=False, indent=2))
    except InquiryError as e:
        print(f"[ERROR] {type(e).__name__}: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
