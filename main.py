# main.py
#
# Local development harness: serves both Lambda handlers over HTTP.
# In AWS each handler is deployed as its own function and invoked by the trigger.

import os
import uvicorn
from fastapi import FastAPI

from judge_category_app.router import router as judge_category_router
from create_answer_app.router import router as create_answer_router
from inquiry.config import SETTINGS

app = FastAPI(
    title="Inquiry Triage Handlers",
    description="Local runner for the judge-category and create-answer Lambda handlers.",
    version="1.0.0",
)

@app.get("/")
def read_root():
    return {"status": "ok", "message": "Inquiry triage handlers are running!"}

@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "table": SETTINGS.inquiry_table_name,
        "kb_configured": bool(SETTINGS.kb_id),
    }

app.include_router(judge_category_router)
app.include_router(create_answer_router)

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=True)
