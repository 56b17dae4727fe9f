"""
Thin wrappers over the two Bedrock APIs the pipeline uses.

- invoke_classifier: InvokeModel (Anthropic messages body) for one-word classification
- retrieve_and_generate: Knowledge Base RetrieveAndGenerate for grounded answers

Both raise ModelInvocationError; deciding whether that is fatal is up to the caller.
"""
import json
from typing import Any, Dict, List

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from inquiry.config import SETTINGS
from inquiry.errors import ModelInvocationError

# =========================
# AWS Clients
# =========================

_boto_cfg = Config(
    connect_timeout=SETTINGS.bedrock_connect_timeout_secs,
    read_timeout=SETTINGS.bedrock_read_timeout_secs,
)

# Client for Foundation Model APIs (InvokeModel)
bedrock_runtime_client = boto3.client("bedrock-runtime", region_name=SETTINGS.aws_region, config=_boto_cfg)
# Client for Knowledge Base APIs (RetrieveAndGenerate)
bedrock_agent_client = boto3.client("bedrock-agent-runtime", region_name=SETTINGS.aws_region, config=_boto_cfg)

def _log(msg: str):
    print(f"[BEDROCK] {msg}", flush=True)

def model_arn() -> str:
    if SETTINGS.kb_model_arn:
        return SETTINGS.kb_model_arn
    return f"arn:aws:bedrock:{SETTINGS.aws_region}::foundation-model/{SETTINGS.kb_model_id}"

# =========================
# InvokeModel
# =========================

def _classifier_body(prompt: str) -> str:
    return json.dumps({
        "anthropic_version": SETTINGS.anthropic_version,
        "max_tokens": SETTINGS.classifier_max_tokens,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": SETTINGS.classifier_temperature,
    })

def invoke_classifier(prompt: str) -> str:
    """
    Returns the text of the first content block, or "" when the model sent none.
    """
    if SETTINGS.debug_inquiry_log_prompt:
        _log(f"classifier prompt:\n{prompt}")
    try:
        resp = bedrock_runtime_client.invoke_model(
            modelId=SETTINGS.classifier_model_id,
            body=_classifier_body(prompt),
            contentType="application/json",
            accept="application/json",
        )
        response_body = json.loads(resp["body"].read())
    except (ClientError, BotoCoreError) as e:
        raise ModelInvocationError(f"failed to invoke bedrock model: {e}") from e
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise ModelInvocationError(f"failed to unmarshal bedrock response body: {e}") from e

    if not isinstance(response_body, dict):
        raise ModelInvocationError(f"unexpected bedrock response body: {response_body!r}")
    content: List[Dict[str, Any]] = response_body.get("content") or []
    if not content:
        return ""
    if not isinstance(content, list) or not isinstance(content[0], dict):
        raise ModelInvocationError(f"unexpected bedrock content: {content!r}")
    return content[0].get("text") or ""

# =========================
# RetrieveAndGenerate
# =========================

def retrieve_and_generate(input_text: str) -> str:
    """
    Returns the generated answer. An empty or missing output counts as a failure.
    """
    if SETTINGS.debug_inquiry_log_prompt:
        _log(f"kb input:\n{input_text}")
    try:
        resp = bedrock_agent_client.retrieve_and_generate(
            input={"text": input_text},
            retrieveAndGenerateConfiguration={
                "type": "KNOWLEDGE_BASE",
                "knowledgeBaseConfiguration": {
                    "knowledgeBaseId": SETTINGS.kb_id,
                    "modelArn": model_arn(),
                },
            },
        )
    except (ClientError, BotoCoreError) as e:
        raise ModelInvocationError(f"failed to retrieve and generate from bedrock: {e}") from e

    output = resp.get("output")
    if output is None:
        raise ModelInvocationError("received nil output from bedrock")
    text = output.get("text") or ""
    if not text.strip():
        raise ModelInvocationError("unexpected or empty output from bedrock")
    if SETTINGS.debug_inquiry:
        _log(f"kb answer chars={len(text)} citations={len(resp.get('citations') or [])}")
    return text
