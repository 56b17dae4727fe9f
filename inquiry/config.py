import os
from dataclasses import dataclass

def _env_flag(name: str, default: str = "false") -> bool:
    """Reads a boolean env var ("1", "true", "yes" count as on)."""
    return os.environ.get(name, default).lower() in ("1", "true", "yes")

@dataclass(frozen=True)
class Settings:
    # AWS / DynamoDB
    aws_region: str = os.environ.get("AWS_REGION", "ap-northeast-1")
    inquiry_table_name: str = os.environ.get("INQUIRY_TABLE_NAME", "Inquiry")

    # Classifier (InvokeModel, Anthropic messages API)
    classifier_model_id: str = os.environ.get("CLASSIFIER_MODEL_ID", "anthropic.claude-3-haiku-20240307-v1:0")
    classifier_max_tokens: int = int(os.environ.get("CLASSIFIER_MAX_TOKENS", "50"))
    classifier_temperature: float = float(os.environ.get("CLASSIFIER_TEMPERATURE", "0.1"))
    anthropic_version: str = os.environ.get("ANTHROPIC_VERSION", "bedrock-2023-05-31")

    # Knowledge Base (RetrieveAndGenerate)
    kb_id: str = os.environ.get("BEDROCK_KNOWLEDGE_BASE_ID", "")
    kb_model_id: str = os.environ.get("KB_MODEL_ID", "anthropic.claude-3-haiku-20240307-v1:0")
    # Leave empty to derive the foundation-model ARN from region + KB_MODEL_ID
    kb_model_arn: str = os.environ.get("KB_MODEL_ARN", "")

    # Bedrock client timeouts (seconds); botocore defaults
    bedrock_connect_timeout_secs: int = int(os.environ.get("BEDROCK_CONNECT_TIMEOUT", "60"))
    bedrock_read_timeout_secs: int = int(os.environ.get("BEDROCK_READ_TIMEOUT", "60"))

    # Answer used when generation fails
    answer_fallback_message: str = os.environ.get(
        "ANSWER_FALLBACK_MESSAGE",
        "申し訳ございませんが、現在回答を生成することができません。後ほど担当者からご連絡いたします。",
    )

    # Debugging
    debug_inquiry: bool = _env_flag("DEBUG_INQUIRY")
    debug_inquiry_log_prompt: bool = _env_flag("DEBUG_INQUIRY_LOG_PROMPT")

SETTINGS = Settings()
