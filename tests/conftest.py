import os

# Settings are read at import time, so the environment must be in place first.
# Names the tests assert on are pinned; a developer's exported values must not leak in.
os.environ["AWS_REGION"] = "ap-northeast-1"
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ["INQUIRY_TABLE_NAME"] = "InquiryTest"
os.environ["BEDROCK_KNOWLEDGE_BASE_ID"] = "KBTEST1234"
os.environ["CLASSIFIER_MAX_TOKENS"] = "50"
os.environ["CLASSIFIER_TEMPERATURE"] = "0.1"
os.environ["ANTHROPIC_VERSION"] = "bedrock-2023-05-31"
for _name in ("KB_MODEL_ARN", "ANSWER_FALLBACK_MESSAGE", "DEBUG_INQUIRY", "DEBUG_INQUIRY_LOG_PROMPT"):
    os.environ.pop(_name, None)

import copy

import pytest
from botocore.exceptions import ClientError

from inquiry import inquiry_store


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table keyed by "id"."""

    def __init__(self, items=None):
        self.items = {i["id"]: dict(i) for i in (items or [])}
        self.updates = []
        self.fail_get = False
        self.fail_update = False

    def get_item(self, Key):
        if self.fail_get:
            raise ClientError({"Error": {"Code": "InternalServerError", "Message": "boom"}}, "GetItem")
        item = self.items.get(Key["id"])
        return {"Item": copy.deepcopy(item)} if item is not None else {}

    def update_item(self, Key, UpdateExpression, ExpressionAttributeNames, ExpressionAttributeValues):
        if self.fail_update:
            raise ClientError(
                {"Error": {"Code": "ProvisionedThroughputExceededException", "Message": "slow down"}},
                "UpdateItem",
            )
        self.updates.append({
            "Key": Key,
            "UpdateExpression": UpdateExpression,
            "ExpressionAttributeNames": ExpressionAttributeNames,
            "ExpressionAttributeValues": ExpressionAttributeValues,
        })
        item = self.items.setdefault(Key["id"], {"id": Key["id"]})
        for placeholder, value in ExpressionAttributeValues.items():
            name = ExpressionAttributeNames.get(f"#{placeholder[1:]}", placeholder[1:])
            item[name] = value
        return {}

    def put_item(self, Item):
        self.items[Item["id"]] = dict(Item)
        return {}


@pytest.fixture
def table(monkeypatch):
    tbl = FakeTable([
        {"id": "inq-1", "reviewText": "返品の手続きはどうすればいいですか？", "status": "unprocessed"},
        {"id": "inq-2", "reviewText": "スタッフの対応がとても良かったです", "category": "ポジティブな感想",
         "status": "categorized"},
        {"id": "inq-empty", "reviewText": "", "status": "unprocessed"},
        {"id": "inq-missing-text", "status": "unprocessed"},
    ])
    monkeypatch.setattr(inquiry_store, "_table", tbl)
    return tbl
