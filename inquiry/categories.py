"""
Fixed category and tone tables, plus the prompt/parse helpers built on them.

Declaration order of CATEGORIES matters: it is the order used in the
classification prompt and the order tried by the substring fallback in
parse_category.
"""
from types import MappingProxyType
from typing import Mapping, Optional

# =========================
# Categories
# =========================

CATCH_ALL_CATEGORY = "その他"

CATEGORIES: Mapping[str, str] = MappingProxyType({
    "質問": "お客様からの質問や疑問",
    "改善要望": "サービスや商品の改善に関する要望",
    "ポジティブな感想": "満足度の高い感想や評価",
    "ネガティブな感想": "不満や問題点に関する感想",
    CATCH_ALL_CATEGORY: "上記に該当しない内容",
})

# =========================
# Tone instructions (answer prompt prefix)
# =========================

TONE_INSTRUCTIONS: Mapping[str, str] = MappingProxyType({
    "ポジティブな感想": "お客様からの嬉しいお言葉に対して、感謝の気持ちを込めて丁寧に返答してください。",
    "ネガティブな感想": "お客様のご不満に対して、謝罪の気持ちを込めて改善への取り組みを示しながら丁寧に返答してください。",
    "質問": "お客様からの質問に対して、正確で分かりやすい情報を提供してください。",
    "改善要望": "お客様からの貴重なご意見として受け止め、検討することをお伝えしながら丁寧に返答してください。",
})

DEFAULT_TONE_INSTRUCTION = "お客様からの問い合わせに丁寧で親切な回答をしてください。"

# =========================
# Classification prompt
# =========================

CLASSIFICATION_PROMPT = """以下の問い合わせ内容を分析し、最も適切なカテゴリを1つ選んでください。

カテゴリ:
{category_list}

問い合わせ内容:
{review_text}

指示:
- 上記のカテゴリの中から最も適切なものを1つ選んでください
- カテゴリ名のみを回答してください（説明は不要）
- 判断が困難な場合は「{catch_all}」を選んでください

回答:"""

def build_classification_prompt(review_text: str) -> str:
    category_list = "\n".join(f"- {name}: {desc}" for name, desc in CATEGORIES.items())
    return CLASSIFICATION_PROMPT.format(
        category_list=category_list,
        review_text=review_text,
        catch_all=CATCH_ALL_CATEGORY,
    )

def parse_category(reply: Optional[str]) -> str:
    """
    Map a model reply onto the fixed category set.

    1. Exact match (after trimming whitespace) wins.
    2. Otherwise the first category, in declaration order, that appears inside
       the reply wins. Models sometimes answer with a full sentence.
    3. Otherwise the catch-all category.
    """
    text = (reply or "").strip()
    if not text:
        return CATCH_ALL_CATEGORY
    if text in CATEGORIES:
        return text
    for name in CATEGORIES:
        if name in text:
            return name
    return CATCH_ALL_CATEGORY

# =========================
# Answer prompt
# =========================

def tone_instruction(category: Optional[str]) -> str:
    return TONE_INSTRUCTIONS.get(category or "", DEFAULT_TONE_INSTRUCTION)

def build_answer_input(review_text: str, category: Optional[str]) -> str:
    return f"{tone_instruction(category)}\n\n質問: {review_text}"
