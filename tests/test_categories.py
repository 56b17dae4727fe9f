import pytest

from inquiry.categories import (
    CATCH_ALL_CATEGORY,
    CATEGORIES,
    DEFAULT_TONE_INSTRUCTION,
    TONE_INSTRUCTIONS,
    build_answer_input,
    build_classification_prompt,
    parse_category,
)


def test_category_set_is_fixed_and_ordered():
    assert list(CATEGORIES) == ["質問", "改善要望", "ポジティブな感想", "ネガティブな感想", "その他"]
    assert CATCH_ALL_CATEGORY in CATEGORIES


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        CATEGORIES["新カテゴリ"] = "x"
    with pytest.raises(TypeError):
        TONE_INSTRUCTIONS["質問"] = "x"


@pytest.mark.parametrize("name", list(CATEGORIES))
def test_exact_reply_returns_category_unmodified(name):
    assert parse_category(name) == name


def test_reply_is_trimmed_before_exact_match():
    assert parse_category("  改善要望\n") == "改善要望"


def test_verbose_reply_falls_back_to_contained_category():
    assert parse_category("このお問い合わせは「質問」に分類されます") == "質問"


def test_substring_fallback_uses_declaration_order():
    # Both 質問 and ネガティブな感想 appear; 質問 is declared first
    assert parse_category("ネガティブな感想を含む質問です") == "質問"


@pytest.mark.parametrize("reply", ["", None, "   ", "分類できません", "Question"])
def test_unmatched_reply_returns_catch_all(reply):
    assert parse_category(reply) == CATCH_ALL_CATEGORY


def test_classification_prompt_lists_categories_and_text():
    prompt = build_classification_prompt("商品が壊れていました")
    for name, desc in CATEGORIES.items():
        assert f"- {name}: {desc}" in prompt
    assert "商品が壊れていました" in prompt
    assert "「その他」を選んでください" in prompt
    assert prompt.endswith("回答:")
    assert prompt.index("- 質問:") < prompt.index("- その他:")


def test_answer_input_uses_category_tone():
    text = build_answer_input("ありがとう", "ポジティブな感想")
    assert text == f"{TONE_INSTRUCTIONS['ポジティブな感想']}\n\n質問: ありがとう"


@pytest.mark.parametrize("category", ["", None, "その他", "unknown"])
def test_answer_input_falls_back_to_generic_tone(category):
    assert build_answer_input("こんにちは", category).startswith(DEFAULT_TONE_INSTRUCTION)
