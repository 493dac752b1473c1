from __future__ import annotations

from typing import Dict

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "zh": {
        "title": "生态环境大模型测试集 - Environmental LLM Evaluation - ELLE",
        "search_placeholder": "搜索问题内容...",
        "filters": "筛选",
        "difficulty_filter": "难度筛选",
        "type_filter": "类型筛选",
        "domain_filter": "领域筛选",
        "total_questions": "{count} 个问题",
        "question": "问题",
        "difficulty": "难度",
        "type": "类型",
        "domain": "领域",
        "language_button": "EN",
        "no_results": "没有匹配的问题",
    },
    "en": {
        "title": "Environmental LLM Evaluation - ELLE",
        "search_placeholder": "Search question content...",
        "filters": "Filters",
        "difficulty_filter": "Difficulty Filter",
        "type_filter": "Type Filter",
        "domain_filter": "Domain Filter",
        "total_questions": "{count} questions",
        "question": "Question",
        "difficulty": "Difficulty",
        "type": "Type",
        "domain": "Domain",
        "language_button": "中文",
        "no_results": "No matching questions",
    },
}


def strings_for(language: str | None) -> Dict[str, str]:
    """String table for a language, falling back to English."""
    return TRANSLATIONS.get(language or DEFAULT_LANGUAGE, TRANSLATIONS[DEFAULT_LANGUAGE])


def translate(language: str | None, key: str, **kwargs) -> str:
    text = strings_for(language).get(key, key)
    for name, value in kwargs.items():
        text = text.replace("{" + name + "}", str(value))
    return text
