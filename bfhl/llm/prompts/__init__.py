"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files for:
- Version control of prompt changes
- Clear documentation of prompt purpose
"""
from bfhl.llm.prompts.one_word import ONE_WORD_SUFFIX, build_one_word_prompt

__all__ = [
    "ONE_WORD_SUFFIX",
    "build_one_word_prompt",
]
