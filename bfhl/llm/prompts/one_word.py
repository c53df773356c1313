"""
Prompts for the AI key.

The model is asked for a single bare word so the answer can be taken as the
first token of whatever it returns.
"""

ONE_WORD_SUFFIX = " . Reply strictly in ONE single word only with no punctuation."


def build_one_word_prompt(question: str) -> str:
    """Append the one-word instruction to a user question."""
    return question + ONE_WORD_SUFFIX
