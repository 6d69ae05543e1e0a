ONE_WORD_PROMPT = (
    "You must answer with only ONE single word. Question: {question}\n\n"
    "Answer (one word only):"
)


def build_one_word_prompt(question: str) -> str:
    return ONE_WORD_PROMPT.format(question=question)
