import re

from app.core.errors import EmptyResponseError

_EMPHASIS_RE = re.compile(r"\*+")
_CODE_RE = re.compile(r"`+")
_PUNCTUATION_RE = re.compile(r"[.,!?;:'\"()]")


def normalize_answer(raw_text: str | None) -> str:
    """Reduce a raw model answer to a single bare word.

    Markdown emphasis, backticks and common punctuation are removed before
    the first whitespace-delimited token is taken, so ``"**Paris.**"``
    becomes ``"Paris"`` and ``"  hello world  "`` becomes ``"hello"``.
    """
    text = raw_text or ""
    text = _EMPHASIS_RE.sub("", text)
    text = _CODE_RE.sub("", text)
    text = _PUNCTUATION_RE.sub("", text)
    tokens = text.split()
    if not tokens:
        raise EmptyResponseError("Could not extract answer")
    return tokens[0]
