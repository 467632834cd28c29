# autocorrecter/context/normalizer.py
import re

_punct_re = re.compile(r"[^\w\s'-]")  # keep apostrophes/hyphens, they live inside words


def normalize_text(s: str, lowercase: bool = False, strip_punctuation: bool = False) -> str:
    """
    Optional clean-up applied to a corpus line before tokenizing.
    With both flags off the text is returned untouched, so counts match
    the raw corpus words exactly.
    """
    if not s:
        return ""
    if strip_punctuation:
        s = _punct_re.sub("", s)
    if lowercase:
        s = s.lower()
    return s
