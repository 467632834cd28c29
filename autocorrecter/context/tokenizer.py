# autocorrecter/context/tokenizer.py
# whitespace tokenizer, no locale rules


def simple_tokenize(s: str):
    """Split on whitespace and drop empty pieces."""
    if not s:
        return []
    return [t for t in s.split() if t]
