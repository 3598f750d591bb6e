"""String helpers."""


def replace_all(text, old, new):
    """Replace every non-overlapping occurrence of ``old`` in ``text``, left to right.

    Scanning resumes after each inserted replacement, so ``new`` may contain
    ``old`` without being replaced again.
    """
    if not old:
        raise ValueError("the substring to replace must not be empty")
    return text.replace(old, new)