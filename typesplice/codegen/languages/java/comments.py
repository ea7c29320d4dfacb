"""
Javadoc formatting.
"""


def format_docblock(doc: str, indent: str) -> str:
    """
    Format documentation so it can be prepended to a declaration.

    Multi-line docs are assumed to already carry comment markup and are only
    reindented. Single-line docs are wrapped in a ``/** ... */`` block. In both
    cases the result ends with ``indent`` so the next token lines up.

    Args:
        doc: Documentation text, possibly empty
        indent: Indentation of the declaration being documented

    Returns:
        Comment text, or "" when there is no documentation
    """
    if not doc:
        return ""
    if "\n" in doc:
        return doc.replace("\n", "\n" + indent)
    return f"/**\n{indent} * {doc}\n{indent} */\n{indent}"
