"""
Module: rendering.scripts

Purpose:
    Pull script blocks out of generated question markup so they can be
    delivered to the client as ordered, structured directives instead of
    embedded markup.

Key Functions:
    - extract_scripts(): Strip script blocks and return ScriptEntry list

Limitations:
    This is a syntactic scan with regular expressions, not an HTML
    parser. Malformed or nested markup may be under- or over-matched.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from assess_toolkit.core.models.results import ScriptEntry, ScriptKind

SCRIPT_BLOCK_RE = re.compile(r"<script([^>]*)>(.*?)</script>", re.DOTALL)
SRC_ATTR_RE = re.compile(r'src="(.*?)"')
# Inline bodies that inject an external script with document.write
DOCUMENT_WRITE_SRC_RE = re.compile(r'document\.write.*?script.*?src="(.*?)"')


def extract_scripts(markup: str) -> Tuple[str, List[ScriptEntry]]:
    """
    Remove script blocks from markup and describe them as directives.

    For each block, in encounter order:
    - empty body with a ``src`` attribute -> one SRC entry
    - otherwise, a ``document.write`` injected ``src`` -> one SRC entry,
      then always one CODE entry with the full body

    Args:
        markup: Generated question markup

    Returns:
        Tuple of (markup without script blocks, ordered entries)

    Example:
        >>> html, scripts = extract_scripts('<p>x</p><script src="a.js"></script>')
        >>> html
        '<p>x</p>'
        >>> [s.to_list() for s in scripts]
        [['src', 'a.js']]
    """
    scripts: List[ScriptEntry] = []

    for match in SCRIPT_BLOCK_RE.finditer(markup):
        attrs, body = match.group(1), match.group(2)
        src = SRC_ATTR_RE.search(attrs)
        if not body.strip() and src:
            scripts.append(ScriptEntry(ScriptKind.SRC, src.group(1)))
            continue

        injected = DOCUMENT_WRITE_SRC_RE.search(body)
        if injected:
            scripts.append(ScriptEntry(ScriptKind.SRC, injected.group(1)))
        scripts.append(ScriptEntry(ScriptKind.CODE, body))

    return SCRIPT_BLOCK_RE.sub("", markup), scripts
