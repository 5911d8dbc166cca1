"""
Statement Compiler for proptable (Layer 1: Raw Text -> Canonical Expression).

Converts propositional logic written in mixed word/symbol notation into the
canonical boolean grammar understood by the parser.

Accepted spellings:
    T, true              -> 1
    F, false             -> 0
    not, !, ¬            -> !
    and, &, /\\, ^         -> &&
    or, |, \\/             -> ||
    then, ->, -->        -> !(L) || (R)
    <->, <-->, =         -> ==
    xor, (+)             -> ^

Syntax Notes:
    - Word forms are case-insensitive and only match whole words
    - Symbol forms are case-sensitive; T and F are upper case only
    - Unrecognized text passes through untouched and is reported
      later, at evaluation
"""

import re
from typing import Callable, List


# Ordered: each step runs on the output of the previous one.
_NOT_RE = re.compile(r"(?<!\w)(?i:not)(?!\w) ?|!|¬")
_AND_RE = re.compile(r"(?:(?<!\w)(?i:and)(?!\w)|&|/\\|\^)+")
_OR_RE = re.compile(r"(?:(?<!\w)(?i:or)(?!\w)|\||\\/)+")
_IFF_RE = re.compile(r"(?:<-+>|=)+")
_XOR_RE = re.compile(r"(?<!\w)(?i:xor)(?!\w)")
_TRUE_RE = re.compile(r"(?<!\w)(?:T|(?i:true))(?!\w)")
_FALSE_RE = re.compile(r"(?<!\w)(?:F|(?i:false))(?!\w)")

# An arrow preceded by '<' (or by another dash of the same arrow) is a
# biconditional, not an implication.
_IMPLICATION_RE = re.compile(r"(?<!\w)(?i:then)(?!\w)|(?<![<-])-+>")

# (+) looks like a parenthesis group, so it is respelled before groups are found.
_XOR_SYMBOL_RE = re.compile(r"\s*\(\+\)\s*")

_PLACEHOLDER_RE = re.compile("\x00(\\d+)\x00")


def translate_tokens(text: str) -> str:
    """
    Replace operator spellings with canonical tokens.

    Runs negation, conjunction, disjunction, biconditional, exclusive-or
    and literals, in that order. Canonical &&, || and == are left
    unchanged; a canonical ^ would be read as conjunction.
    """
    text = _NOT_RE.sub("!", text)
    text = _AND_RE.sub("&&", text)
    text = _OR_RE.sub("||", text)
    text = _IFF_RE.sub("==", text)
    text = _XOR_RE.sub("^", text)
    text = _TRUE_RE.sub("1", text)
    text = _FALSE_RE.sub("0", text)
    return text


def rewrite_parentheses(text: str, rewrite: Callable[[str], str]) -> str:
    """
    Replace the interior of every outermost parenthesis group.

    Each interior is passed to `rewrite` and its return value is spliced
    back between the same pair of parentheses. Nested groups are only
    reached if `rewrite` recurses itself.

    An unclosed group is left as-is; a stray ')' is skipped.
    """
    depth = 0
    start = -1
    i = 0

    while i < len(text):
        char = text[i]
        if char == "(":
            depth += 1
            if depth == 1:
                start = i
        elif char == ")" and depth > 0:
            depth -= 1
            if depth == 0:
                replacement = rewrite(text[start + 1:i])
                text = text[:start + 1] + replacement + text[i:]
                # Land on the closing parenthesis of the rewritten group
                i = start + 1 + len(replacement)
        i += 1

    return text


def eliminate_implication(text: str) -> str:
    """
    Rewrite 'L then R' / 'L -> R' as '!(L) || (R)'.

    L is everything left of the first implication marker and R everything
    to its right. R is rewritten again, so chains associate to the right:
        p -> q -> r   becomes   !(p) || (!(q) || (r))

    Empty operands are kept empty; they fail at evaluation.
    """
    match = _IMPLICATION_RE.search(text)
    if match is None:
        return text

    left = text[:match.start()].strip()
    right = eliminate_implication(text[match.end():]).strip()
    return f"!({left}) || ({right})"


def compile_statement(statement: str) -> str:
    """
    Compile one logic statement into a canonical boolean expression.

    Steps:
        1. Compile the inside of every parenthesis group (recursively)
        2. Eliminate implication
        3. Translate remaining operator spellings and literals

    Compiled groups are held aside while the outer text is translated,
    so their canonical tokens (notably '^' for xor) are not read again
    as input spellings.

    Args:
        statement: Raw statement, e.g. "(p and q) -> r"

    Returns:
        Canonical expression, e.g. "!((p && q)) || (r)"
    """
    text = _XOR_SYMBOL_RE.sub(" xor ", statement)
    groups: List[str] = []

    def shelve(inner: str) -> str:
        groups.append(compile_statement(inner))
        return f"\x00{len(groups) - 1}\x00"

    text = rewrite_parentheses(text, shelve)
    text = eliminate_implication(text)
    text = translate_tokens(text)
    text = _PLACEHOLDER_RE.sub(lambda m: groups[int(m.group(1))], text)

    return text.strip()


def split_statements(text: str) -> List[str]:
    """Split comma-separated input into stripped logic statements."""
    return [statement.strip() for statement in text.split(",")]


def compile_statements(text: str) -> List[str]:
    """Compile every comma-separated statement of `text`, in order."""
    return [compile_statement(statement) for statement in split_statements(text)]


__all__ = [
    "translate_tokens",
    "rewrite_parentheses",
    "eliminate_implication",
    "compile_statement",
    "compile_statements",
    "split_statements",
]
