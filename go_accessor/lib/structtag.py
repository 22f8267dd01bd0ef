"""
Go struct tag parsing.

A struct tag is, by convention, a space separated list of key:"value" pairs.
Each value is a comma separated list whose first element is the tag's name and
whose remaining elements are its options:

    `json:"id,omitempty" access:"r,w"`

parse_tags() follows the conventional format strictly and raises
TagSyntaxError on anything else. unquote() decodes the Go string literal a tag
is written as, raw (backquoted) or interpreted (double quoted).
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from go_accessor.errors import TagSyntaxError


_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
}

_HEX_ESCAPE_WIDTH = {"x": 2, "u": 4, "U": 8}


@dataclass(frozen=True)
class StructTag:
    """One key:"name,opt1,opt2" entry of a struct tag."""
    key: str
    name: str
    options: Tuple[str, ...] = ()

    @property
    def value(self) -> str:
        return ",".join((self.name,) + self.options)


# ------------------------------------------------------------------------------
# String literals

def _unquote_interpreted(body: str, literal: str) -> str:
    out = []
    i = 0
    n = len(body)
    while i < n:
        ch = body[i]
        if ch == '"' or ch == "\n":
            raise TagSyntaxError(f"invalid string literal {literal}", tag=literal)
        if ch != "\\":
            out.append(ch)
            i += 1
            continue

        if i + 1 >= n:
            raise TagSyntaxError(f"invalid escape at end of {literal}", tag=literal)
        esc = body[i + 1]
        if esc in _SIMPLE_ESCAPES and esc != "'":
            out.append(_SIMPLE_ESCAPES[esc])
            i += 2
        elif esc in _HEX_ESCAPE_WIDTH:
            width = _HEX_ESCAPE_WIDTH[esc]
            digits = body[i + 2:i + 2 + width]
            if len(digits) != width:
                raise TagSyntaxError(f"invalid \\{esc} escape in {literal}", tag=literal)
            try:
                code = int(digits, 16)
            except ValueError:
                raise TagSyntaxError(f"invalid \\{esc} escape in {literal}", tag=literal) from None
            # \xNN is a single byte; it is kept as the matching code point.
            if esc != "x" and (code > 0x10FFFF or 0xD800 <= code <= 0xDFFF):
                raise TagSyntaxError(f"invalid code point in {literal}", tag=literal)
            out.append(chr(code))
            i += 2 + width
        elif esc in "01234567":
            digits = body[i + 1:i + 4]
            if len(digits) != 3 or any(d not in "01234567" for d in digits):
                raise TagSyntaxError(f"invalid octal escape in {literal}", tag=literal)
            code = int(digits, 8)
            if code > 0xFF:
                raise TagSyntaxError(f"octal escape out of range in {literal}", tag=literal)
            out.append(chr(code))
            i += 4
        else:
            raise TagSyntaxError(f"unknown escape \\{esc} in {literal}", tag=literal)
    return "".join(out)


def unquote(literal: str) -> str:
    """
    Decode a Go string literal.

    Raw literals have their backquotes stripped and carriage returns removed;
    interpreted literals have their escape sequences decoded.
    """
    if len(literal) < 2:
        raise TagSyntaxError(f"invalid string literal {literal!r}", tag=literal)
    quote = literal[0]
    if quote != literal[-1]:
        raise TagSyntaxError(f"invalid string literal {literal}", tag=literal)
    body = literal[1:-1]
    if quote == "`":
        if "`" in body:
            raise TagSyntaxError(f"invalid string literal {literal}", tag=literal)
        return body.replace("\r", "")
    if quote == '"':
        return _unquote_interpreted(body, literal)
    raise TagSyntaxError(f"invalid string literal {literal}", tag=literal)


# ------------------------------------------------------------------------------
# Tag parsing

def parse_tags(tag: str) -> List[StructTag]:
    """
    Parse a struct tag into its key:"value" entries, in order.

    Raises TagSyntaxError if the tag does not follow the conventional format:
    an empty key, a key not followed by :" , or a value that is unterminated
    or not a valid Go string literal.
    """
    tags: List[StructTag] = []
    original = tag

    while tag:
        # Skip leading space.
        i = 0
        while i < len(tag) and tag[i] == " ":
            i += 1
        tag = tag[i:]
        if not tag:
            break

        # Scan to colon. A space, a quote or a control character is a syntax error.
        i = 0
        while i < len(tag) and tag[i] > " " and tag[i] != ":" and tag[i] != '"' and tag[i] != "\x7f":
            i += 1
        if i == 0:
            raise TagSyntaxError("bad syntax for struct tag key", tag=original)
        if i + 1 >= len(tag) or tag[i] != ":":
            raise TagSyntaxError("bad syntax for struct tag pair", tag=original)
        if tag[i + 1] != '"':
            raise TagSyntaxError("bad syntax for struct tag value", tag=original)
        key = tag[:i]
        tag = tag[i + 1:]

        # Scan quoted string to find value.
        i = 1
        while i < len(tag) and tag[i] != '"':
            if tag[i] == "\\":
                i += 1
            i += 1
        if i >= len(tag):
            raise TagSyntaxError("bad syntax for struct tag value", tag=original)
        quoted = tag[:i + 1]
        tag = tag[i + 1:]

        try:
            value = unquote(quoted)
        except TagSyntaxError:
            raise TagSyntaxError("bad syntax for struct tag value", tag=original) from None

        name, *options = value.split(",")
        tags.append(StructTag(key=key, name=name, options=tuple(options)))

    return tags


def lookup(tags: List[StructTag], key: str) -> Optional[StructTag]:
    """Return the first entry for `key`, or None."""
    for entry in tags:
        if entry.key == key:
            return entry
    return None
