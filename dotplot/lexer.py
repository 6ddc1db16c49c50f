import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

Token = Tuple[str, str, int, int]  # (type, value, line, col)

BRACES = {
    '{': 'LBRACE',
    '}': 'RBRACE',
}

WS = ' \t\r'

# A line ending in one of these cannot be continued by the next line.
STATEMENT_ENDS = (';', '{', '}')


class _Buffer:
    def __init__(self) -> None:
        self.chars: List[str] = []
        self.line = 0
        self.col = 0

    def push(self, ch: str, line_no: int, col: int) -> None:
        if not self.chars and ch in WS:
            return
        if not self.chars:
            self.line = line_no
            self.col = col
        self.chars.append(ch)

    def flush(self, tokens: List[Token]) -> None:
        text = ''.join(self.chars).strip()
        if text:
            tokens.append(('STMT', text, self.line, self.col))
        self.chars = []

    def drop(self) -> str:
        text = ''.join(self.chars).strip()
        self.chars = []
        return text


def tokenize(text: str) -> List[Token]:
    """Split graph-language text into statements and brace tokens.

    Statements end at ``;`` or at the end of a line, unless a quoted string
    or an attribute list is still open, in which case they continue on the
    next line. A line that ends in ``;`` or a brace while a quote or bracket
    is still open is malformed and its statement is dropped. ``//`` comments,
    ``/* */`` blocks and ``#`` lines are dropped.
    """

    tokens: List[Token] = []
    buf = _Buffer()
    in_quote = False
    in_block_comment = False
    bracket_depth = 0

    for line_no, raw in enumerate(text.splitlines(), start=1):
        if not in_quote and not in_block_comment and raw.lstrip().startswith('#'):
            continue
        i = 0
        n = len(raw)
        last = ''
        while i < n:
            ch = raw[i]
            col = i + 1
            if in_block_comment:
                if raw.startswith('*/', i):
                    in_block_comment = False
                    i += 2
                else:
                    i += 1
                continue
            if in_quote:
                buf.push(ch, line_no, col)
                last = ch
                if ch == '\\' and i + 1 < n:
                    buf.push(raw[i + 1], line_no, col + 1)
                    i += 2
                    continue
                if ch == '"':
                    in_quote = False
                i += 1
                continue
            if ch == '"':
                in_quote = True
                buf.push(ch, line_no, col)
                i += 1
                continue
            if raw.startswith('//', i):
                break
            if raw.startswith('/*', i):
                in_block_comment = True
                i += 2
                continue
            if ch not in WS:
                last = ch
            if ch == '[':
                bracket_depth += 1
            elif ch == ']':
                bracket_depth = max(bracket_depth - 1, 0)
            if bracket_depth == 0 and ch in BRACES:
                buf.flush(tokens)
                tokens.append((BRACES[ch], ch, line_no, col))
                i += 1
                continue
            if bracket_depth == 0 and ch == ';':
                buf.flush(tokens)
                i += 1
                continue
            buf.push(ch, line_no, col)
            i += 1
        if (in_quote or bracket_depth > 0) and last in STATEMENT_ENDS:
            logger.debug("[line %d, col %d] dropping unterminated statement %r", buf.line, buf.col, buf.drop())
            in_quote = False
            bracket_depth = 0
        elif in_quote or bracket_depth > 0:
            buf.push(' ', line_no, n + 1)
        else:
            buf.flush(tokens)

    if in_quote or bracket_depth > 0:
        logger.debug("[line %d, col %d] dropping unterminated statement %r", buf.line, buf.col, buf.drop())
    buf.flush(tokens)
    return tokens


def split_outside_quotes(text: str, sep: str) -> List[str]:
    """Split ``text`` on ``sep`` ignoring separators inside double quotes."""

    parts: List[str] = []
    current: List[str] = []
    in_quote = False
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"' and (i == 0 or text[i - 1] != '\\'):
            in_quote = not in_quote
        if not in_quote and text.startswith(sep, i):
            parts.append(''.join(current))
            current = []
            i += len(sep)
            continue
        current.append(ch)
        i += 1
    parts.append(''.join(current))
    return parts


def find_outside_quotes(text: str, needle: str) -> Optional[int]:
    """Return the index of the first ``needle`` that is not inside quotes."""

    in_quote = False
    for i, ch in enumerate(text):
        if ch == '"' and (i == 0 or text[i - 1] != '\\'):
            in_quote = not in_quote
            continue
        if not in_quote and text.startswith(needle, i):
            return i
    return None
