# Go source scanning: package clause, imports and entry function detection
from pathlib import Path
import logging
import posixpath
import re
from typing import Iterator, List, Optional, Tuple, Union
from .constants import ENTRY_FUNCTION, ERROR_TEMPLATES
from .types import SourceUnit

logger = logging.getLogger(__name__)

Token = Tuple[str, str, int]

_TOKEN_PATTERN = re.compile(
    r"""
    (?P<comment>//[^\n]*|(?s:/\*.*?\*/))
    | (?P<open_comment>/\*)
    | (?P<raw_string>`[^`]*`)
    | (?P<string>"(?:[^"\\\n]|\\.)*")
    | (?P<open_string>["`])
    | (?P<rune>'(?:[^'\\\n]|\\.)*')
    | (?P<ident>[^\W\d]\w*)
    | (?P<number>\d\w*)
    | (?P<space>\s+)
    | (?P<punct>.)
    """,
    re.VERBOSE,
)


class ParseError(ValueError):
    """Raised when a Go source file cannot be analyzed."""

    def __init__(self, path: str, message: str):
        super().__init__(message)
        self.path = path


def _line_of(text: str, pos: int) -> int:
    return text.count("\n", 0, pos) + 1


def tokenize(text: str, path: str = "<source>") -> Iterator[Token]:
    """Yield (kind, value, offset) tokens, dropping comments and whitespace."""
    for match in _TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        if kind in ("comment", "space"):
            continue
        if kind == "open_comment":
            raise ParseError(
                path,
                ERROR_TEMPLATES["unterminated_comment"].format(
                    path=path, line=_line_of(text, match.start())
                ),
            )
        if kind == "open_string":
            raise ParseError(
                path,
                ERROR_TEMPLATES["unterminated_string"].format(
                    path=path, line=_line_of(text, match.start())
                ),
            )
        if kind == "raw_string":
            kind = "string"
        yield kind, match.group(), match.start()


def clean_import_path(literal: str) -> str:
    """Strip quoting from an import literal and normalize it like Go's path.Clean."""
    value = literal[1:-1]
    cleaned = posixpath.normpath(value)
    # normpath keeps a leading double slash, path.Clean does not
    if cleaned.startswith("//"):
        cleaned = "/" + cleaned.lstrip("/")
    return cleaned


class _Cursor:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.index = 0

    def peek(self) -> Optional[Token]:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def next(self) -> Optional[Token]:
        token = self.peek()
        if token is not None:
            self.index += 1
        return token


def _parse_import_spec(cursor: _Cursor, text: str, path: str) -> str:
    token = cursor.next()
    # optional local name: identifier, "_" or "."
    if token and (token[0] == "ident" or token[1] == "."):
        token = cursor.next()
    if not token or token[0] != "string":
        offset = token[2] if token else len(text)
        raise ParseError(
            path,
            ERROR_TEMPLATES["bad_import"].format(path=path, line=_line_of(text, offset)),
        )
    return clean_import_path(token[1])


def _parse_imports(cursor: _Cursor, text: str, path: str) -> List[str]:
    imports = []
    while True:
        token = cursor.peek()
        if token and token[1] == ";":
            cursor.next()
            continue
        if not token or token[:2] != ("ident", "import"):
            return imports
        cursor.next()
        opening = cursor.peek()
        if opening and opening[1] == "(":
            cursor.next()
            while True:
                token = cursor.peek()
                if token is None:
                    raise ParseError(
                        path,
                        ERROR_TEMPLATES["unterminated_imports"].format(
                            path=path, line=_line_of(text, opening[2])
                        ),
                    )
                if token[1] == ")":
                    cursor.next()
                    break
                if token[1] == ";":
                    cursor.next()
                    continue
                imports.append(_parse_import_spec(cursor, text, path))
        else:
            imports.append(_parse_import_spec(cursor, text, path))


def _defines_function(cursor: _Cursor, name: str) -> bool:
    """Check for a top-level 'func <name>' declaration.

    Methods start with a receiver list and function literals are anonymous,
    so 'func' directly followed by the name can only be a plain declaration.
    """
    previous = None
    while (token := cursor.next()) is not None:
        if previous == ("ident", "func") and token[:2] == ("ident", name):
            return True
        previous = token[:2]
    return False


def analyze_source(
    text: str, path: str = "<source>", entry_function: str = ENTRY_FUNCTION
) -> SourceUnit:
    """Analyze Go source text in a single pass.

    Args:
        text (str): Source code of one Go file
        path (str): Identifier recorded on the resulting unit
        entry_function (str): Function name that marks an executable root

    Raises:
        ParseError: If the package clause is missing or the text is malformed
    """
    cursor = _Cursor(list(tokenize(text, path)))

    keyword, name = cursor.next(), cursor.next()
    if (
        not keyword
        or keyword[:2] != ("ident", "package")
        or not name
        or name[0] != "ident"
    ):
        raise ParseError(path, ERROR_TEMPLATES["missing_package"].format(path=path))

    imports = _parse_imports(cursor, text, path)
    has_entry = _defines_function(cursor, entry_function)
    logger.debug(f"{path}: package {name[1]}, {len(imports)} imports, entry={has_entry}")
    return SourceUnit(path, name[1], imports, has_entry)


def analyze_file(
    file_path: Union[str, Path],
    entry_function: str = ENTRY_FUNCTION,
    display_path: Optional[str] = None,
) -> SourceUnit:
    """Read and analyze one Go source file.

    ``display_path`` replaces the file path on the unit and in error messages.
    """
    path = display_path or str(file_path)
    try:
        with open(file_path, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(
            path, ERROR_TEMPLATES["unreadable"].format(path=path, reason=e)
        ) from e
    return analyze_source(text, path, entry_function)
