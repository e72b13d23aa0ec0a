"""Placeholder pattern compilation.

Turns a literal placeholder name plus a syntax family into a display token
and a word-boundary safe matcher. Matchers reach the substitution engine
through a small tagged union (``LiteralToken`` / ``CompiledMatcher``) so the
literal-vs-regex decision is made once, at the API boundary.
"""

import enum
import re
from dataclasses import dataclass


class SyntaxFamily(str, enum.Enum):
    """Delimiter conventions that mark a placeholder in a template."""

    MUSTACHE = "mustache"
    DOUBLE_MUSTACHE = "double_mustache"
    UNDERLINE = "underline"
    ANGLE = "angle"
    SQUARE = "square"
    DOLLAR = "dollar"
    CUSTOM = "custom"


@dataclass(frozen=True)
class SyntaxSpec:
    """Decoration rules for one syntax family.

    Attributes:
        display: Format string producing the display token from a name.
        template: Regex template; ``{name}`` receives the escaped name.
        example: Human readable example used in reports.
        description: Short description used in reports.
    """

    display: str
    template: str
    example: str
    description: str


SYNTAX_SPECS: dict[SyntaxFamily, SyntaxSpec] = {
    SyntaxFamily.MUSTACHE: SyntaxSpec(
        display="{{ {name} }}",
        template=r"\{{\s*{name}\s*\}}",
        example="{ placeholder_name }",
        description="Single curly braces with spaces",
    ),
    SyntaxFamily.DOUBLE_MUSTACHE: SyntaxSpec(
        display="{{{{ {name} }}}}",
        template=r"\{{\{{\s*{name}\s*\}}\}}",
        example="{{ placeholder_name }}",
        description="Double curly braces (Handlebars/Mustache style)",
    ),
    SyntaxFamily.UNDERLINE: SyntaxSpec(
        display="_{name}_",
        template=r"_{name}_",
        example="_placeholder_name_",
        description="Underscores on both sides",
    ),
    SyntaxFamily.ANGLE: SyntaxSpec(
        display="< {name} >",
        template=r"<\s*{name}\s*>",
        example="< placeholder_name >",
        description="Angle brackets",
    ),
    SyntaxFamily.SQUARE: SyntaxSpec(
        display="[ {name} ]",
        template=r"\[\s*{name}\s*\]",
        example="[ placeholder_name ]",
        description="Square brackets",
    ),
    SyntaxFamily.DOLLAR: SyntaxSpec(
        display="${{{name}}}",
        template=r"\$\{{{name}\}}",
        example="${placeholder_name}",
        description="Dollar sign with curly braces (template literal style)",
    ),
}

# Generic scanners used when no explicit names are known. The single brace
# and dollar scanners refuse to match inside ``{{ x }}`` and ``${x}``.
DEFAULT_SCAN_PATTERNS: dict[SyntaxFamily, re.Pattern] = {
    SyntaxFamily.UNDERLINE: re.compile(r"(?<!\w)_\w+_(?!\w)"),
    SyntaxFamily.MUSTACHE: re.compile(r"(?<![{$])\{\s*\w+\s*\}(?!\})"),
    SyntaxFamily.DOUBLE_MUSTACHE: re.compile(r"(?<!\{)\{\{\s*\w+\s*\}\}(?!\})"),
    SyntaxFamily.ANGLE: re.compile(r"<\s*\w+\s*>"),
    SyntaxFamily.SQUARE: re.compile(r"\[\s*\w+\s*\]"),
    SyntaxFamily.DOLLAR: re.compile(r"\$\{\w+\}"),
}

_SURFACE_SYNTAX: list[tuple[SyntaxFamily, re.Pattern]] = [
    (SyntaxFamily.DOLLAR, re.compile(r"\$\{(\w+)\}")),
    (SyntaxFamily.DOUBLE_MUSTACHE, re.compile(r"\{\{\s*(\w+)\s*\}\}")),
    (SyntaxFamily.MUSTACHE, re.compile(r"\{\s*(\w+)\s*\}")),
    (SyntaxFamily.ANGLE, re.compile(r"<\s*(\w+)\s*>")),
    (SyntaxFamily.SQUARE, re.compile(r"\[\s*(\w+)\s*\]")),
    (SyntaxFamily.UNDERLINE, re.compile(r"_(\w+)_")),
]


@dataclass(frozen=True)
class LiteralToken:
    """A literal string to be matched with word-boundary protection."""

    text: str

    def compile(self) -> re.Pattern:
        return guard(re.escape(self.text))


@dataclass(frozen=True)
class CompiledMatcher:
    """A pre-built regular expression, used exactly as given."""

    pattern: re.Pattern

    def compile(self) -> re.Pattern:
        return self.pattern


Matcher = LiteralToken | CompiledMatcher


def guard(expression: str) -> re.Pattern:
    """Wrap a regex so it only matches between non-word characters.

    The match must be preceded and followed by a non-word character or a
    string boundary, so ``_name_`` never matches inside ``my_name_is``.
    """
    return re.compile(rf"(?<!\w){expression}(?!\w)")


def as_matcher(pattern: "Matcher | str | re.Pattern") -> Matcher:
    """Normalize a user supplied pattern into the tagged matcher union.

    Raises:
        TypeError: If the pattern is neither a string nor a compiled regex.
    """
    if isinstance(pattern, (LiteralToken, CompiledMatcher)):
        return pattern
    if isinstance(pattern, str):
        return LiteralToken(pattern)
    if isinstance(pattern, re.Pattern):
        return CompiledMatcher(pattern)
    raise TypeError(f"Expected str or re.Pattern, got {type(pattern).__name__}")


def compile_pattern(pattern: "Matcher | str | re.Pattern") -> re.Pattern:
    """Compile any accepted pattern form into a regex."""
    return as_matcher(pattern).compile()


def format_token(name: str, syntax: SyntaxFamily | str) -> str:
    """Return the decorated display token for ``name``.

    Unknown families fall back to the undecorated name.
    """
    spec = _spec_for(syntax)
    if spec is None:
        return name
    return spec.display.format(name=name)


def build_pattern(name: str, syntax: SyntaxFamily | str) -> re.Pattern:
    """Compile a guarded matcher for ``name`` decorated in ``syntax``."""
    escaped = re.escape(name)
    spec = _spec_for(syntax)
    if spec is None:
        return guard(escaped)
    return guard(spec.template.format(name=escaped))


def bare_name(token: str) -> str:
    """Strip one layer of family delimiters from a display token.

    Underscores inside the delimiters belong to the name, so ``{{ _tmp }}``
    yields ``_tmp``. Tokens of no known family are only whitespace-trimmed.
    """
    stripped = token.strip()
    for family, _surface in _SURFACE_SYNTAX:
        opening, closing = _delimiters(family)
        if (
            len(stripped) > len(opening) + len(closing)
            and stripped.startswith(opening)
            and stripped.endswith(closing)
        ):
            return stripped[len(opening) : len(stripped) - len(closing)].strip()
    return stripped


def detect_syntax(token: str) -> tuple[SyntaxFamily, str]:
    """Classify a decorated literal by its surface syntax.

    Returns:
        ``(family, name)`` for a recognized token, else ``(CUSTOM, token)``.
    """
    stripped = token.strip()
    for family, surface in _SURFACE_SYNTAX:
        match = surface.fullmatch(stripped)
        if match:
            return family, match.group(1)
    return SyntaxFamily.CUSTOM, token


def syntax_example(syntax: SyntaxFamily | str) -> str:
    spec = _spec_for(syntax)
    return spec.example if spec else "placeholder_name"


def syntax_description(syntax: SyntaxFamily | str) -> str:
    spec = _spec_for(syntax)
    return spec.description if spec else "Undecorated literal"


def _delimiters(family: SyntaxFamily) -> tuple[str, str]:
    opening, closing = SYNTAX_SPECS[family].display.format(name="\0").split("\0")
    return opening.strip(), closing.strip()


def _spec_for(syntax: SyntaxFamily | str) -> SyntaxSpec | None:
    try:
        family = SyntaxFamily(syntax)
    except ValueError:
        return None
    return SYNTAX_SPECS.get(family)
