"""
Language identifier mapping: pure logic, no I/O.
File-extension tokens on one side, LeetCode language slugs on the other.
"""

from enum import Enum

from errors import EmptyLanguageCode, UnsupportedLanguage

# Characters stripped from both ends of a raw token, repeatedly
TRIM_CHARS = " ."


class SupportedLanguage(Enum):
    """Each value is the slug LeetCode uses to tag code snippets."""

    GO = "golang"
    JAVA = "java"
    PYTHON3 = "python3"  # python2 snippets are ignored
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    CPP = "cpp"
    C = "c"
    SWIFT = "swift"
    KOTLIN = "kotlin"
    DART = "dart"
    RUBY = "ruby"
    SCALA = "scala"
    RUST = "rust"
    RACKET = "racket"
    ERLANG = "erlang"
    ELIXIR = "elixir"

    @property
    def leetcode_slug(self) -> str:
        return self.value


EXTENSIONS = {
    "cpp": SupportedLanguage.CPP,
    "java": SupportedLanguage.JAVA,
    "py": SupportedLanguage.PYTHON3,
    "c": SupportedLanguage.C,
    "js": SupportedLanguage.JAVASCRIPT,
    "ts": SupportedLanguage.TYPESCRIPT,
    "swift": SupportedLanguage.SWIFT,
    "kt": SupportedLanguage.KOTLIN,
    "dart": SupportedLanguage.DART,
    "go": SupportedLanguage.GO,
    "rb": SupportedLanguage.RUBY,
    "scala": SupportedLanguage.SCALA,
    "rs": SupportedLanguage.RUST,
    "rkt": SupportedLanguage.RACKET,
    "erl": SupportedLanguage.ERLANG,
    "ex": SupportedLanguage.ELIXIR,
    "exs": SupportedLanguage.ELIXIR,
}


def clean_language_token(token: str) -> str:
    """
    Strip spaces and dots from both ends, e.g. "   ..ts" -> "ts".
    Raises EmptyLanguageCode if nothing is left.
    """
    cleaned = token.strip(TRIM_CHARS)
    if not cleaned:
        raise EmptyLanguageCode()
    return cleaned


def normalize(token: str) -> SupportedLanguage:
    """Map a raw extension token to its language. Lookup is case-sensitive."""
    cleaned = clean_language_token(token)
    try:
        return EXTENSIONS[cleaned]
    except KeyError:
        raise UnsupportedLanguage(cleaned) from None


def extensions_for(language: SupportedLanguage) -> list[str]:
    return [ext for ext, lang in EXTENSIONS.items() if lang is language]


def supported_extensions() -> list[str]:
    return sorted(EXTENSIONS)
