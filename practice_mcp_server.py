"""
Grindset MCP Server.
Exposes practice logging as tools so an assistant can scaffold attempts.
"""

import logging
import os
import sys

# Ensure sibling modules are importable
sys.path.insert(0, os.path.dirname(__file__))

from fastmcp import FastMCP

from doc_converter import check_pandoc
from errors import ConverterUnavailable, GrindsetError
from language_map import SupportedLanguage, extensions_for, normalize
from practice_logger import log_practice as _log_practice

mcp = FastMCP("Grindset")


async def record_practice(title_slug: str, language: str) -> dict:
    """Run one practice session and describe the outcome as a dict."""
    try:
        attempt_folder = await _log_practice(title_slug, language)
    except GrindsetError as e:
        return {"error": str(e), "kind": type(e).__name__}

    lang = normalize(language)
    return {
        "status": "logged",
        "attempt_folder": str(attempt_folder.resolve()),
        "language": lang.name,
        "leetcode_slug": lang.leetcode_slug,
    }


def language_table() -> dict[str, list[str]]:
    return {lang.leetcode_slug: extensions_for(lang) for lang in SupportedLanguage}


@mcp.tool()
async def log_practice(title_slug: str, language: str) -> dict:
    """
    Fetch a LeetCode question by title slug (e.g. "two-sum") and create a
    timestamped attempt folder with the starter code for `language`, given
    as a file extension (e.g. "py", "rs").
    Returns the absolute attempt folder path.
    """
    return await record_practice(title_slug, language)


@mcp.tool()
def supported_languages() -> dict:
    """Map each LeetCode language slug to the file extensions accepted for it."""
    return language_table()


logger = logging.getLogger("practice_mcp_server")


def main() -> int:
    logging.basicConfig(level=logging.INFO)

    # Validate pandoc before serving any session
    try:
        check_pandoc()
    except ConverterUnavailable as e:
        logger.error(str(e))
        return 1

    mcp.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
