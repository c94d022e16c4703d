"""
Practice session materializer.

Lays out one attempt on disk:

    <ext>/<frontend_id>_<Title_With_Underscores>/
        question.md
        question_attributes.toml
        <YYYYMMDD_HHMMSS>/
            attempt.<ext>
            attempt_attributes.toml
"""

import asyncio
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from attributes_toml import dump_attempt_attributes, dump_question_attributes
from doc_converter import DocumentConverter, PandocConverter
from errors import FilesystemFailure
from language_map import clean_language_token, normalize
from question_client import QuestionClient
from question_model import AttemptAttributes, QuestionAttributes

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

PRACTICE_ROOT = os.getenv("GRINDSET_ROOT", ".")
ATTEMPT_FOLDER_FORMAT = "%Y%m%d_%H%M%S"

QUESTION_FILE = "question.md"
QUESTION_ATTRIBUTES_FILE = "question_attributes.toml"
ATTEMPT_ATTRIBUTES_FILE = "attempt_attributes.toml"


def local_now() -> datetime:
    """Timezone-aware local time, truncated to the second."""
    return datetime.now().astimezone().replace(microsecond=0)


def _mkdir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemFailure(f"Could not create {path}: {e}", path=path) from e


def _write_text(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise FilesystemFailure(f"Could not write {path}: {e}", path=path) from e


async def log_practice(
    title_slug: str,
    language_token: str,
    client: Optional[QuestionClient] = None,
    converter: Optional[DocumentConverter] = None,
    root: Optional[Path] = None,
    now: Callable[[], datetime] = local_now,
) -> Path:
    """
    Fetch a question and record a fresh attempt at it.
    Returns the attempt folder. Files written before a failure are left in place.
    """
    language = normalize(language_token)
    ext = clean_language_token(language_token)

    client = client or QuestionClient()
    converter = converter or PandocConverter()
    root = Path(root if root is not None else PRACTICE_ROOT)

    # The four queries are independent
    metadata, content, topics, boilerplate = await asyncio.gather(
        asyncio.to_thread(client.fetch_metadata, title_slug),
        asyncio.to_thread(client.fetch_content, title_slug),
        asyncio.to_thread(client.fetch_topics, title_slug),
        asyncio.to_thread(client.fetch_boilerplate, title_slug),
    )

    question_folder = root / ext / metadata.folder_name
    _mkdir(question_folder)

    markdown = await converter.convert(content.content)
    _write_text(question_folder / QUESTION_FILE, markdown)

    question_attributes = QuestionAttributes(
        difficulty=metadata.difficulty,
        topics=topics.names,
    )
    _write_text(
        question_folder / QUESTION_ATTRIBUTES_FILE,
        dump_question_attributes(question_attributes),
    )

    # One instant for the folder name and both timestamps
    attempt_time = now()
    attempt_folder = question_folder / attempt_time.strftime(ATTEMPT_FOLDER_FORMAT)
    _mkdir(attempt_folder)

    snippet = boilerplate.snippet_for(language.leetcode_slug)
    if snippet is not None:
        _write_text(attempt_folder / f"attempt.{ext}", snippet.code)
    else:
        logger.warning(f"No boilerplate for language: {language.name} ({language.leetcode_slug})")

    attempt_attributes = AttemptAttributes(
        attempt_start_time=attempt_time,
        attempt_end_time=attempt_time,
    )
    _write_text(
        attempt_folder / ATTEMPT_ATTRIBUTES_FILE,
        dump_attempt_attributes(attempt_attributes),
    )

    logger.info(f"Logged {metadata.frontend_id}. {metadata.title} ({metadata.difficulty.value})")
    return attempt_folder
