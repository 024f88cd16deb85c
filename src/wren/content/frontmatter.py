"""Front-matter parsing for article content resources.

A document may begin with a ``---`` line, a YAML mapping, and a closing
``---`` line, followed by the Markdown body. PyYAML does the parsing;
this module only splits the document and normalizes the result.
"""

import logging
import re

import yaml

from wren.content.models import ContentPayload

logger = logging.getLogger("wren.content")

_FRONT_MATTER_RE = re.compile(r"\A---\n(.*?)\n---\n(.*)\Z", re.DOTALL)


def parse_front_matter(document: str) -> ContentPayload:
    """Split *document* into metadata and body.

    A document without a front-matter block, or whose block is not a
    YAML mapping, yields ``ContentPayload({}, document)`` unchanged.
    """
    text = document.replace("\r\n", "\n")
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return ContentPayload(metadata={}, content=document)

    try:
        metadata = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError as exc:
        logger.warning("Invalid front matter, treating document as body: %s", exc)
        return ContentPayload(metadata={}, content=document)

    if not isinstance(metadata, dict):
        logger.warning("Front matter is not a mapping (%s)", type(metadata).__name__)
        return ContentPayload(metadata={}, content=document)

    return ContentPayload(metadata=metadata, content=match.group(2).strip())
