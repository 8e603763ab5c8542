"""
Services - Response Normalizer

Turns a raw Responses API payload into a SearchResult.

The payload is only loosely structured, so every read is tolerant:
a missing or mistyped field degrades to an empty default instead of
failing the call.
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from x_search_mcp.schemas.search import Citation, SearchResult

logger = logging.getLogger(__name__)


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _first_of_type(items: Any, kind: str) -> Optional[Dict[str, Any]]:
    for item in _as_list(items):
        if isinstance(item, dict) and item.get("type") == kind:
            return item
    return None


def _as_offset(value: Any) -> Optional[int]:
    # bool is an int subclass, but never a valid offset
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def extract_output_text(response: Any) -> Optional[Dict[str, Any]]:
    """
    Locate the output_text entry of the message output.

    Returns:
        The content entry dict, or None if the payload has no message
        or the message has no output_text
    """
    if not isinstance(response, dict):
        return None
    message = _first_of_type(response.get("output"), "message")
    if message is None:
        return None
    return _first_of_type(message.get("content"), "output_text")


def parse_structured_payload(text: str) -> Optional[Dict[str, Any]]:
    """
    Parse the answer text as the requested JSON object.

    Returns:
        The parsed dict, or None when the text is empty, not JSON, or
        JSON that is not an object
    """
    if not text:
        return None
    try:
        parsed = json.loads(text)
    except (ValueError, RecursionError):
        logger.debug("Answer text is not JSON; using raw text")
        return None
    return parsed if isinstance(parsed, dict) else None


def dedupe_urls(urls: Iterable[str]) -> List[str]:
    """Drop empty and repeated URLs, keeping first-seen order."""
    seen = set()
    result = []
    for url in urls:
        if not url or url in seen:
            continue
        seen.add(url)
        result.append(url)
    return result


def normalize_citations(
    annotations: Any,
    parsed_citations: Any = None,
) -> Tuple[List[str], List[Citation]]:
    """
    Reconcile citations from annotations and the structured payload.

    Annotation URLs are authoritative when there are any. Otherwise the
    payload's ``citations`` strings starting with ``http`` are used as
    given (this secondary path is not de-duplicated).

    Args:
        annotations: The output_text ``annotations`` value
        parsed_citations: The structured payload's ``citations`` value

    Returns:
        (citation URLs, inline citations)
    """
    inline: List[Citation] = []
    seen = set()

    for annotation in _as_list(annotations):
        if not isinstance(annotation, dict):
            continue
        if annotation.get("type") != "url_citation":
            continue
        url = annotation.get("url")
        if not isinstance(url, str) or not url or url in seen:
            continue
        seen.add(url)

        title = annotation.get("title")
        inline.append(Citation(
            url=url,
            start_index=_as_offset(annotation.get("start_index")),
            end_index=_as_offset(annotation.get("end_index")),
            title=title if isinstance(title, str) else None,
        ))

    urls = dedupe_urls(citation.url for citation in inline)
    if urls:
        return urls, inline

    fallback = [
        c for c in _as_list(parsed_citations)
        if isinstance(c, str) and c.startswith("http")
    ]
    return fallback, inline


def normalize_response(
    response: Any,
    include_raw_response: bool = False,
) -> SearchResult:
    """
    Build the final SearchResult from a raw Responses API payload.

    Args:
        response: Decoded JSON body of POST /responses
        include_raw_response: Attach the untouched payload as raw_response

    Returns:
        SearchResult; never raises on unexpected payload shapes
    """
    content = extract_output_text(response) or {}
    raw_text = content.get("text")
    if not isinstance(raw_text, str):
        raw_text = ""

    payload = parse_structured_payload(raw_text) or {}
    citations, inline_citations = normalize_citations(
        content.get("annotations"),
        payload.get("citations"),
    )

    answer = payload.get("answer")
    if not isinstance(answer, str) or not answer.strip():
        answer = raw_text

    fields: Dict[str, Any] = {
        "answer": answer,
        "citations": citations,
        "inline_citations": inline_citations,
    }
    if include_raw_response:
        fields["raw_response"] = response

    return SearchResult(**fields)
