"""JSON extraction from raw model replies.

Models frequently wrap JSON in prose or markdown fences. Extractors locate
a JSON object inside such text and parse it, signalling failure with
NoJsonFoundError or MalformedJsonError rather than returning a default.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Tuple

from ..errors import MalformedJsonError, NoJsonFoundError
from lingua.utils.text import safe_truncate

logger = logging.getLogger(__name__)

# ```json ... ``` or ``` ... ``` surrounding the whole reply
CODE_FENCE_PATTERN = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?```$", re.DOTALL)


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence surrounding the whole text.

    Args:
        text: Raw reply

    Returns:
        Fence content, or the stripped text if it is not fenced
    """
    text = text.strip()
    match = CODE_FENCE_PATTERN.match(text)
    if match:
        return match.group(1).strip()
    return text


class JsonExtractor(ABC):
    """Abstract extractor interface.

    Orchestrators depend on this interface only, so the span-selection
    heuristic can be swapped without touching callers.
    """

    @abstractmethod
    def find_span(self, raw: str) -> Tuple[int, int]:
        """Locate the JSON candidate.

        Args:
            raw: Raw reply text

        Returns:
            (start, end) indices, end exclusive

        Raises:
            NoJsonFoundError: If no candidate exists
        """
        pass

    def extract(self, raw: str) -> Any:
        """Locate and parse the JSON candidate in ``raw``.

        Args:
            raw: Raw reply text

        Returns:
            Parsed JSON value

        Raises:
            NoJsonFoundError: If no candidate span exists
            MalformedJsonError: If the candidate span is not valid JSON
        """
        raw = raw or ""
        start, end = self.find_span(raw)
        candidate = raw[start:end]
        try:
            return json.loads(candidate)
        except json.JSONDecodeError as e:
            logger.warning(
                "Error parsing JSON candidate %r: %s", safe_truncate(candidate, 200), e
            )
            raise MalformedJsonError(str(e), candidate=candidate) from e


class BraceSpanExtractor(JsonExtractor):
    """Parses everything from the first ``{`` to the last ``}``.

    The span is not checked for balance: ``{"a": 1} and {b`` yields an
    invalid candidate and therefore MalformedJsonError.
    """

    def find_span(self, raw: str) -> Tuple[int, int]:
        start = raw.find("{")
        end = raw.rfind("}")
        if start == -1 or end == -1 or end < start:
            raise NoJsonFoundError()
        return start, end + 1


class BalancedBraceExtractor(JsonExtractor):
    """Parses the first balanced ``{...}`` object.

    Braces inside JSON string literals (including escaped quotes) are not
    counted.
    """

    def find_span(self, raw: str) -> Tuple[int, int]:
        start = raw.find("{")
        if start == -1:
            raise NoJsonFoundError()

        depth = 0
        in_string = False
        escape_next = False

        for i in range(start, len(raw)):
            char = raw[i]
            if escape_next:
                escape_next = False
                continue
            if in_string:
                if char == "\\":
                    escape_next = True
                elif char == '"':
                    in_string = False
                continue
            if char == '"':
                in_string = True
            elif char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return start, i + 1

        raise NoJsonFoundError("unbalanced braces")


_default_extractor = BraceSpanExtractor()


def extract_json(raw: str) -> Any:
    """Extract JSON using the first-brace-to-last-brace span.

    Args:
        raw: Raw reply text

    Returns:
        Parsed JSON value

    Raises:
        NoJsonFoundError: If the text has no ``{`` or no ``}``
        MalformedJsonError: If the span is not valid JSON
    """
    return _default_extractor.extract(raw)
