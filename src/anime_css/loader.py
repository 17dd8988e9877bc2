"""Timeline definition documents (the JSON form of ``timeline`` + ``add`` calls)."""

from collections.abc import Mapping
from typing import Any

from .errors import DefinitionError
from .timeline import Timeline, timeline

OFFSET_KEY = "offset"


def timeline_from_definition(document: Any) -> Timeline:
    """
    Build a timeline from a definition document.

    The document has the shape::

        {
            "name": "spinner",
            "defaults": {"duration": 450, "loop": true},
            "keyframes": [
                {"targets": ".spinner", "rotate": "1turn", "offset": "+=100"}
            ]
        }

    Every keyframe entry is passed to ``Timeline.add`` after removing its
    optional ``offset``.

    Raises:
        DefinitionError: If the document does not have this shape
    """
    if not isinstance(document, Mapping):
        raise DefinitionError("Timeline definition must be a JSON object")

    name = document.get("name")
    if not isinstance(name, str) or not name:
        raise DefinitionError("Timeline definition needs a non-empty string 'name'")

    defaults = document.get("defaults", {})
    if not isinstance(defaults, Mapping):
        raise DefinitionError("'defaults' must be an object")

    keyframes = document.get("keyframes", [])
    if not isinstance(keyframes, list):
        raise DefinitionError("'keyframes' must be a list")

    tl = timeline(name, defaults)
    for index, entry in enumerate(keyframes):
        if not isinstance(entry, Mapping):
            raise DefinitionError(f"Keyframe {index} must be an object")
        params = {key: value for key, value in entry.items() if key != OFFSET_KEY}
        tl.add(params, entry.get(OFFSET_KEY))
    return tl
