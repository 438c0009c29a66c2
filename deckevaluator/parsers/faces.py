"""
Front-face helpers for multi-faced cards.

Double-faced, split, adventure and flip cards carry several faces. Only the
front face drives classification, so every component that looks at a type
line or a faces array goes through these helpers.
"""

from collections.abc import Mapping
from typing import Any

FACE_SEPARATOR = "//"


def front_face(type_line: str | None) -> str:
    """
    Return the front-face part of a possibly "//"-joined string.

    Args:
        type_line: Type line such as "Creature — Human // Land"

    Returns:
        Text before the first "//", whitespace-stripped. "" for empty input.
    """
    if not type_line:
        return ""
    return type_line.split(FACE_SEPARATOR, 1)[0].strip()


def front_face_record(raw: Mapping[str, Any]) -> Mapping[str, Any]:
    """Return the first entry of a Scryfall card's card_faces, or {} if there is none."""
    faces = raw.get("card_faces")
    if isinstance(faces, list) and faces and isinstance(faces[0], Mapping):
        return faces[0]
    return {}
