"""Content key derivation for chapter records."""
from typing import Optional

KEY_PREFIX = "nst_content_"

# Only senior secondary classes are split into streams (pcm, pcb, commerce...)
STREAM_CLASS_LEVELS = ("11", "12")


def stream_suffix(class_level: str, stream: Optional[str]) -> str:
    if class_level in STREAM_CLASS_LEVELS and stream:
        return f"-{stream}"
    return ""


def derive_content_key(
    board: str, class_level: str, stream: Optional[str], subject_name: str, chapter_id: str,
) -> str:
    """Build the storage key for one chapter's content record.

    The same key addresses both the local and the remote store, so it must be
    reproducible from the chapter coordinates alone.
    """
    suffix = stream_suffix(class_level, stream)
    return f"{KEY_PREFIX}{board}_{class_level}{suffix}_{subject_name}_{chapter_id}"
