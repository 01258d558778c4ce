"""Editing session for one chapter's content record."""
import copy
import dataclasses
import json
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from content_editor.db import get_item, set_item
from content_editor.importer import parse_mcq_paste
from content_editor.keys import derive_content_key
from content_editor.models import OPTION_COUNT, ContentRecord, MCQItem, VideoEntry
from content_editor.remote import RemoteDocumentStore, RemoteUnavailableError

logger = logging.getLogger(__name__)

TABS = ("PDF", "VIDEO", "NOTES", "MCQ")


@dataclass
class Saved:
    key: str
    record: ContentRecord


@dataclass
class SaveFailed:
    key: str
    record: ContentRecord
    reason: str


SaveResult = Union[Saved, SaveFailed]


def load_record(db_path: str, remote: Optional[RemoteDocumentStore], key: str) -> ContentRecord:
    """Remote first, then the local store, then the default record."""
    data = None
    if remote is not None:
        try:
            data = remote.get(key)
        except RemoteUnavailableError as exc:
            logger.warning("Remote load failed, using local copy: %s", exc)
    if not data:
        data = _read_local(db_path, key)
    if not data:
        return ContentRecord.default()
    return ContentRecord.from_dict(data)


def _read_local(db_path: str, key: str) -> Optional[dict]:
    local = get_item(db_path, key)
    if not local:
        return None
    try:
        data = json.loads(local)
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring unreadable local copy of %s: %s", key, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring local copy of %s: expected an object, got %s", key, type(data).__name__)
        return None
    return data


class ContentEditor:
    def __init__(
        self,
        db_path: str,
        remote: Optional[RemoteDocumentStore],
        board: str,
        class_level: str,
        stream: Optional[str],
        subject_name: str,
        chapter_id: str,
        on_save: Optional[Callable[[], None]] = None,
    ):
        self.db_path = db_path
        self.remote = remote
        self.subject_name = subject_name
        self.class_level = class_level
        self.chapter_id = chapter_id
        self.key = derive_content_key(board, class_level, stream, subject_name, chapter_id)
        self.on_save = on_save
        self.active_tab = "PDF"
        self.config = ContentRecord()
        self.video_playlist: list[VideoEntry] = []
        self.mcqs: list[MCQItem] = []
        self.video_title = ""
        self.video_url = ""
        self.loading = True
        self.closed = False

    # --- session ---

    def load(self) -> bool:
        """Populate editing state. Returns False if the editor was closed meanwhile."""
        record = load_record(self.db_path, self.remote, self.key)
        if self.closed:
            logger.info("Editor for %s closed during load, discarding result", self.key)
            return False
        self.config = record
        self.video_playlist = list(record.video_playlist)
        self.mcqs = list(record.manual_mcq_data)
        self.loading = False
        return True

    def close(self) -> None:
        self.closed = True

    def select_tab(self, tab: str) -> None:
        tab = tab.upper()
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        self.active_tab = tab

    def build_record(self) -> ContentRecord:
        """Snapshot of the editing state. Later edits don't touch the snapshot."""
        return copy.deepcopy(dataclasses.replace(
            self.config,
            video_playlist=self.video_playlist,
            manual_mcq_data=self.mcqs,
        ))

    def save(self) -> SaveResult:
        """Write the merged record locally, then remotely.

        The local write always lands first. A remote failure is reported as
        SaveFailed and on_save is not called.
        """
        record = self.build_record()
        data = record.to_dict()
        set_item(self.db_path, self.key, json.dumps(data))
        logger.info("Saved %s locally", self.key)
        if self.remote is not None:
            try:
                self.remote.put(self.key, data)
            except RemoteUnavailableError as exc:
                logger.warning("Remote save failed for %s: %s", self.key, exc)
                return SaveFailed(self.key, record, str(exc))
        if self.on_save:
            self.on_save()
        return Saved(self.key, record)

    # --- PDF tab ---

    def set_free_link(self, url: str) -> None:
        self.config.free_link = url

    def set_premium_link(self, url: str) -> None:
        self.config.premium_link = url

    def set_ultra_pdf_link(self, url: str) -> None:
        self.config.ultra_pdf_link = url

    def set_price(self, price: int) -> None:
        if price < 0:
            raise ValueError("Price can't be negative")
        self.config.price = price

    # --- VIDEO tab ---

    def add_video(self) -> bool:
        """Append the pending title/url as a playlist entry. Both are required."""
        if not (self.video_title and self.video_url):
            return False
        self.video_playlist.append(VideoEntry(self.video_title, self.video_url))
        self.video_title = ""
        self.video_url = ""
        return True

    def remove_video(self, idx: int) -> None:
        _check_index(idx, len(self.video_playlist), "video")
        del self.video_playlist[idx]

    # --- NOTES tab ---

    def set_free_notes(self, html: str) -> None:
        self.config.free_notes_html = html

    def set_premium_notes(self, html: str) -> None:
        self.config.premium_notes_html = html

    # --- MCQ tab ---

    def add_mcq(self) -> MCQItem:
        item = MCQItem(question="")
        self.mcqs.append(item)
        return item

    def delete_mcq(self, idx: int) -> None:
        _check_index(idx, len(self.mcqs), "question")
        del self.mcqs[idx]

    def set_question(self, idx: int, text: str) -> None:
        self._replace_mcq(idx, question=text)

    def set_correct_answer(self, idx: int, answer: int) -> None:
        if not 0 <= answer < OPTION_COUNT:
            raise ValueError(f"Correct answer must be between 0 and {OPTION_COUNT - 1}")
        self._replace_mcq(idx, correct_answer=answer)

    def set_explanation(self, idx: int, text: str) -> None:
        self._replace_mcq(idx, explanation=text)

    def update_mcq_option(self, idx: int, option_idx: int, text: str) -> None:
        _check_index(idx, len(self.mcqs), "question")
        options = list(self.mcqs[idx].options)
        _check_index(option_idx, len(options), "option")
        options[option_idx] = text
        self._replace_mcq(idx, options=options)

    def import_mcqs(self, text: str) -> dict:
        """Append questions parsed from a spreadsheet paste. Raises MalformedImportError."""
        result = parse_mcq_paste(text)
        self.mcqs.extend(result["items"])
        logger.info("Imported %d questions into %s", len(result["items"]), self.key)
        return {"imported": len(result["items"]), "skipped": result["skipped"]}

    def _replace_mcq(self, idx: int, **changes) -> None:
        _check_index(idx, len(self.mcqs), "question")
        self.mcqs[idx] = dataclasses.replace(self.mcqs[idx], **changes)


def _check_index(idx: int, length: int, what: str) -> None:
    if not 0 <= idx < length:
        raise IndexError(f"No {what} at position {idx}")
