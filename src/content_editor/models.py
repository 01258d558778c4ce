"""Data classes for chapter content records."""
from dataclasses import dataclass, field
from typing import Any, Optional

DEFAULT_ULTRA_PRICE = 10
OPTION_COUNT = 4

# dataclass attribute -> stored document key
_SCALAR_FIELDS = {
    "free_link": "freeLink",
    "premium_link": "premiumLink",
    "ultra_pdf_link": "ultraPdfLink",
    "free_video_link": "freeVideoLink",
    "premium_video_link": "premiumVideoLink",
    "free_notes_html": "freeNotesHtml",
    "premium_notes_html": "premiumNotesHtml",
    "video_credits_cost": "videoCreditsCost",
    "price": "price",
}
_LIST_FIELDS = ("videoPlaylist", "manualMcqData", "weeklyTestMcqData")


def blank_options() -> list[str]:
    return [""] * OPTION_COUNT


@dataclass
class MCQItem:
    question: str
    options: list[str] = field(default_factory=blank_options)
    correct_answer: int = 0
    explanation: str = ""

    def to_dict(self) -> dict:
        return {
            "question": self.question,
            "options": list(self.options),
            "correctAnswer": self.correct_answer,
            "explanation": self.explanation,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MCQItem":
        return cls(
            question=data.get("question", ""),
            options=list(data.get("options") or blank_options()),
            correct_answer=data.get("correctAnswer", 0),
            explanation=data.get("explanation") or "",
        )


@dataclass
class VideoEntry:
    title: str
    url: str

    def to_dict(self) -> dict:
        return {"title": self.title, "url": self.url}

    @classmethod
    def from_dict(cls, data: dict) -> "VideoEntry":
        return cls(title=data.get("title", ""), url=data.get("url", ""))


@dataclass
class ContentRecord:
    free_link: Optional[str] = None
    premium_link: Optional[str] = None
    ultra_pdf_link: Optional[str] = None
    free_video_link: Optional[str] = None
    premium_video_link: Optional[str] = None
    free_notes_html: Optional[str] = None
    premium_notes_html: Optional[str] = None
    video_credits_cost: Optional[int] = None
    price: Optional[int] = None
    video_playlist: list[VideoEntry] = field(default_factory=list)
    manual_mcq_data: list[MCQItem] = field(default_factory=list)
    weekly_test_mcq_data: list[MCQItem] = field(default_factory=list)
    extras: dict[str, Any] = field(default_factory=dict)  # keys we don't model

    @classmethod
    def default(cls) -> "ContentRecord":
        return cls(price=DEFAULT_ULTRA_PRICE)

    def to_dict(self) -> dict:
        data = dict(self.extras)
        for attr, key in _SCALAR_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        data["videoPlaylist"] = [v.to_dict() for v in self.video_playlist]
        data["manualMcqData"] = [q.to_dict() for q in self.manual_mcq_data]
        if self.weekly_test_mcq_data:
            data["weeklyTestMcqData"] = [q.to_dict() for q in self.weekly_test_mcq_data]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "ContentRecord":
        known = set(_SCALAR_FIELDS.values()) | set(_LIST_FIELDS)
        kwargs = {attr: data.get(key) for attr, key in _SCALAR_FIELDS.items()}
        return cls(
            **kwargs,
            video_playlist=[VideoEntry.from_dict(v) for v in data.get("videoPlaylist") or []],
            manual_mcq_data=[MCQItem.from_dict(q) for q in data.get("manualMcqData") or []],
            weekly_test_mcq_data=[MCQItem.from_dict(q) for q in data.get("weeklyTestMcqData") or []],
            extras={k: v for k, v in data.items() if k not in known},
        )
