"""Tests for content record data classes."""
from content_editor.models import ContentRecord, MCQItem, VideoEntry


def test_mcq_defaults():
    q = MCQItem(question="")
    assert q.options == ["", "", "", ""]
    assert q.correct_answer == 0
    assert q.explanation == ""


def test_mcq_options_not_shared():
    a = MCQItem(question="a")
    b = MCQItem(question="b")
    a.options[0] = "changed"
    assert b.options[0] == ""


def test_default_record():
    r = ContentRecord.default()
    assert r.price == 10
    assert r.video_playlist == []
    assert r.manual_mcq_data == []


def test_to_dict_uses_document_keys():
    r = ContentRecord(
        free_link="https://x/free.pdf", price=25,
        video_playlist=[VideoEntry("Intro", "https://v/1")],
        manual_mcq_data=[MCQItem("2+2?", ["1", "2", "3", "4"], 3, "basic")],
    )
    data = r.to_dict()
    assert data["freeLink"] == "https://x/free.pdf"
    assert data["price"] == 25
    assert data["videoPlaylist"] == [{"title": "Intro", "url": "https://v/1"}]
    assert data["manualMcqData"][0]["correctAnswer"] == 3
    assert "premiumLink" not in data


def test_default_record_serializes_price_and_empty_lists():
    assert ContentRecord.default().to_dict() == {"price": 10, "videoPlaylist": [], "manualMcqData": []}


def test_from_dict_keeps_unknown_keys():
    data = {"price": 5, "freeVideoLink": "https://v", "legacyFlag": True}
    r = ContentRecord.from_dict(data)
    assert r.free_video_link == "https://v"
    assert r.extras == {"legacyFlag": True}
    assert r.to_dict()["legacyFlag"] is True


def test_from_dict_reads_weekly_test_bank():
    data = {"weeklyTestMcqData": [{"question": "Q", "options": ["a", "b", "c", "d"], "correctAnswer": 1}]}
    r = ContentRecord.from_dict(data)
    assert r.weekly_test_mcq_data[0].correct_answer == 1
    assert r.weekly_test_mcq_data[0].explanation == ""
