"""Tests for content key derivation."""
from content_editor.keys import derive_content_key


def test_stream_suffix_for_class_11():
    key = derive_content_key("CBSE", "11", "pcm", "Physics", "ch1")
    assert key == "nst_content_CBSE_11-pcm_Physics_ch1"


def test_stream_suffix_for_class_12():
    assert "-pcb" in derive_content_key("CBSE", "12", "pcb", "Biology", "ch3")


def test_no_suffix_below_class_11():
    key = derive_content_key("CBSE", "10", None, "Physics", "ch1")
    assert key == "nst_content_CBSE_10_Physics_ch1"


def test_no_suffix_when_stream_missing():
    assert derive_content_key("CBSE", "11", None, "Physics", "ch1") == "nst_content_CBSE_11_Physics_ch1"
    assert derive_content_key("CBSE", "11", "", "Physics", "ch1") == "nst_content_CBSE_11_Physics_ch1"


def test_stream_ignored_for_other_classes():
    assert derive_content_key("CBSE", "10", "pcm", "Physics", "ch1") == "nst_content_CBSE_10_Physics_ch1"


def test_key_is_stable():
    a = derive_content_key("ICSE", "12", "commerce", "Accounts", "7")
    b = derive_content_key("ICSE", "12", "commerce", "Accounts", "7")
    assert a == b
