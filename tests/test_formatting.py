from __future__ import annotations

from workshop_gateway.summarizer import format_summary


def test_asterisks_become_bullets():
    assert format_summary("* one * two") == "• one • two"


def test_numbered_markers_start_new_lines():
    assert format_summary("steps 1. wash 2. dry") == "steps \n1. wash \n2. dry"


def test_labels_are_bolded_on_their_own_line():
    assert format_summary("Summary: it works") == "\n**Summary:**\n it works"


def test_plain_text_is_unchanged():
    text = "meta ai is developing advanced ai systems."
    assert format_summary(text) == text
