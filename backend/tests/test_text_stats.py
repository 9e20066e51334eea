import pytest

from ielts_writer.domain.editor.text_stats import compute_text_stats, count_paragraphs, count_words


@pytest.mark.parametrize(
    "text, expected",
    [("", 0), ("   ", 0), ("a b  c", 3), ("\tone\ntwo  three\n\n four ", 4)],
)
def test_word_count(text, expected):
    assert count_words(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("  \n\n  ", 0),
        ("a\n\nb", 2),
        ("a\nb", 1),
        ("a\n   \nb", 2),
        ("a\n\n\n\nb\n\nc", 3),
        ("\n\na\n\n", 1),
    ],
)
def test_paragraph_count(text, expected):
    assert count_paragraphs(text) == expected


def test_char_count_includes_whitespace():
    stats = compute_text_stats("ab c\n\nd")
    assert stats.char_count == 7
    assert stats.word_count == 3
    assert stats.paragraph_count == 2


@pytest.mark.parametrize(
    "words, progress, in_range",
    [(0, 0.0, False), (150, 50.0, False), (250, 250 / 3, True), (300, 100.0, True), (450, 100.0, False)],
)
def test_target_progress_is_capped_at_three_hundred_words(words, progress, in_range):
    stats = compute_text_stats(" ".join(["word"] * words))
    assert stats.target_progress == pytest.approx(progress)
    assert stats.in_target_range is in_range
