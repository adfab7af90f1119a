import pytest

from lyricslides.models import SlideFormat
from lyricslides.slides import split_into_slides, split_paragraphs

LYRICS = """Aseda yɛ wo de
Nhyira nso yɛ wo de
Wo yɛ ɔdɔ nyinaa mu kɛse
Medaase Awurade
Yɛ ma wo so

Yɛ da wo ase
Ɔdɔ a wodo yɛn
Ɛyɛ kɛse pa ara"""


def _non_blank_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


# ---------------------------------------------------------------------------
# split_paragraphs
# ---------------------------------------------------------------------------


def test_paragraphs_split_on_blank_line():
    assert split_paragraphs("a\nb\n\nc") == ["a\nb", "c"]


def test_paragraphs_split_on_long_blank_run():
    assert split_paragraphs("a\n\n\n\nb") == ["a", "b"]


def test_whitespace_only_line_counts_as_blank():
    assert split_paragraphs("a\n   \nb") == ["a", "b"]


def test_paragraphs_trimmed_and_empty_dropped():
    assert split_paragraphs("\n\n  a  \n\n\n\n") == ["a"]


def test_crlf_paragraphs():
    assert split_paragraphs("a\r\nb\r\n\r\nc") == ["a\nb", "c"]


# ---------------------------------------------------------------------------
# split_into_slides
# ---------------------------------------------------------------------------


def test_two_lines_example():
    slides = split_into_slides("Line1\nLine2\n\nLine3\nLine4\nLine5", SlideFormat.TWO_LINES)
    assert slides == ["Line1\nLine2", "Line3\nLine4", "Line5"]


def test_four_lines_groups_within_paragraph():
    slides = split_into_slides(LYRICS, SlideFormat.FOUR_LINES)
    assert slides == [
        "Aseda yɛ wo de\nNhyira nso yɛ wo de\nWo yɛ ɔdɔ nyinaa mu kɛse\nMedaase Awurade",
        "Yɛ ma wo so",
        "Yɛ da wo ase\nƆdɔ a wodo yɛn\nƐyɛ kɛse pa ara",
    ]


def test_full_verse_one_slide_per_paragraph():
    slides = split_into_slides(LYRICS, SlideFormat.FULL_VERSE)
    assert len(slides) == len(split_paragraphs(LYRICS)) == 2
    assert slides[1] == "Yɛ da wo ase\nƆdɔ a wodo yɛn\nƐyɛ kɛse pa ara"


def test_accepts_string_format():
    assert split_into_slides("a\nb\nc", "2-lines") == ["a\nb", "c"]


def test_invalid_format_rejected():
    with pytest.raises(ValueError):
        split_into_slides("a", "3-lines")


@pytest.mark.parametrize("fmt", list(SlideFormat))
def test_empty_input(fmt):
    assert split_into_slides("", fmt) == []


@pytest.mark.parametrize("fmt", list(SlideFormat))
def test_whitespace_only_input(fmt):
    assert split_into_slides(" \n\n \t\n", fmt) == []


@pytest.mark.parametrize("fmt", list(SlideFormat))
def test_single_line(fmt):
    assert split_into_slides("Hallelujah", fmt) == ["Hallelujah"]


@pytest.mark.parametrize("fmt, limit", [(SlideFormat.TWO_LINES, 2), (SlideFormat.FOUR_LINES, 4)])
def test_slides_respect_line_limit(fmt, limit):
    for slide in split_into_slides(LYRICS, fmt):
        assert 1 <= len(slide.split("\n")) <= limit


@pytest.mark.parametrize("fmt", list(SlideFormat))
def test_no_line_dropped_or_duplicated(fmt):
    slides = split_into_slides(LYRICS, fmt)
    assert _non_blank_lines("\n".join(slides)) == _non_blank_lines(LYRICS)


@pytest.mark.parametrize("fmt", list(SlideFormat))
def test_no_slide_is_empty(fmt):
    assert all(slide.strip() for slide in split_into_slides("\n\na\n\n\n\nb\n\n", fmt))


def test_line_policies_strip_surrounding_whitespace():
    assert split_into_slides("  a  \n\tb", SlideFormat.TWO_LINES) == ["a\nb"]
