import pytest

from floating_dictionary.core.languages import resolve_ocr_language
from floating_dictionary.core.models import ExtractedText, TextKind
from floating_dictionary.core.text import TextNormalizer, classify, is_single_word


def test_classification_boundary_at_fifty_characters() -> None:
    assert classify("a" * 49) is TextKind.WORD
    assert classify("a" * 50) is TextKind.PHRASE


@pytest.mark.parametrize("text", ["hello world", "line\nbreak", "tab\tseparated"])
def test_whitespace_makes_a_phrase(text: str) -> None:
    assert classify(text) is TextKind.PHRASE
    assert not is_single_word(text)


def test_surrounding_whitespace_is_ignored() -> None:
    assert classify("  hello\n") is TextKind.WORD
    assert ExtractedText(text="hello\n", language_hint="eng").kind is TextKind.WORD


def test_normalizer_strips_noise_around_single_words() -> None:
    normalizer = TextNormalizer()

    assert normalizer.normalize("“hello,”\n") == "hello"
    assert normalizer.normalize("__สวัสดี!!") == "สวัสดี"
    assert normalizer.normalize("(42)") == "42"


def test_normalizer_leaves_phrases_intact() -> None:
    normalizer = TextNormalizer()

    assert normalizer.normalize("  “Hello, world!”  \n") == "“Hello, world!”"


def test_normalize_extracted_keeps_language_hint() -> None:
    extracted = TextNormalizer().normalize_extracted(ExtractedText("...run...", "eng+tha"))

    assert extracted == ExtractedText("run", "eng+tha")


def test_auto_ocr_language_excludes_target() -> None:
    assert resolve_ocr_language("auto", "th") == "eng+rus+kor+jpn+chi_sim"
    assert resolve_ocr_language("auto", "en") == "rus+kor+jpn+chi_sim+tha"
    assert resolve_ocr_language("auto", "de") == "eng+rus+kor+jpn+chi_sim+tha"


def test_explicit_ocr_language_maps_to_tesseract_code() -> None:
    assert resolve_ocr_language("thai", "en") == "tha"
    assert resolve_ocr_language("chi_sim", "th") == "chi_sim"
    with pytest.raises(ValueError):
        resolve_ocr_language("klingon", "th")
