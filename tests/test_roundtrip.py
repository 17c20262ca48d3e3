"""Round-trip tests between the decoder and the encoder."""

from itertools import product

import pytest

from scriv_rtf import decode, encode
from scriv_rtf.formatting.ir import TextStyle
from scriv_rtf.formatting.parser import MarkdownParser


def equivalent(left: str, right: str) -> bool:
    """Same characters, same span boundaries, same paragraphs."""
    parser = MarkdownParser()
    return parser.parse(left).merged() == parser.parse(right).merged()


class TestTextRoundTrip:
    """decode(encode(t)) reproduces t."""

    @pytest.mark.parametrize(
        "text",
        [
            "Plain paragraph.",
            "**bold** and *italic* text",
            "**bold *and italic* still bold**",
            "***both at once***",
            "**a** **b** and *c* *d*",
            "Em—dash and en–dash",
            "café au lait, naïve, Ærø",
            "中文 and 😀 emoji",
            "Braces {x} and back\\slash",
            "First line\nSecond line\nThird line",
            "Is 2 * 3 = 6?",
        ],
    )
    def test_exact(self, text: str):
        assert decode(encode(text)) == text

    def test_sample_text(self, sample_text: str):
        """Mixed formatting across paragraphs survives."""
        assert decode(encode(sample_text)) == sample_text

    def test_nesting_order(self):
        """Bold stays the outer span with italic inside it."""
        text = "**bold *and italic* still bold**"

        doc = MarkdownParser().parse(decode(encode(text)))
        styles = [run.style for run in doc.blocks[0].runs]

        assert styles == [
            TextStyle.BOLD,
            TextStyle.BOLD | TextStyle.ITALIC,
            TextStyle.BOLD,
        ]

    def test_dashes_distinct(self):
        """Em and en dashes come back as different characters."""
        result = decode(encode("a—b–c"))

        assert result == "a—b–c"
        assert result.count("—") == 1
        assert result.count("–") == 1

    def test_blank_lines_collapse(self):
        """A blank line between paragraphs is not an empty paragraph."""
        result = decode(encode("A\n\nB"))

        assert result == "A\nB"
        assert len(MarkdownParser().parse(result).blocks) == 2

    def test_unclosed_markers_survive_as_text(self):
        """Literal asterisks from unclosed markers come back unchanged."""
        assert decode(encode("**open and *half")) == "**open and *half"


# bold, italic, bold+italic
RUNS = ("**b**", "*c*", "***g***")


def run_combinations(count: int, joiner: str) -> list[str]:
    return [joiner.join(combo) for combo in product(RUNS, repeat=count)]


class TestRunCombinations:
    """Every mix of bold, italic and bold+italic runs survives a round trip."""

    @pytest.mark.parametrize(
        "text", run_combinations(2, " ") + run_combinations(3, " ")
    )
    def test_separated_runs_exact(self, text: str):
        assert decode(encode(text)) == text

    @pytest.mark.parametrize("text", run_combinations(2, ""))
    def test_adjacent_runs_equivalent(self, text: str):
        """Touching runs may lose redundant markers but keep their spans."""
        assert equivalent(decode(encode(text)), text)

    @pytest.mark.parametrize(
        "text", ["***g****c*", "**b*****g****c*", "**a *b** c*", "x ***g****c* y"]
    )
    def test_italic_continuing_after_bold(self, text: str):
        """Bold+italic followed by italic keeps the italic run."""
        assert equivalent(decode(encode(text)), text)

    def test_bold_closes_inside_italic(self):
        """The decoder closes bold first and leaves italic open."""
        assert decode(encode("***g****c*")) == "***g**c*"


class TestRTFRoundTrip:
    """encode(decode(r)) keeps the rendered formatting of r."""

    def test_scrivener_document(self, scrivener_rtf: str):
        """Re-encoding a foreign document keeps its text and spans."""
        text = decode(scrivener_rtf)

        assert equivalent(decode(encode(text)), text)

    def test_header_not_preserved(self, scrivener_rtf: str):
        """The original header is replaced, not merged."""
        rewritten = encode(decode(scrivener_rtf))

        assert "Palatino" not in rewritten
        assert "\\info" not in rewritten

    @pytest.mark.parametrize(
        "raw",
        [
            "{\\rtf1\\pard {\\b bold {\\i both} bold} plain}",
            "{\\rtf1\\pard \\b on\\b0  off \\i it\\i0  done}",
            "{\\rtf1\\pard caf\\'e9\\par na\\u239?ve}",
            "{\\rtf1\\pard {\\i {\\b x} y}}",
        ],
    )
    def test_formatting_preserved(self, raw: str):
        text = decode(raw)

        assert decode(encode(text)) == text
