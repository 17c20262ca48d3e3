"""Tests for the RTF tokenizer."""

from scriv_rtf.codec.tokens import RTFTokenizer, Token, TokenKind, tokenize


def kinds(raw: str) -> list[TokenKind]:
    return [token.kind for token in tokenize(raw)]


class TestGroups:
    """Tests for group delimiters and metadata groups."""

    def test_group_open_and_close(self):
        """Braces become GROUP_OPEN and GROUP_CLOSE."""
        assert kinds("{x}") == [
            TokenKind.GROUP_OPEN,
            TokenKind.LITERAL,
            TokenKind.GROUP_CLOSE,
        ]

    def test_font_table_skipped_whole(self):
        """A font table is one METADATA_GROUP token."""
        tokens = tokenize("{\\fonttbl{\\f0 Times;}{\\f1 Sitka;}}x")

        assert tokens[0] == Token(
            TokenKind.METADATA_GROUP, text="{\\fonttbl{\\f0 Times;}{\\f1 Sitka;}}"
        )
        assert tokens[1] == Token(TokenKind.LITERAL, text="x")
        assert len(tokens) == 2

    def test_escaped_brace_inside_metadata_group(self):
        """Escaped braces do not end a skipped group early."""
        tokens = tokenize("{\\info{\\title a\\}b}}x")

        assert [t.kind for t in tokens] == [TokenKind.METADATA_GROUP, TokenKind.LITERAL]
        assert tokens[1].text == "x"

    def test_starred_destinations(self):
        """Generator and list tables are recognised with their \\* prefix."""
        raw = "{\\*\\generator Riched20;}{\\*\\listtable{\\list}}{\\*\\listoverridetable}"

        assert kinds(raw) == [TokenKind.METADATA_GROUP] * 3

    def test_unterminated_metadata_group(self):
        """A metadata group running off the end swallows the rest."""
        assert kinds("{\\colortbl;\\red0") == [TokenKind.METADATA_GROUP]

    def test_ordinary_group_not_skipped(self):
        """Groups that are not metadata are opened normally."""
        assert kinds("{\\b x}")[0] is TokenKind.GROUP_OPEN


class TestControlWords:
    """Tests for control word recognition."""

    def test_word_with_parameter_and_space(self):
        """The delimiting space belongs to the control word."""
        tokens = tokenize("\\fs24 x")

        assert tokens == [
            Token(TokenKind.CONTROL_WORD, name="fs", param=24),
            Token(TokenKind.LITERAL, text="x"),
        ]

    def test_negative_parameter(self):
        """Parameters may be negative."""
        assert tokenize("\\li-360")[0].param == -360

    def test_par_is_exact(self):
        """\\pard is its own word, not \\par followed by d."""
        assert tokenize("\\pard x")[0].name == "pard"
        assert tokenize("\\par x")[0].name == "par"

    def test_par_swallows_newline(self):
        """A source newline right after \\par is consumed with it."""
        tokens = tokenize("\\par\nx")

        assert tokens == [
            Token(TokenKind.CONTROL_WORD, name="par"),
            Token(TokenKind.LITERAL, text="x"),
        ]

    def test_toggle_reads_single_digit(self):
        """\\i and \\b take at most one digit."""
        tokens = tokenize("\\i12")

        assert tokens[0] == Token(TokenKind.CONTROL_WORD, name="i", param=1)
        assert tokens[1] == Token(TokenKind.LITERAL, text="2")

    def test_toggle_without_parameter(self):
        """A bare toggle has no parameter."""
        assert tokenize("\\b x")[0] == Token(TokenKind.CONTROL_WORD, name="b")

    def test_unicode_consumes_question_mark(self):
        """The placeholder after \\uN is consumed."""
        tokens = tokenize("\\u-3913?a")

        assert tokens == [
            Token(TokenKind.CONTROL_WORD, name="u", param=-3913),
            Token(TokenKind.LITERAL, text="a"),
        ]

    def test_unicode_consumes_only_one_placeholder(self):
        """A second question mark is literal text."""
        tokens = tokenize("\\u233??")

        assert tokens[1] == Token(TokenKind.LITERAL, text="?")
        assert len(tokens) == 2

    def test_unicode_without_placeholder(self):
        """Nothing is consumed when the next character is not a placeholder."""
        tokens = tokenize("\\u233x")

        assert tokens[1] == Token(TokenKind.LITERAL, text="x")

    def test_dash_words(self):
        """Dash words carry no parameter and eat one space."""
        tokens = tokenize("\\emdash  \\endash")

        assert tokens == [
            Token(TokenKind.CONTROL_WORD, name="emdash"),
            Token(TokenKind.LITERAL, text=" "),
            Token(TokenKind.CONTROL_WORD, name="endash"),
        ]


class TestEscapes:
    """Tests for escapes and malformed backslashes."""

    def test_escaped_delimiters(self):
        """Backslash, open and close brace are escapes."""
        tokens = tokenize("\\\\\\{\\}")

        assert [t.text for t in tokens] == ["\\", "{", "}"]
        assert all(t.kind is TokenKind.ESCAPE for t in tokens)

    def test_hex_character(self):
        """\\'hh yields the byte value as a character."""
        assert tokenize("\\'e9") == [Token(TokenKind.HEX_CHAR, text="é")]

    def test_truncated_hex_falls_through(self):
        """An incomplete hex pair drops the backslash only."""
        assert kinds("\\'e") == [
            TokenKind.UNKNOWN,
            TokenKind.LITERAL,
            TokenKind.LITERAL,
        ]

    def test_backslash_digit(self):
        """A backslash before a digit is not a control word."""
        tokens = tokenize("\\5b")

        assert tokens[0].kind is TokenKind.UNKNOWN
        assert [t.text for t in tokens[1:]] == ["5", "b"]

    def test_trailing_backslash(self):
        """A backslash at end of input is dropped."""
        assert kinds("a\\") == [TokenKind.LITERAL, TokenKind.UNKNOWN]

    def test_start_offset(self):
        """Tokenizing can begin part-way through the input."""
        tokens = list(RTFTokenizer("ignored\\par x", start=7))

        assert tokens[0].name == "par"
