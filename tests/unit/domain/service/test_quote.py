"""Unit tests for reply quoting."""

from forum.domain.service import compose_quoted_reply, strip_quote


class TestStripQuote:
    """Tests for strip_quote."""

    def test_plain_content_is_kept(self):
        """Content without a quote block is returned stripped."""
        assert strip_quote("  Use flux.  ") == "Use flux."

    def test_quote_block_is_removed(self):
        """An @name: line followed by > lines is dropped."""
        content = "@Alice:\n> original words\n\nmy answer"

        assert strip_quote(content) == "my answer"

    def test_multi_line_quote_block_is_removed(self):
        """Every consecutive > line belongs to the quote block."""
        content = "@Alice:\n> line one\n> line two\n\nmy answer"

        assert strip_quote(content) == "my answer"

    def test_attribution_without_quote_is_kept(self):
        """An @name: line not followed by a > line is ordinary text."""
        content = "@Alice:\nthanks for the tip"

        assert strip_quote(content) == content

    def test_every_quote_block_is_removed(self):
        """Quote blocks further down the text are dropped as well."""
        content = "@Alice:\n> alice words\n\n@Carol:\n> carol said\n\nmy words"

        assert strip_quote(content) == "my words"

    def test_text_around_quote_block_is_kept(self):
        """Text before and after a quote block survives."""
        content = "Good point.\n@Alice:\n> alice words\n\nTry it hot."

        assert strip_quote(content) == "Good point.\nTry it hot."


class TestComposeQuotedReply:
    """Tests for compose_quoted_reply."""

    def test_basic_quote(self):
        """The quote block precedes the new text."""
        result = compose_quoted_reply("I agree", "Use leaded solder", "Alice")

        assert result == "@Alice:\n> Use leaded solder\n\nI agree"

    def test_long_quote_is_truncated(self):
        """Quotes longer than the maximum are cut and end with ..."""
        quoted = "x" * 150

        result = compose_quoted_reply("ok", quoted, "Alice", max_length=100)

        assert result == "@Alice:\n> " + "x" * 100 + "...\n\nok"

    def test_quote_at_exact_limit_is_not_truncated(self):
        """A quote of exactly the maximum length is kept whole."""
        quoted = "y" * 100

        result = compose_quoted_reply("ok", quoted, "Alice", max_length=100)

        assert "..." not in result

    def test_requoting_does_not_nest(self):
        """Quoting a reply that itself quotes keeps only its own words."""
        # Arrange
        first = compose_quoted_reply("second words", "first words", "Alice")

        # Act
        result = compose_quoted_reply("third words", first, "Bob")

        # Assert
        assert result == "@Bob:\n> second words\n\nthird words"
        assert "Alice" not in result
        assert ">>" not in result

    def test_multi_line_quote_prefixes_each_line(self):
        """Every quoted line starts with '> '."""
        result = compose_quoted_reply("new", "line one\nline two", "Alice")

        assert result == "@Alice:\n> line one\n> line two\n\nnew"

    def test_unknown_author(self):
        """A missing author is rendered as Unknown."""
        result = compose_quoted_reply("new", "old", None)

        assert result.startswith("@Unknown:\n")

    def test_requoting_reply_with_embedded_quote_stays_one_level(self):
        """A second quote block in the answered reply is not carried along."""
        # Arrange
        answered = compose_quoted_reply(
            "@Carol:\n> carol said\n\nmy words", "alice words", "Alice"
        )

        # Act
        result = compose_quoted_reply("new", answered, "Bob")

        # Assert
        assert result == "@Bob:\n> my words\n\nnew"
        assert "> >" not in result

    def test_stray_quote_markers_are_flattened(self):
        """Lines already starting with '>' get a single marker."""
        result = compose_quoted_reply("new", "> > deep\nplain", "Alice")

        assert result == "@Alice:\n> deep\n> plain\n\nnew"
        assert "> >" not in result
