"""Tests for JSON parser."""

import pytest
from json_nodes.parser import JSONParser, IntegerToken, FloatToken, ObjectToken
from json_nodes.types import ErrorType, ParseError


class TestJSONParser:
    """Tests for JSONParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_parse_object_keeps_pairs(self):
        """Test objects come back as ordered key/value pairs."""
        tokens = self.parser.parse_tokens('{"b": 1, "a": 2, "b": 3}')

        assert isinstance(tokens, ObjectToken)
        assert [key for key, _ in tokens] == ["b", "a", "b"]

    def test_parse_numbers_keep_literal_text(self):
        """Test number literals are kept as text tokens."""
        tokens = self.parser.parse_tokens('[10, -0, 1.50, 2E3, 99999999999999999999]')

        assert [type(token) for token in tokens] == [
            IntegerToken, IntegerToken, FloatToken, FloatToken, IntegerToken
        ]
        assert tokens == ["10", "-0", "1.50", "2E3", "99999999999999999999"]

    def test_parse_native_scalars(self):
        """Test strings, booleans and null are native."""
        tokens = self.parser.parse_tokens('["x", true, false, null]')

        assert tokens == ["x", True, False, None]
        assert type(tokens[0]) is str

    def test_parse_scalar_root(self):
        """Test scalar roots are accepted."""
        assert self.parser.parse_tokens(' "only" ') == "only"
        assert isinstance(self.parser.parse_tokens("7"), IntegerToken)

    def test_parse_invalid_json_syntax(self):
        """Test parsing invalid JSON syntax."""
        json_string = '{"users": {"user1": {"name": "Alice"}'

        with pytest.raises(ParseError, match="JSON parsing failed") as exc_info:
            self.parser.parse_tokens(json_string)

        assert exc_info.value.error_type == ErrorType.PARSE
        assert exc_info.value.__cause__ is not None

    def test_parse_error_reports_line(self):
        """Test multi-line errors report the right line."""
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse_tokens('[\n  1,\n  oops\n]')

        assert exc_info.value.context["line"] == 3
        assert exc_info.value.context["column"] == 3

    def test_parse_empty_json(self):
        """Test parsing empty JSON string."""
        with pytest.raises(ParseError, match="empty"):
            self.parser.parse_tokens("")

    @pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
    def test_parse_rejects_constants(self, constant):
        """Test non-standard constants are rejected."""
        with pytest.raises(ParseError) as exc_info:
            self.parser.parse_tokens(f"[{constant}]")

        assert exc_info.value.context["token"] == constant

    def test_parse_trailing_data(self):
        """Test trailing garbage is an error."""
        with pytest.raises(ParseError, match="Extra data"):
            self.parser.parse_tokens("[1] [2]")

    def test_token_text(self):
        """Test canonical scalar text."""
        assert JSONParser.token_text(True) == "true"
        assert JSONParser.token_text(False) == "false"
        assert JSONParser.token_text(None) == "null"
        assert JSONParser.token_text(IntegerToken("42")) == "42"
        assert type(JSONParser.token_text(FloatToken("1.0"))) is str
        assert JSONParser.token_text("plain") == "plain"
