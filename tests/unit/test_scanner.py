"""Scanner coverage: token kinds, positions and lexical anomalies."""

import io

import pytest

from nupy.config import NupyConfig
from nupy.error_reporter import ContractViolation
from nupy.nupy_token import SINGLE_CHAR_TOKENS, TokenKind
from nupy.scanner import Scanner, tokenize


def kinds(pairs):
	return [token.kind for token, _ in pairs]


def positions(pairs):
	return [(token.line, token.col) for token, _ in pairs]


@pytest.mark.parametrize("ch", sorted(SINGLE_CHAR_TOKENS))
def test_single_character_punctuation(ch, reporter):
	scanner = Scanner(ch, reporter=reporter)
	token, text = scanner.next_token()

	assert token.kind == SINGLE_CHAR_TOKENS[ch]
	assert text == ch
	assert (token.line, token.col) == (1, 1)
	assert scanner.cursor.col == 2


def test_simple_assignment_tokens(reporter):
	pairs = tokenize("x = 1\n", reporter=reporter)

	assert kinds(pairs) == [
		TokenKind.IDENTIFIER,
		TokenKind.EQUAL,
		TokenKind.INT_LITERAL,
		TokenKind.EOLN,
		TokenKind.EOS,
	]
	assert [text for _, text in pairs][:3] == ["x", "=", "1"]
	assert positions(pairs) == [(1, 1), (1, 3), (1, 5), (1, 6), (2, 1)]


def test_sign_is_absorbed_into_real_literal(reporter):
	pairs = tokenize("-3.5", reporter=reporter)

	assert kinds(pairs) == [TokenKind.REAL_LITERAL, TokenKind.EOS]
	assert pairs[0][1] == "-3.5"
	assert pairs[1][0].col == 5


def test_sign_followed_by_space_is_operator(reporter):
	pairs = tokenize("+ x - 2", reporter=reporter)

	assert kinds(pairs) == [
		TokenKind.PLUS,
		TokenKind.IDENTIFIER,
		TokenKind.MINUS,
		TokenKind.INT_LITERAL,
		TokenKind.EOS,
	]


def test_subtraction_without_spaces_becomes_signed_literal(reporter):
	pairs = tokenize("5-3", reporter=reporter)

	assert kinds(pairs) == [TokenKind.INT_LITERAL, TokenKind.INT_LITERAL, TokenKind.EOS]
	assert [text for _, text in pairs[:2]] == ["5", "-3"]


def test_numbers(reporter):
	pairs = tokenize("42 12.75 3.", reporter=reporter)

	assert kinds(pairs)[:3] == [
		TokenKind.INT_LITERAL,
		TokenKind.REAL_LITERAL,
		TokenKind.REAL_LITERAL,
	]
	assert [text for _, text in pairs[:3]] == ["42", "12.75", "3."]
	assert positions(pairs)[:3] == [(1, 1), (1, 4), (1, 10)]


def test_unterminated_string_at_end_of_stream(reporter, capsys):
	pairs = tokenize("'abc", reporter=reporter)

	assert kinds(pairs) == [TokenKind.STR_LITERAL, TokenKind.EOS]
	assert pairs[0][1] == "abc"
	assert len(reporter.warnings) == 1
	assert capsys.readouterr().out == "**WARNING: string literal @ (1,1) not terminated properly\n"


def test_string_literal_strips_quotes(reporter):
	pairs = tokenize('s = "hi there"\n', reporter=reporter)

	assert pairs[2][0].kind == TokenKind.STR_LITERAL
	assert pairs[2][1] == "hi there"
	assert pairs[3][0].col == 15
	assert reporter.warnings == []


def test_string_ended_by_newline_leaves_newline(reporter):
	pairs = tokenize("'ab\nx", reporter=reporter)

	assert kinds(pairs) == [
		TokenKind.STR_LITERAL,
		TokenKind.EOLN,
		TokenKind.IDENTIFIER,
		TokenKind.EOS,
	]
	assert positions(pairs)[:3] == [(1, 1), (1, 4), (2, 1)]
	assert len(reporter.warnings) == 1


def test_string_ended_by_other_quote(reporter):
	pairs = tokenize("\"ab'", reporter=reporter)

	assert kinds(pairs) == [TokenKind.STR_LITERAL, TokenKind.STR_LITERAL, TokenKind.EOS]
	assert [text for _, text in pairs[:2]] == ["ab", ""]
	assert positions(pairs)[:2] == [(1, 1), (1, 4)]
	assert len(reporter.warnings) == 2


def test_keywords_are_case_sensitive(reporter):
	pairs = tokenize("if while pass True False None is in If", reporter=reporter)

	assert kinds(pairs) == [
		TokenKind.KEYW_IF,
		TokenKind.KEYW_WHILE,
		TokenKind.KEYW_PASS,
		TokenKind.KEYW_TRUE,
		TokenKind.KEYW_FALSE,
		TokenKind.KEYW_NONE,
		TokenKind.KEYW_IS,
		TokenKind.KEYW_IN,
		TokenKind.IDENTIFIER,
		TokenKind.EOS,
	]


def test_identifiers_with_underscores_and_digits(reporter):
	pairs = tokenize("_tmp1 x2", reporter=reporter)

	assert [text for _, text in pairs[:2]] == ["_tmp1", "x2"]
	assert positions(pairs)[:2] == [(1, 1), (1, 7)]


def test_asterisk_and_power(reporter):
	pairs = tokenize("a ** b * c", reporter=reporter)

	assert kinds(pairs)[:5] == [
		TokenKind.IDENTIFIER,
		TokenKind.POWER,
		TokenKind.IDENTIFIER,
		TokenKind.ASTERISK,
		TokenKind.IDENTIFIER,
	]
	assert pairs[1][1] == "**"
	assert positions(pairs)[:5] == [(1, 1), (1, 3), (1, 6), (1, 8), (1, 10)]


def test_comparison_operators(reporter):
	pairs = tokenize("== != <= >= < > =", reporter=reporter)

	assert kinds(pairs) == [
		TokenKind.EQUALEQUAL,
		TokenKind.NOTEQUAL,
		TokenKind.LTE,
		TokenKind.GTE,
		TokenKind.LT,
		TokenKind.GT,
		TokenKind.EQUAL,
		TokenKind.EOS,
	]
	assert [text for _, text in pairs[:4]] == ["==", "!=", "<=", ">="]


def test_lone_bang_is_unknown_and_next_char_is_kept(reporter):
	pairs = tokenize("!x", reporter=reporter)

	assert kinds(pairs) == [TokenKind.UNKNOWN, TokenKind.IDENTIFIER, TokenKind.EOS]
	assert pairs[0][1] == "!"
	assert positions(pairs)[:2] == [(1, 1), (1, 2)]


def test_unknown_character(reporter):
	pairs = tokenize("@", reporter=reporter)

	assert kinds(pairs) == [TokenKind.UNKNOWN, TokenKind.EOS]
	assert pairs[0][1] == "@"
	assert pairs[1][0].col == 2


def test_terminator_ends_the_stream(reporter):
	scanner = Scanner("x = 'hi' $ junk", reporter=reporter)
	pairs = list(scanner)

	assert pairs[-1][0].kind == TokenKind.EOS
	assert pairs[-1][1] == "$"
	assert (pairs[-1][0].line, pairs[-1][0].col) == (1, 10)
	assert scanner.cursor.col == 11


def test_true_end_of_stream_does_not_advance_column(reporter):
	scanner = Scanner("ab", reporter=reporter)
	list(scanner)

	assert scanner.cursor.col == 3
	token, text = scanner.next_token()
	assert token.kind == TokenKind.EOS
	assert text == "$"
	assert token.col == 3


def test_other_whitespace_only_advances_column(reporter):
	pairs = tokenize("a\t\r b", reporter=reporter)

	assert kinds(pairs) == [TokenKind.IDENTIFIER, TokenKind.IDENTIFIER, TokenKind.EOS]
	assert positions(pairs)[:2] == [(1, 1), (1, 5)]


def test_comment_counts_its_line_once(reporter):
	pairs = tokenize("x # note\ny", reporter=reporter)

	assert kinds(pairs) == [
		TokenKind.IDENTIFIER,
		TokenKind.EOLN,
		TokenKind.IDENTIFIER,
		TokenKind.EOS,
	]
	assert positions(pairs)[:3] == [(1, 1), (1, 9), (2, 1)]


def test_legacy_comment_counts_its_line_twice(reporter):
	cfg = NupyConfig(legacy_comment_line_count=True)
	pairs = tokenize("x # note\ny", reporter=reporter, config=cfg)

	assert kinds(pairs) == [
		TokenKind.IDENTIFIER,
		TokenKind.EOLN,
		TokenKind.IDENTIFIER,
		TokenKind.EOS,
	]
	assert positions(pairs)[:3] == [(1, 1), (2, 9), (3, 1)]


def test_comment_at_end_of_stream(reporter):
	pairs = tokenize("# only", reporter=reporter)

	assert kinds(pairs) == [TokenKind.EOS]
	assert positions(pairs) == [(1, 7)]


def test_reads_from_text_stream(reporter):
	pairs = tokenize(io.StringIO("pass\n"), reporter=reporter)

	assert kinds(pairs) == [TokenKind.KEYW_PASS, TokenKind.EOLN, TokenKind.EOS]


def test_init_resets_cursor(reporter):
	scanner = Scanner("a\nb\n", reporter=reporter)
	list(scanner)
	assert scanner.cursor.line == 3

	scanner.init()
	assert (scanner.cursor.line, scanner.cursor.col) == (1, 1)


def test_missing_stream_is_a_contract_violation():
	with pytest.raises(ContractViolation):
		Scanner(None)
