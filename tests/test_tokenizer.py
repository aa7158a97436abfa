import pytest

from einsteinpuzzle.tokenizer import Token, Tokenizer, TokenType


def words(tokens):
    return [t.content for t in tokens if t.type is TokenType.WORD]


def test_simple_words():
    tokens = list(Tokenizer("the quick  brown\tfox"))
    assert tokens == [
        Token(TokenType.WORD, "the"),
        Token(TokenType.WORD, "quick"),
        Token(TokenType.WORD, "brown"),
        Token(TokenType.WORD, "fox"),
    ]


def test_empty_text_gives_eof():
    tokenizer = Tokenizer("")
    assert tokenizer.next_token().type is TokenType.EOF
    assert tokenizer.is_finished()


def test_eof_repeats():
    tokenizer = Tokenizer("word")
    assert tokenizer.next_token() == Token(TokenType.WORD, "word")
    assert tokenizer.next_token().type is TokenType.EOF
    assert tokenizer.next_token().type is TokenType.EOF


def test_blank_line_gives_paragraph():
    types = [t.type for t in Tokenizer("one\n\ntwo")]
    assert types == [TokenType.WORD, TokenType.PARA, TokenType.WORD]


def test_single_newline_is_not_paragraph():
    types = [t.type for t in Tokenizer("one\ntwo")]
    assert TokenType.PARA not in types


def test_leading_blank_lines_are_not_paragraph():
    tokens = list(Tokenizer("\n\n\nfirst"))
    assert tokens == [Token(TokenType.WORD, "first")]


def test_trailing_blank_lines_are_not_paragraph():
    tokenizer = Tokenizer("last\n\n\n")
    assert tokenizer.next_token() == Token(TokenType.WORD, "last")
    assert tokenizer.next_token().type is TokenType.EOF


def test_many_blank_lines_give_one_paragraph():
    types = [t.type for t in Tokenizer("a\n\n\n\nb")]
    assert types.count(TokenType.PARA) == 1


def test_crlf_blank_line_is_not_paragraph():
    types = [t.type for t in Tokenizer("a\r\n\r\nb")]
    assert TokenType.PARA not in types


def test_words_preserved_across_paragraphs():
    text = "alpha beta\n\ngamma delta"
    assert words(Tokenizer(text)) == text.split()


def test_unget_returns_token_first():
    tokenizer = Tokenizer("one two")
    first = tokenizer.next_token()
    tokenizer.unget(first)
    assert not tokenizer.is_finished() or first.type is TokenType.WORD
    assert tokenizer.next_token() == first
    assert tokenizer.next_token() == Token(TokenType.WORD, "two")


def test_unget_is_first_in_first_out():
    tokenizer = Tokenizer("")
    a = Token(TokenType.WORD, "a")
    b = Token(TokenType.WORD, "b")
    tokenizer.unget(a)
    tokenizer.unget(b)
    assert tokenizer.next_token() == a
    assert tokenizer.next_token() == b


def test_is_finished_with_pending_token():
    tokenizer = Tokenizer("x")
    token = tokenizer.next_token()
    assert tokenizer.is_finished()
    tokenizer.unget(token)
    assert tokenizer.is_finished() is False


def test_is_finished_false_before_reading():
    assert Tokenizer("text").is_finished() is False


@pytest.mark.parametrize(
    "token, expected",
    [
        (Token(TokenType.WORD, "abc"), "Word: 'abc'"),
        (Token(TokenType.PARA), "Para"),
        (Token(TokenType.EOF), "Eof"),
    ],
)
def test_token_str(token, expected):
    assert str(token) == expected


def test_iteration_excludes_eof():
    tokens = list(Tokenizer("a b"))
    assert all(t.type is not TokenType.EOF for t in tokens)
    assert len(tokens) == 2