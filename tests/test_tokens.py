import os
import stat

import pytest

from konoparse.tokens import (
    Rank,
    Token,
    TokenType,
    format_token_list,
    is_pipe,
    is_redirection,
    last_of_rank,
    next_token_id,
    previous_token,
    split_input,
    token_type_name,
    typealize,
    untie_token,
)


def values(tokens):
    return [item.value for item in tokens]


def test_next_token_id_increases():
    first = next_token_id()
    second = next_token_id()
    assert second > first


def test_split_simple_pipeline():
    tokens = split_input("ls -l | grep x")
    assert values(tokens) == ["ls", "-l", "|", "grep", "x"]
    assert not any(item.merge_next for item in tokens)


def test_split_operators_without_spaces():
    assert values(split_input("a>b")) == ["a", ">", "b"]
    assert values(split_input("cat<<EOF")) == ["cat", "<<", "EOF"]
    assert values(split_input("x>>y|z")) == ["x", ">>", "y", "|", "z"]


def test_split_keeps_quotes_and_marks_merge():
    tokens = split_input('echo "a b"c')
    assert values(tokens) == ["echo", '"a b"', "c"]
    assert [item.merge_next for item in tokens] == [False, True, False]


def test_split_unclosed_quote_is_single_char():
    tokens = split_input('"abc')
    assert values(tokens) == ['"', "abc"]
    assert tokens[0].merge_next is True


def test_operator_never_merges():
    tokens = split_input("|x")
    assert values(tokens) == ["|", "x"]
    assert tokens[0].merge_next is False


def test_split_empty_and_blank():
    assert split_input("") == []
    assert split_input("    ") == []
    assert split_input(None) == []


def test_split_initial_fields_and_unique_ids():
    tokens = split_input("a b c")
    assert all(item.rank is Rank.C for item in tokens)
    assert all(item.coretype is TokenType.WORD for item in tokens)
    assert all(item.literal is False for item in tokens)
    ids = [item.id for item in tokens]
    assert ids == sorted(set(ids))


@pytest.mark.parametrize("text", ["<", ">", "<<", ">>"])
def test_is_redirection_true(text):
    assert is_redirection(text) is True


@pytest.mark.parametrize("text", ["<<<", "|", "a", "", None])
def test_is_redirection_false(text):
    assert is_redirection(text) is False


def test_is_pipe():
    assert is_pipe("|") is True
    assert is_pipe("||") is False
    assert is_pipe(None) is False


def test_typealize_pipe():
    result = typealize(Token("|"), [])
    assert result.type is TokenType.PIPE
    assert result.coretype is TokenType.PIPE
    assert result.rank is Rank.S


def test_typealize_literal_pipe_is_word():
    item = Token("|", literal=True)
    typealize(item, [])
    assert item.type is TokenType.WORD
    assert item.rank is Rank.C


@pytest.mark.parametrize(
    "text, kind",
    [
        ("<<", TokenType.HEREDOC),
        (">>", TokenType.APPEND),
        ("<", TokenType.REDIR_IN),
        (">", TokenType.REDIR_OUT),
    ],
)
def test_typealize_redirections(text, kind):
    result = typealize(Token(text), [])
    assert result.type is kind
    assert result.coretype is TokenType.REDIR
    assert result.rank is Rank.S


def test_typealize_builtin_is_command():
    result = typealize(Token("cd"), [], lambda name: name == "cd")
    assert result.type is TokenType.CMD
    assert result.rank is Rank.B


def test_typealize_path_command(tmp_path):
    tool = tmp_path / "mytool"
    tool.write_text("#!/bin/sh\n")
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR)
    env = [f"PATH={tmp_path}"]
    assert typealize(Token("mytool"), env).type is TokenType.CMD
    assert typealize(Token("othertool"), env).type is TokenType.WORD


def test_typealize_executable_path(tmp_path):
    tool = tmp_path / "run"
    tool.write_text("#!/bin/sh\n")
    os.chmod(tool, 0o755)
    assert typealize(Token(str(tool)), []).type is TokenType.CMD


def test_typealize_leaves_assignment_and_renews_id():
    assignment = Token("A=1", type=TokenType.ASSIGNMENT)
    old_id = assignment.id
    typealize(assignment, [])
    assert assignment.type is TokenType.ASSIGNMENT
    assert assignment.id == old_id
    word = Token("hello")
    word_id = word.id
    typealize(word, [])
    assert word.type is TokenType.WORD
    assert word.id > word_id


def test_token_type_name():
    assert token_type_name(None) == "NULL TOKEN"
    assert token_type_name(Token(None)) == "INVALID TOKEN?"
    assert token_type_name(Token(None, type=TokenType.EOF)) == "EOF"
    assert token_type_name(Token("x", type=TokenType.CMD)) == "COMMAND"
    assert token_type_name(Token("<", type=TokenType.REDIR_IN)) == "REDIR IN"


def test_format_token_list():
    tokens = [Token("ls", type=TokenType.CMD), Token("-l")]
    assert format_token_list(tokens) == "( COMMAND -> ls )\n( WORD -> -l )\n"
    assert format_token_list([]) == "   (Token list is NULL)\n"


def test_last_of_rank():
    tokens = [Token("a", rank=Rank.S), Token("b", rank=Rank.C), Token("c", rank=Rank.S)]
    assert last_of_rank(tokens, Rank.S) is tokens[2]
    assert last_of_rank(tokens, Rank.B) is None
    assert last_of_rank([], Rank.S) is None


def test_previous_token():
    tokens = split_input("a b c")
    assert previous_token(tokens[2], tokens) is tokens[1]
    assert previous_token(tokens[0], tokens) is None
    assert previous_token(Token("z"), tokens) is None
    assert previous_token(None, tokens) is None


def test_untie_middle_token():
    tokens = split_input("a b c")
    a, b, c = tokens
    assert untie_token(b, tokens) is c
    assert tokens == [a, c]


def test_untie_last_token():
    tokens = split_input("a b c")
    a, b, c = tokens
    assert untie_token(c, tokens) is None
    assert tokens == [a, b]


def test_untie_head_cuts_the_rest():
    tokens = split_input("a b c")
    head = tokens[0]
    assert untie_token(head, tokens) is None
    assert tokens == [head]


def test_untie_without_value_changes_nothing():
    tokens = split_input("a b")
    before = list(tokens)
    assert untie_token(Token(None), tokens) is None
    assert untie_token(None, tokens) is None
    assert tokens == before