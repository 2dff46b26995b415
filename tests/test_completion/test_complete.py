import pytest

from tabline.completion import (
    NO_COMPLETION,
    ArbitraryArgument,
    Command,
    Description,
    Flag,
    PossibilityList,
    complete,
)


@pytest.fixture
def commands():
    return [
        Command("print"),
        Command("echo"),
        Command("cat").arg("--help"),
        Command("exit"),
    ]


@pytest.fixture
def git():
    remote = (
        Command("remote")
        .subcommand(Command("add").arg(ArbitraryArgument("url", "repository URL")))
        .subcommand(Command("remove"))
    )
    commit = Command("commit").arg("--amend").arg(
        Flag("--message", (ArbitraryArgument("msg", "commit message"),))
    )
    return [Command("git").subcommand(remote).subcommand(commit)]


def test_empty_text_lists_top_level_commands(commands):
    assert complete("", commands) == PossibilityList(["print", "echo", "cat", "exit"])


def test_empty_text_without_commands():
    assert complete("", []) is NO_COMPLETION


def test_single_match_for_partial_command(commands):
    assert complete("ca", commands) == PossibilityList(["cat"])


def test_flags_after_command(commands):
    assert complete("cat ", commands) == PossibilityList(["--help"])


def test_partial_flag(commands):
    assert complete("cat --h", commands) == PossibilityList(["--help"])


def test_several_matches_keep_grammar_order(commands):
    assert complete("e", commands) == PossibilityList(["echo", "exit"])


def test_no_match_is_empty_list(commands):
    assert complete("z", commands) == PossibilityList([])


def test_unknown_command_offers_nothing(commands):
    assert complete("foo ", commands) == PossibilityList([])
    assert complete("foo b", commands) == PossibilityList([])


def test_whitespace_only_lists_top_level_commands(commands):
    assert complete("   ", commands) == PossibilityList(["print", "echo", "cat", "exit"])


def test_command_without_arguments_offers_nothing(commands):
    assert complete("print ", commands) == PossibilityList([])


def test_prefix_is_case_sensitive(commands):
    assert complete("CA", commands) == PossibilityList([])


def test_arbitrary_argument_short_circuits():
    commands = [
        Command("cp").arg("--force").arg(ArbitraryArgument("src", "file to copy"))
    ]
    assert complete("cp ", commands) == Description("<src>: file to copy")
    assert complete("cp --f", commands) == Description("<src>: file to copy")


def test_arbitrary_argument_without_description():
    commands = [Command("open").arg(ArbitraryArgument("path"))]
    assert complete("open ", commands) == Description("<path>")


def test_subcommands_follow_flags(git):
    assert complete("git ", git) == PossibilityList(["remote", "commit"])
    assert complete("git c", git) == PossibilityList(["commit"])


def test_walk_descends_into_subcommands(git):
    assert complete("git remote ", git) == PossibilityList(["add", "remove"])
    assert complete("git remote re", git) == PossibilityList(["remove"])
    assert complete("git remote add ", git) == Description("<url>: repository URL")


def test_commit_flags(git):
    assert complete("git commit ", git) == PossibilityList(["--amend", "--message"])
    assert complete("git commit --a", git) == PossibilityList(["--amend"])


def test_unmatched_words_are_skipped(git):
    assert complete("git bogus ", git) == PossibilityList(["remote", "commit"])


def test_flag_value_slot_is_described(git):
    assert complete("git commit --message ", git) == Description(
        "<msg>: commit message"
    )
    assert complete("git commit --message fi", git) == Description(
        "<msg>: commit message"
    )


def test_flag_value_slot_is_consumed(git):
    assert complete("git commit --message fix ", git) == PossibilityList(
        ["--amend", "--message"]
    )


def test_flag_value_is_never_matched_as_command():
    head = (
        Command("head")
        .arg(Flag("--lines", (ArbitraryArgument("n"),)))
        .arg("--quiet")
        .subcommand(Command("exit"))
    )
    assert complete("head --lines exit ", [head]) == PossibilityList(
        ["--lines", "--quiet", "exit"]
    )
    assert complete("head exit ", [head]) == PossibilityList([])


def test_last_match_wins():
    commands = [Command("dup").arg("--first"), Command("dup").arg("--second")]
    assert complete("dup ", commands) == PossibilityList(["--second"])


def test_escaped_trailing_space_is_part_of_word(commands):
    assert complete("cat --help\\ ", commands) == PossibilityList([])


def test_quoted_word_completes_after_closing_quote(commands):
    assert complete('"cat" ', commands) == PossibilityList(["--help"])


def test_complete_is_deterministic(git):
    for text in ("", "g", "git ", "git remote a", "git commit --message "):
        assert complete(text, git) == complete(text, git)


@pytest.mark.parametrize(
    "text", ["", "c", "ca", "cat ", "cat --", "e", "ex", "git r", "git remote r"]
)
def test_possibilities_start_with_word_in_progress(text, commands, git):
    grammar = commands + git
    result = complete(text, grammar)
    in_progress = "" if not text or text.endswith(" ") else text.split()[-1]
    assert isinstance(result, PossibilityList)
    assert all(word.startswith(in_progress) for word in result.words)


def test_command_builder_returns_new_nodes():
    base = Command("cat")
    with_flag = base.arg("--help")
    assert base.args == ()
    assert with_flag.args == (Flag("--help"),)
    assert with_flag.subcommand(Command("x")).subcommands == (Command("x"),)
    assert with_flag.subcommands == ()


@pytest.mark.parametrize("text", ['grep "', 'grep ""', "grep '", "grep \\"])
def test_empty_open_word_completes_next_argument(text):
    grep = [Command("grep").arg("--count"), Command("exit")]
    assert complete(text, grep) == PossibilityList(["--count"])


def test_open_quote_filters_by_quoted_prefix():
    grep = [Command("grep").arg("--count").arg("--quiet")]
    assert complete('grep "--c', grep) == PossibilityList(["--count"])
