"""Tests for command normalization and classification."""

import pytest

from core.permissions import (
    is_compound,
    is_compound_safe,
    is_read_only,
    normalize_command,
    split_compound,
)


class TestNormalize:
    """Tests for command normalization."""

    def test_collapses_whitespace(self):
        assert normalize_command("  git   status  ") == "git status"
        assert normalize_command("git\tstatus\n") == "git status"

    def test_idempotent(self):
        once = normalize_command(" ls    -la ")
        assert normalize_command(once) == once

    def test_non_string(self):
        """Non-string input normalizes to an empty command."""
        assert normalize_command(None) == ""


class TestSplitCompound:
    """Tests for compound command splitting."""

    def test_logical_and(self):
        assert split_compound("git status && git log") == ["git status", "git log"]

    def test_all_operators(self):
        assert split_compound("ls | grep foo || echo none; pwd") == ["ls", "grep foo", "echo none", "pwd"]

    def test_newline_separates(self):
        assert split_compound("ls\nrm notes.txt") == ["ls", "rm notes.txt"]

    def test_quoted_operators_do_not_split(self):
        assert split_compound("grep 'a|b' file.txt") == ["grep 'a|b' file.txt"]
        assert split_compound('echo "x && y"') == ['echo "x && y"']

    def test_escaped_pipe_does_not_split(self):
        assert split_compound(r"echo a \| b") == [r"echo a \| b"]

    def test_ansi_c_quote_escapes(self):
        """Inside $'...' a backslash escapes the quote character."""
        assert split_compound("cat $'\\'' | rm notes.txt") == ["cat $'\\''", "rm notes.txt"]
        assert split_compound("echo $'a|b'") == ["echo $'a|b'"]

    def test_unterminated_quote_splits_everything(self):
        assert split_compound("cat 'notes.txt | rm notes.txt") == ["cat 'notes.txt", "rm notes.txt"]
        assert split_compound("echo \"a && b") == ['echo "a', "b"]

    def test_empty_segments_dropped(self):
        assert split_compound("ls |") == ["ls"]
        assert split_compound("   ") == []

    def test_is_compound(self):
        assert not is_compound("ls -la")
        assert is_compound("git status | head -5")
        assert not is_compound("grep 'a|b' file.txt")


class TestReadOnly:
    """Tests for the read-only allowlist."""

    @pytest.mark.parametrize(
        "command",
        [
            "ls",
            "ls -la",
            "cat README.md",
            "git   status",
            "git log --oneline -5",
            "git branch -a",
            "git branch",
            "find . -name '*.py'",
            "find src -type f",
            "grep -r foo .",
            "rg TODO",
            "npm ls",
            "pip show pydantic",
            "gh pr view 12",
            "ps aux",
            "python --version",
            "git commit --help",
        ],
    )
    def test_read_only_commands(self, command):
        assert is_read_only(command)

    @pytest.mark.parametrize(
        "command",
        [
            "",
            "npm install left-pad",
            "rm file.txt",
            "rm -v file.txt",
            "git commit -m 'wip'",
            "git commit -v",
            "git branch -D feature",
            "git push",
            "find . -name '*.pyc' -delete",
            "find . -type f -exec rm {} +",
            "npm audit fix",
            "env rm file.txt",
            "gh api repos/o/r/issues -f title=x",
            "date -s 2020-01-01",
            "hostname evil",
        ],
    )
    def test_mutating_commands(self, command):
        assert not is_read_only(command)

    def test_custom_pattern_list(self):
        """An empty allowlist matches nothing."""
        assert not is_read_only("ls", patterns=())


class TestCompoundSafe:
    """Tests for compound command safety."""

    def test_all_segments_read_only(self):
        assert is_compound_safe("git status && git log")
        assert is_compound_safe("ls | grep foo")

    def test_one_mutating_segment(self):
        assert not is_compound_safe("git status && rm file.txt")
        assert not is_compound_safe("cat a.txt | xargs rm")

    def test_empty_command(self):
        assert not is_compound_safe("")
