# tests/test_args.py
import dataclasses

import pytest

from minigrep.core.args import parse_args
from minigrep.errors import ArgumentParseError
from minigrep.models import RunConfig


def test_no_tokens_gives_empty_config():
    cfg = parse_args([])
    assert cfg == RunConfig()
    assert cfg.should_search is False


def test_first_operand_is_pattern_rest_are_targets():
    cfg = parse_args(["world", "a.txt", "b.txt"])
    assert cfg.pattern == "world"
    assert cfg.targets == ("a.txt", "b.txt")
    assert cfg.should_search is True


def test_flag_cluster_sets_each_flag():
    cfg = parse_args(["-inv", "x", "f"])
    assert cfg.case_insensitive is True
    assert cfg.show_line_numbers is True
    assert cfg.invert_match is True
    assert cfg.recursive is False
    assert cfg.color_output is False


def test_separate_flags_and_interleaved_operands():
    cfg = parse_args(["-r", "pat", "-f", "dir", "-c"])
    assert cfg.recursive and cfg.show_filenames and cfg.color_output
    assert cfg.pattern == "pat"
    assert cfg.targets == ("dir",)


@pytest.mark.parametrize("token", ["-h", "--help", "-nh"])
def test_help_tokens(token):
    cfg = parse_args([token, "pat", "a.txt"])
    assert cfg.help_requested is True
    assert cfg.should_search is False
    # help does not swallow the next token
    assert cfg.pattern == "pat"


def test_unknown_flag_characters_are_ignored():
    cfg = parse_args(["-xqz-n", "pat", "a.txt"])
    assert cfg.show_line_numbers is True
    assert cfg.help_requested is False
    assert cfg.pattern == "pat"


def test_lone_dash_is_an_operand():
    cfg = parse_args(["pat", "-"])
    assert cfg.targets == ("-",)


def test_pattern_without_targets_does_not_search():
    cfg = parse_args(["pat"])
    assert cfg.pattern == "pat"
    assert cfg.targets == ()
    assert cfg.should_search is False


def test_empty_pattern_operand_does_not_search():
    assert parse_args(["", "a.txt"]).should_search is False


def test_parse_args_does_not_touch_filesystem(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    parse_args(["-r", "pat", "missing_dir"])
    assert list(tmp_path.iterdir()) == []


def test_non_string_token_is_parse_error():
    with pytest.raises(ArgumentParseError) as exc:
        parse_args(["pat", None])
    assert exc.value.exit_code == 1


def test_config_is_immutable():
    cfg = parse_args(["pat", "a.txt"])
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.pattern = "other"
