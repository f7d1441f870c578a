import logging

import pytest

from twig.config import init_config
from twig.main import (
    build_tree,
    configure_logging,
    main,
    make_parser,
    render_tree,
)
from twig.tree import PTree

SCENARIO_ARGS = ["10", "5", "3", "15", "12", "14"]


def test_parser_defaults():
    args = make_parser().parse_args([])
    assert args.log_level == "INFO"
    assert args.elem_type == "int"
    assert args.fmt == "shape"
    assert args.insert == []
    assert args.delete == []


def test_build_tree_inserts_then_deletes():
    config = init_config()
    tree = build_tree(config, SCENARIO_ARGS, ["10"])
    assert tree.render() == (
        "Branch(12, Branch(5, Leaf(3), Empty), Branch(15, Leaf(14), Empty))"
    )


def test_build_tree_logs_steps(caplog):
    config = init_config()
    with caplog.at_level(logging.DEBUG):
        build_tree(config, ["1"], ["99"])
    assert "inserting 1" in caplog.text
    assert "deleting 99" in caplog.text
    assert "not present" in caplog.text


def test_render_tree_formats():
    tree = PTree.mk([2, 1])
    assert render_tree(init_config(fmt="shape"), tree) == "Branch(2, Leaf(1), Empty)"
    assert render_tree(init_config(fmt="list"), tree) == "1 2"
    assert render_tree(init_config(fmt="pretty", indent=1), tree) == (
        "Branch(2)\n L: Leaf(1)\n R: Empty"
    )


def test_main_prints_shape_and_extremes(capsys):
    main(["--insert", *SCENARIO_ARGS])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Branch(10, Branch(5, Leaf(3), Empty), "
        "Branch(15, Branch(12, Empty, Leaf(14)), Empty))",
        "min: 3",
        "max: 15",
    ]


def test_main_strings_as_list(capsys):
    main(["--type", "str", "--format", "list", "--insert", "b", "a", "c"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["'a' 'b' 'c'", "min: 'a'", "max: 'c'"]


def test_main_empty_tree(capsys):
    main([])
    out = capsys.readouterr().out.splitlines()
    assert out == ["Empty", "min: None", "max: None"]


def test_main_rejects_bad_value():
    with pytest.raises(SystemExit) as exc_info:
        main(["--insert", "ten"])
    assert exc_info.value.code == 2


def test_main_rejects_bad_format():
    with pytest.raises(SystemExit) as exc_info:
        main(["--format", "json"])
    assert exc_info.value.code == 2


def test_main_rejects_bad_log_level():
    with pytest.raises(SystemExit) as exc_info:
        main(["--log-level", "LOUD"])
    assert exc_info.value.code == 2


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError, match="log level"):
        configure_logging("LOUD")
