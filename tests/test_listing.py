"""Tests for the list_files entry point."""

import os
import re
import threading

import pytest

from filelist import PatternCompilationError, TraversalError, TraversalRequest, list_files
from filelist.exclusion_rules.composite_rules import CompositeExclusionRules
from filelist.exclusion_rules.name_rules import NamePatternExclusionRules
from filelist.listing import build_exclusion_rules
from filelist.tree_walker.error_action import ErrorAction


def test_node_modules_example(tmp_path, relpaths):
    (tmp_path / "a.ts").touch()
    (tmp_path / "b.js").touch()
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "c.ts").touch()

    request = TraversalRequest.from_raw(tmp_path, include=".ts", exclude="node_modules")
    assert relpaths(list_files(request).paths, tmp_path) == {"a.ts"}


def test_dot_git_example(tmp_path, relpaths):
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "HEAD").touch()
    (tmp_path / "README.md").touch()

    request = TraversalRequest.from_raw(tmp_path, include="", exclude=".git")
    assert relpaths(list_files(request).paths, tmp_path) == {"README.md"}


def test_no_filters_returns_every_regular_file(sample_tree):
    expected = set()
    for dirpath, _, filenames in os.walk(sample_tree):
        expected.update(os.path.join(dirpath, name) for name in filenames)

    assert set(list_files(TraversalRequest.from_raw(sample_tree)).paths) == expected


@pytest.mark.parametrize("exclude", ["node_modules", "src,.git", "LIB", "^b", "md$"])
def test_no_result_has_an_excluded_component(sample_tree, exclude):
    request = TraversalRequest.from_raw(sample_tree, exclude=exclude)
    regex = re.compile("|".join(request.exclude_patterns), re.IGNORECASE)

    for path in list_files(request).paths:
        components = os.path.relpath(path, sample_tree).split(os.sep)
        assert not any(regex.search(component) for component in components), path


@pytest.mark.parametrize("include", [".ts", ".js,.md", "deep.ts", ".none"])
def test_every_result_ends_with_an_include_suffix(sample_tree, include):
    request = TraversalRequest.from_raw(sample_tree, include=include)
    suffixes = tuple(request.include_patterns)
    for path in list_files(request).paths:
        assert path.endswith(suffixes)


def test_repeated_calls_are_identical(sample_tree):
    request = TraversalRequest.from_raw(sample_tree, include=".ts", exclude="node_modules")
    assert list_files(request).paths == list_files(request).paths


def test_invalid_exclude_patterns(sample_tree):
    request = TraversalRequest.from_raw(sample_tree, exclude="node_modules,[oops")
    with pytest.raises(PatternCompilationError) as exc_info:
        list_files(request)
    assert exc_info.value.patterns == ("node_modules", "[oops")


def test_invalid_patterns_fail_before_touching_the_filesystem(tmp_path):
    request = TraversalRequest.from_raw(tmp_path / "missing", exclude="(")
    with pytest.raises(PatternCompilationError):
        list_files(request)


def test_missing_root(tmp_path):
    with pytest.raises(TraversalError) as exc_info:
        list_files(TraversalRequest.from_raw(tmp_path / "missing"))
    assert isinstance(exc_info.value.cause, FileNotFoundError)


def test_empty_root_lists_current_directory(sample_tree, monkeypatch):
    monkeypatch.chdir(sample_tree / "src")
    paths = list_files(TraversalRequest.from_raw("", include=".ts")).paths
    assert set(paths) == {"main.ts", os.path.join("lib", "deep.ts")}


def test_partial_failure_returns_readable_siblings(sample_tree, deny_listing, relpaths):
    for name in ("first", "second"):
        (sample_tree / name).mkdir()
        (sample_tree / name / f"{name}.ts").touch()
    (sample_tree / "second" / "locked").mkdir()
    (sample_tree / "second" / "locked" / "hidden.ts").touch()
    deny_listing("locked")

    result = list_files(TraversalRequest.from_raw(sample_tree, include=".ts", exclude="node_modules"))

    assert relpaths(result.paths, sample_tree) == {
        "a.ts",
        "src/main.ts",
        "src/lib/deep.ts",
        "first/first.ts",
        "second/second.ts",
    }
    assert [e.path for e in result.soft_errors] == [os.path.join(str(sample_tree), "second", "locked")]


def test_raise_action_fails_whole_call(sample_tree, deny_listing):
    (sample_tree / "locked").mkdir()
    deny_listing("locked")
    request = TraversalRequest.from_raw(sample_tree, error_action=ErrorAction.RAISE)
    with pytest.raises(TraversalError):
        list_files(request)


def test_ignore_files_are_combined_with_name_patterns(sample_tree, relpaths):
    ignore_file = sample_tree / ".listignore"
    ignore_file.write_text("*.js\nlib/\n")

    request = TraversalRequest.from_raw(sample_tree, exclude=".git,node_modules", ignore_files=(str(ignore_file),))
    assert relpaths(list_files(request).paths, sample_tree) == {"a.ts", "README.md", "src/main.ts", ".listignore"}


def test_build_exclusion_rules():
    rules = build_exclusion_rules(TraversalRequest(exclude_patterns=("dist",)))
    assert isinstance(rules, NamePatternExclusionRules)


def test_build_exclusion_rules_with_ignore_files(tmp_path):
    ignore_file = tmp_path / "ignore"
    ignore_file.write_text("*.tmp\n")
    rules = build_exclusion_rules(TraversalRequest(exclude_patterns=("dist",), ignore_files=(str(ignore_file),)))
    assert isinstance(rules, CompositeExclusionRules)
    assert rules.exclude("dist/")
    assert rules.exclude("a.tmp")


def test_build_exclusion_rules_missing_ignore_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_exclusion_rules(TraversalRequest(ignore_files=(str(tmp_path / "nope"),)))


def test_cancellation_returns_partial_result(sample_tree):
    event = threading.Event()
    event.set()
    result = list_files(TraversalRequest.from_raw(sample_tree), cancel_event=event)
    assert result.cancelled is True
    assert result.paths == []


def test_parallel_request_matches_sequential(sample_tree):
    sequential = list_files(TraversalRequest.from_raw(sample_tree, exclude="node_modules"))
    parallel = list_files(TraversalRequest.from_raw(sample_tree, exclude="node_modules", max_workers=4))
    assert parallel.paths == sequential.paths


def test_symlink_cycle_terminates(tmp_path, symlink, relpaths):
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "b" / "file.txt").touch()
    symlink(tmp_path / "a", tmp_path / "a" / "b" / "back")

    result = list_files(TraversalRequest.from_raw(tmp_path))
    assert relpaths(result.paths, tmp_path) == {"a/b/file.txt"}
