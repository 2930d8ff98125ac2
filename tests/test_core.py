"""Tests for the library entry points"""
import os
from unittest.mock import patch

import pytest

import git_branch_is
from git_branch_is import (
    InvalidOptionsError,
    InvalidPatternError,
    ResolutionError,
    ResolveOptions,
    branch_is,
    check_branch,
    get_branch,
)

from conftest import BRANCH_CURRENT, BRANCH_NON_EXISTENT, BRANCH_SAME_COMMIT, SUBDIR_NAME


class TestBranchIs:
    """Test branch_is() against a real repository."""

    def test_true_for_current_branch(self, git_repo, monkeypatch):
        monkeypatch.chdir(git_repo.working_dir)
        assert branch_is(BRANCH_CURRENT) is True

    def test_false_for_non_existent_branch(self, git_repo):
        assert branch_is(BRANCH_NON_EXISTENT, {"cwd": git_repo.working_dir}) is False

    def test_false_for_different_branch_same_commit(self, git_repo):
        assert branch_is(BRANCH_SAME_COMMIT, {"cwd": git_repo.working_dir}) is False

    def test_true_in_subdir(self, git_repo):
        cwd = os.path.join(git_repo.working_dir, SUBDIR_NAME)
        assert branch_is(BRANCH_CURRENT, ResolveOptions(cwd=cwd)) is True

    def test_predicate(self, git_repo):
        options = {"cwd": git_repo.working_dir}
        assert branch_is(lambda name: name == BRANCH_CURRENT, options) is True
        assert branch_is(lambda name: False, options) is False

    def test_flags(self, git_repo):
        options = {"cwd": git_repo.working_dir}
        assert branch_is(BRANCH_CURRENT.upper(), options, ignore_case=True) is True
        assert branch_is("^test-", options, use_regex=True) is True
        assert branch_is(BRANCH_CURRENT, options, invert=True) is False

    def test_error_outside_repo(self, not_a_repo):
        with pytest.raises(ResolutionError):
            branch_is(BRANCH_CURRENT, {"cwd": str(not_a_repo)})

    def test_error_for_missing_cwd(self, temp_dir):
        with pytest.raises(ResolutionError):
            branch_is(BRANCH_CURRENT, {"cwd": str(temp_dir / "invalid")})

    def test_options_must_be_mapping(self):
        with patch("git.cmd.Git.execute") as mock_execute:
            with pytest.raises(InvalidOptionsError, match="options"):
                branch_is(BRANCH_CURRENT, "opts")
            mock_execute.assert_not_called()


class TestCheckBranch:
    """Test check_branch() results."""

    def test_example_scenario(self, git_repo):
        """Test match, inverted mismatch and invalid pattern on one repository."""
        options = {"cwd": git_repo.working_dir}

        result = check_branch(BRANCH_CURRENT, options)
        assert result.matched is True
        assert result.current_branch == BRANCH_CURRENT

        result = check_branch("dev", options, invert=True)
        assert result.matched is True
        assert result.current_branch == BRANCH_CURRENT

        with pytest.raises(InvalidPatternError):
            check_branch("b[ad", options, use_regex=True)

    def test_detached_head(self, detached_repo):
        result = check_branch(BRANCH_CURRENT, {"cwd": detached_repo.working_dir})
        assert result.matched is False
        assert result.current_branch == ""

    def test_invalid_pattern_checked_before_git(self, not_a_repo):
        """Test that an invalid pattern is reported even outside a repository."""
        with pytest.raises(InvalidPatternError):
            check_branch("b[ad", {"cwd": str(not_a_repo)}, use_regex=True)


class TestGetBranch:
    """Test get_branch()."""

    def test_gets_the_branch_name(self, git_repo, monkeypatch):
        monkeypatch.chdir(git_repo.working_dir)
        assert get_branch() == BRANCH_CURRENT

    def test_rejects_bad_options(self):
        with pytest.raises(InvalidOptionsError, match="options"):
            get_branch(BRANCH_CURRENT)


def test_public_api():
    """Test that the package exports its entry points."""
    for name in git_branch_is.__all__:
        assert hasattr(git_branch_is, name)
