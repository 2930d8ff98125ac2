"""Pytest fixtures for git-branch-is tests"""
import sys
import tempfile
from pathlib import Path

import git
import pytest

# Name of the branch checked out in the test repository.
# Must not contain regular expression metacharacters.
BRANCH_CURRENT = "test-branch"
# Name of a branch which does not exist
BRANCH_NON_EXISTENT = "non-existent"
# Name of a branch on the same commit as the current branch
BRANCH_SAME_COMMIT = "same-commit"
# Name of a subdirectory created within the repository
SUBDIR_NAME = "subdir"

FAKE_GIT_SCRIPT = """\
import os
import sys

sys.stdout.write(os.environ.get("FAKE_GIT_STDOUT", ""))
sys.stderr.write(os.environ.get("FAKE_GIT_STDERR", ""))
sys.exit(int(os.environ.get("FAKE_GIT_STATUS", "0")))
"""


@pytest.fixture
def temp_dir(monkeypatch):
    """Create a temporary directory which git will not search above."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir).resolve()
        monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(path))
        yield path


@pytest.fixture
def git_repo(temp_dir):
    """Create a real Git repository with BRANCH_CURRENT checked out."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    # Configure git user for commits
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    repo.git.commit("-q", "-m", "Initial Commit", "--allow-empty")
    repo.git.branch("-M", BRANCH_CURRENT)
    repo.git.branch(BRANCH_SAME_COMMIT)
    (repo_path / SUBDIR_NAME).mkdir()

    yield repo

    # Cleanup
    repo.close()


@pytest.fixture
def detached_repo(git_repo):
    """Create a Git repository with a detached HEAD."""
    git_repo.git.checkout("-q", git_repo.head.commit.hexsha)
    yield git_repo


@pytest.fixture
def not_a_repo(temp_dir):
    """Create a directory which is not inside any Git repository."""
    path = temp_dir / "not_a_repo"
    path.mkdir()
    return path


@pytest.fixture
def fake_git(temp_dir, monkeypatch):
    """Create a fake git executable controlled through environment variables.

    Returns a function taking the output and exit status the fake git should
    produce and returning the ResolveOptions fields which run it.
    """
    script = temp_dir / "fake_git.py"
    script.write_text(FAKE_GIT_SCRIPT)

    def configure(stdout="", stderr="", status=0):
        monkeypatch.setenv("FAKE_GIT_STDOUT", stdout)
        monkeypatch.setenv("FAKE_GIT_STDERR", stderr)
        monkeypatch.setenv("FAKE_GIT_STATUS", str(status))
        return {"git_path": sys.executable, "git_args": [str(script)]}

    return configure
