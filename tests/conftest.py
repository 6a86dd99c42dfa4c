import pytest
from git import Repo


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep COMMITRULES_* variables from the host out of the tests."""
    for name in (
        "COMMITRULES_OUTPUT_FORMAT",
        "COMMITRULES_OUTPUT_FILE",
        "COMMITRULES_ALWAYS_LOG",
        "COMMITRULES_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def git_repo(tmp_path):
    """Create a temporary git repository."""
    repo = Repo.init(tmp_path)
    test_file = tmp_path / "test.txt"
    test_file.write_text("Initial content")
    repo.index.add(["test.txt"])
    repo.index.commit("Initial commit")
    return tmp_path
