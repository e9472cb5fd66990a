from pathlib import Path

import pytest

from regsort.task import Task, extend_file


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "tests" / "resources" / "task" / "input").mkdir(parents=True)
    return tmp_path


def create_file(file_path):
    Path(file_path).write_bytes(b"Rust is super cool!!!")


def test_execute_task(workdir):
    target_file_path = "tests/resources/task/output/test.txt"
    file_path = "tests/resources/task/input/test.txt"
    create_file(file_path)

    task = Task(file_path, "test.txt", "tests/resources/task/output", False)
    moved_to = task.execute()

    target_path = Path(target_file_path)
    assert moved_to == target_path
    assert target_path.exists()
    assert target_path.is_file()
    assert not Path(file_path).exists()


def test_execute_task_dry_run(workdir):
    file_path = "tests/resources/task/input/test.txt"
    create_file(file_path)

    task = Task(file_path, "test.txt", "tests/resources/task/output", True)
    planned = task.execute()

    source_path = Path(file_path)
    assert planned == Path("tests/resources/task/output/test.txt")
    assert source_path.exists()
    assert source_path.is_file()
    assert not planned.exists()


def test_execute_keeps_contents(workdir):
    file_path = "tests/resources/task/input/test.txt"
    create_file(file_path)

    moved_to = Task(file_path, "test.txt", "tests/resources/task/output").execute()

    assert moved_to == Path("tests/resources/task/output/test.txt")
    assert moved_to.read_bytes() == b"Rust is super cool!!!"


def test_execute_picks_free_name_when_taken(workdir):
    output = Path("tests/resources/task/output")
    output.mkdir(parents=True)
    (output / "test.txt").write_text("first")
    (output / "test(1).txt").write_text("second")
    file_path = "tests/resources/task/input/test.txt"
    create_file(file_path)

    moved_to = Task(file_path, "test.txt", str(output)).execute()

    assert moved_to == output / "test(2).txt"
    assert moved_to.read_bytes() == b"Rust is super cool!!!"
    assert (output / "test.txt").read_text() == "first"


def test_find_target_path_when_free(workdir):
    task = Task("in/a.txt", "a.txt", "tests/resources/task/output")
    assert task.find_target_path() == Path("tests/resources/task/output/a.txt")


def test_failed_move_is_not_raised(workdir):
    task = Task("tests/resources/task/input/absent.txt", "absent.txt", "tests/resources/task/output")
    target = task.execute()
    assert target == Path("tests/resources/task/output/absent.txt")
    assert not target.exists()


@pytest.mark.parametrize(
    ("file_name", "index", "expected"),
    [
        ("file.txt", 1, "file(1).txt"),
        ("README", 2, "README(2)"),
        ("archive.tar.gz", 3, "archive.tar(3).gz"),
    ],
)
def test_extend_file(file_name, index, expected):
    assert extend_file(file_name, index) == expected