# tests/test_run_driver.py

import pytest

from shared.config import config
from modules.errors import InputOpenError
from modules.run_driver import run
from conftest import ROOT, output_tree


def test_scenario_a_two_files(workdir, transcript):
    path = transcript(
        "// a/b.js\n"
        "console.log(1);\n"
        "# c/d.py\n"
        "print(2)\n"
    )
    report = run(path)
    assert output_tree(workdir) == {
        "a/b.js": b"console.log(1);\n",
        "c/d.py": b"print(2)\n",
    }
    assert report.created == ["a/b.js", "c/d.py"]
    assert report.failed == [] and report.skipped == []
    assert report.lines == 4


def test_scenario_b_tree_preview_is_ignored(workdir, transcript):
    path = transcript(
        "Here is the layout:\n"
        "project/\n"
        "├── x/\n"
        "│   └── y.json\n"
        "└── README.md\n"
        "\n"
        "[ x/y.json ]\n"
        "{}\n"
    )
    run(path)
    assert output_tree(workdir) == {"x/y.json": b"{}\n"}


@pytest.mark.parametrize("last_line", ["# a/empty.txt", "# a/empty.txt\n"])
def test_scenario_c_trailing_marker_gives_empty_file(workdir, transcript, last_line):
    path = transcript("// first.py\nx = 1\n" + last_line)
    run(path)
    assert output_tree(workdir) == {"first.py": b"x = 1\n", "a/empty.txt": b""}


def test_scenario_d_leading_commentary_is_dropped(workdir, transcript):
    path = transcript(
        "Sure! Here are your files.\n"
        "They should work.\n"
        "// app/main.py\n"
        "print('hi')\n"
    )
    report = run(path)
    assert output_tree(workdir) == {"app/main.py": b"print('hi')\n"}
    assert report.created == ["app/main.py"]


def test_content_goes_only_to_the_preceding_marker(workdir, transcript):
    path = transcript(
        "- one.txt\n"
        "1a\n"
        "1b\n"
        "-> two/two.txt\n"
        "2a\n"
        "=> three.txt\n"
        "3a\n"
        "3b\n"
        "3c\n"
    )
    run(path)
    assert output_tree(workdir) == {
        "one.txt": b"1a\n1b\n",
        "two/two.txt": b"2a\n",
        "three.txt": b"3a\n3b\n3c\n",
    }


def test_line_terminators_and_bytes_are_preserved(workdir, transcript):
    body = b"first\r\n\tsecond  \r\n\xff\xfe raw\nno newline at end"
    path = transcript(b"// data/blob.txt\r\n" + body)
    run(path)
    assert output_tree(workdir) == {"data/blob.txt": body}


def test_priority_of_long_arrow(workdir, transcript):
    path = transcript("--> a.js\nlet a;\n")
    run(path)
    assert output_tree(workdir) == {"a.js": b"let a;\n"}


def test_running_twice_is_idempotent(workdir, transcript):
    path = transcript(
        "# pkg/__init__.py\n"
        "\n"
        "# pkg/core.py\n"
        "def f():\n"
        "    return 1\n"
        "*** conf/app.yml\n"
        "debug: true\n"
    )
    run(path)
    first = output_tree(workdir)
    run(path)
    assert output_tree(workdir) == first
    assert first["pkg/__init__.py"] == b"\n"


def test_repeated_marker_overwrites(workdir, transcript):
    path = transcript("// a.txt\nold\n// b.txt\nb\n// a.txt\nnew\n")
    run(path)
    assert output_tree(workdir) == {"a.txt": b"new\n", "b.txt": b"b\n"}


def test_root_notice_and_created_lines(transcript, capsys):
    path = transcript("// a/b.js\nx\n# c/d.py\ny\n")
    run(path)
    out = capsys.readouterr().out.splitlines()
    assert out == [
        f"Root folder '{ROOT}' created.",
        "Created file: a/b.js",
        "Created file: c/d.py",
    ]


def test_failed_file_does_not_stop_the_run(workdir, transcript, capsys):
    (workdir / ROOT).mkdir()
    (workdir / ROOT / "blocked").write_text("file in the way")
    path = transcript(
        "// blocked/one.py\n"
        "lost = True\n"
        "// ok/two.py\n"
        "kept = True\n"
    )
    report = run(path)
    assert report.failed == ["blocked/one.py"]
    assert report.created == ["ok/two.py"]
    tree = output_tree(workdir)
    assert tree["ok/two.py"] == b"kept = True\n"
    assert "blocked/one.py" not in tree
    assert "Error creating directory" in capsys.readouterr().err


def test_invalid_path_is_skipped(workdir, transcript, capsys):
    config["AI2FS_MAX_PATH_LENGTH"] = 16
    path = transcript(
        "// short.py\n"
        "a = 1\n"
        "// a/very/long/directory/name.py\n"
        "dropped = True\n"
        "// next.py\n"
        "b = 2\n"
    )
    report = run(path)
    assert report.skipped == ["a/very/long/directory/name.py"]
    assert output_tree(workdir) == {"short.py": b"a = 1\n", "next.py": b"b = 2\n"}
    assert "Skipping invalid path" in capsys.readouterr().err


def test_custom_root_argument(workdir, transcript):
    path = transcript("// x.txt\nx\n")
    report = run(path, root="out")
    assert report.root == "out"
    assert output_tree(workdir, root="out") == {"x.txt": b"x\n"}
    assert not (workdir / ROOT).exists()


def test_root_from_config(workdir, transcript, monkeypatch):
    monkeypatch.setenv("AI2FS_ROOT_FOLDER", "from-env")
    path = transcript("// y.txt\ny\n")
    run(path)
    assert output_tree(workdir, root="from-env") == {"y.txt": b"y\n"}


def test_missing_input_is_fatal(workdir):
    with pytest.raises(InputOpenError) as exc:
        run(str(workdir / "nope.txt"))
    assert "Error opening input file" in str(exc.value)
    assert exc.value.exit_code == 1
    assert not (workdir / ROOT).exists()


def test_empty_input(workdir, transcript):
    report = run(transcript(""))
    assert report.created == [] and report.lines == 0
    assert (workdir / ROOT).is_dir()
    assert output_tree(workdir) == {}


def test_non_utf8_marker_path_does_not_stop_the_run(workdir, transcript, capsys):
    path = transcript(b"// caf\xe9.txt\nhello\n// ok.txt\nfine\n")
    report = run(path)
    tree = output_tree(workdir)
    assert tree["caf\udce9.txt"] == b"hello\n"
    assert tree["ok.txt"] == b"fine\n"
    assert report.created == ["caf\udce9.txt", "ok.txt"]
    out = capsys.readouterr().out
    assert "Created file: caf�.txt" in out
    assert "Created file: ok.txt" in out
