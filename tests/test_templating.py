import os
from dataclasses import dataclass

import pytest

from mapt.templating import TemplateError, render_template, write_temp_file


@dataclass
class UserData:
    Username: str
    Hostname: str


def test_render_dataclass_fields():
    result = render_template(UserData("alice", "host1"), "user={{ Username }} host={{ Hostname }}")
    assert result == "user=alice host=host1"


def test_render_mapping():
    assert render_template({"Name": "world"}, "hello {{ Name }}") == "hello world"


def test_render_loop_over_list():
    result = render_template({"Items": ["a", "b"]}, "{% for i in Items %}[{{ i }}]{% endfor %}")
    assert result == "[a][b]"


def test_trailing_newline_preserved():
    assert render_template({"X": "v"}, "{{ X }}\n").endswith("\n")


def test_undefined_variable_raises():
    with pytest.raises(TemplateError):
        render_template({}, "{{ Missing }}")


def test_syntax_error_raises():
    with pytest.raises(TemplateError):
        render_template({}, "{% for %}")


def test_write_temp_file_round_trip():
    content = "#cloud-config\nusers: []\n"
    path = write_temp_file(content)
    try:
        with open(path, encoding="utf-8") as f:
            assert f.read() == content
    finally:
        os.remove(path)


def test_write_temp_file_creates_distinct_files():
    first = write_temp_file("a")
    second = write_temp_file("b")
    try:
        assert first != second
        assert os.path.basename(first).endswith(os.path.basename(first).split("-")[-1])
        with open(second, encoding="utf-8") as f:
            assert f.read() == "b"
    finally:
        os.remove(first)
        os.remove(second)