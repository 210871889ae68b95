import pytest

from cofftodef.deffile import (
    DEF_HEADER,
    Mode,
    export_name,
    is_excluded,
    render_def,
    write_def_file,
)


@pytest.mark.parametrize(
    "name",
    [
        "__real@3ff0000000000000",
        "??_C@_05ABC@hello?$AA@",
        "__CT??_R0?AVexception@@@8",
        "__CTA1_N",
        "__CTA2?AVbad_alloc@std@@",
        "__TI1_N",
        "__TI2?AVbad_alloc@std@@",
        "__CTA1?AVfoo@@",
        "__CTA2PAVfoo@@",
        "__TI1?AVfoo@@",
        "__TI2PAVfoo@@",
        "__mask@@AbsDouble@",
        "__xmm@00000000000000000000000000000000",
    ],
)
def test_excluded_names(name):
    assert is_excluded(name) is True


@pytest.mark.parametrize("name", ["_foo", "?bar@@YAXXZ", "__CTA1_NX", "__TI1_Nz", "plain"])
def test_not_excluded(name):
    assert is_excluded(name) is False


def test_win32_strips_leading_underscore():
    assert export_name("_foo", Mode.WIN32) == "foo"


def test_win32_keeps_decorated_names():
    assert export_name("_foo@8", Mode.WIN32) == "_foo@8"
    assert export_name("?bar@@YAXXZ", Mode.WIN32) == "?bar@@YAXXZ"


def test_win32_drops_undecorated_names():
    assert export_name("foo", Mode.WIN32) is None


def test_win64_exports_as_is():
    assert export_name("foo", Mode.WIN64) == "foo"
    assert export_name("_foo", Mode.WIN64) == "_foo"


def test_mode_accepts_int():
    assert export_name("_foo", 1) == "_foo"
    assert export_name("_foo", 0) == "foo"


def test_render_header_only():
    assert render_def([], Mode.WIN32) == DEF_HEADER
    assert DEF_HEADER == "LIBRARY\r\nEXPORTS\r\n"


def test_render_sorted_unique_filtered_win32():
    text = render_def(["_zeta", "?alpha@@YAXXZ", "_zeta", "__xmm@00", "gamma", "_beta@4"], Mode.WIN32)
    assert text == DEF_HEADER + "?alpha@@YAXXZ\r\n_beta@4\r\nzeta\r\n"


def test_render_win64():
    text = render_def(["b", "a", "__real@1"], Mode.WIN64)
    assert text == DEF_HEADER + "a\r\nb\r\n"


def test_write_def_file_round_trip(tmp_path):
    path = tmp_path / "out.def"
    symbols = ["_foo", "?bar@@YAXXZ"]
    write_def_file(symbols, path, Mode.WIN32)
    assert path.read_bytes() == render_def(symbols, Mode.WIN32).encode("latin-1")


def test_write_def_file_missing_directory(tmp_path):
    with pytest.raises(OSError):
        write_def_file(["_foo"], tmp_path / "missing" / "out.def", Mode.WIN32)