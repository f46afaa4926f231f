from utools import mem
from utools.util import UNITS, format_size


def test_physical_memory_positive():
    assert mem.physical_memory() > 0


def test_free_not_more_than_physical():
    assert 0 <= mem.free_memory() <= mem.physical_memory()


def test_used_within_bounds():
    used = mem.used_memory()
    assert 0 <= used <= mem.physical_memory()


def test_main_total(capsys):
    assert mem.main(["-t"]) == 0
    out = capsys.readouterr().out
    assert out == format_size(mem.physical_memory()) + "\n"


def test_main_free_has_unit(capsys):
    assert mem.main(["-f"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.split(" ")[1] in UNITS


def test_main_combined_prints_each(capsys):
    assert mem.main(["-tu"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0] == format_size(mem.physical_memory())


def test_main_without_arguments_prints_usage(capsys):
    assert mem.main([]) == 0
    assert capsys.readouterr().err.startswith("usage: mem")


def test_main_help(capsys):
    assert mem.main(["-h"]) == 0
    assert "[-utfh]" in capsys.readouterr().err


def test_main_invalid_option(capsys):
    assert mem.main(["-x"]) == 1
    err = capsys.readouterr().err
    assert "invalid option" in err
    assert "usage: mem" in err