import io

import pytest

from config.settings import VERSION
from main import main, read_input
from conv_lib.result import ErrorKind


class BrokenStream:
    def readline(self):
        raise OSError("stream closed")


def run_cli(capsys, argv, text):
    code = main(argv, stdin=io.StringIO(text))
    out, err = capsys.readouterr()
    return code, out, err


def test_decode_mode(capsys):
    code, out, err = run_cli(capsys, [], "base16_1wpshgct5v5kgt2jd\n")
    assert code == 0
    assert out == "706174617465\n"
    assert err == ""


def test_encode_mode(capsys):
    code, out, _ = run_cli(capsys, ["test"], "706174617465\n")
    assert code == 0
    assert out.startswith("test1")
    assert out.count("\n") == 1


def test_encode_base58(capsys):
    code, out, _ = run_cli(capsys, ["base58"], "Ae2tdPwUPEYy")
    assert code == 0
    assert out.startswith("base581")


def test_reprefix(capsys):
    code, out, _ = run_cli(capsys, ["new_prefix"], "old_prefix1wpshgct5v5frd79v\n")
    assert code == 0
    assert out == "new_prefix1wpshgct5v52ycf9c\n"


def test_only_first_line_is_read(capsys):
    code, out, _ = run_cli(capsys, [], "  base16_1wpshgct5v5kgt2jd  \nnot_a_valid_bech32m_string!!!\n")
    assert code == 0
    assert out == "706174617465\n"


def test_invalid_bech32m_exits_with_error(capsys):
    code, out, err = run_cli(capsys, [], "not_a_valid_bech32m_string!!!\n")
    assert code == 1
    assert out == ""
    assert err.startswith("Error: ")


def test_invalid_prefix(capsys):
    code, out, err = run_cli(capsys, ["Bad"], "706174617465\n")
    assert code == 1
    assert out == ""
    assert err.startswith("Error: Invalid prefix")


def test_unrecognized_format(capsys):
    code, _, err = run_cli(capsys, ["test"], "0OIl\n")
    assert code == 1
    assert "Supported formats" in err


@pytest.mark.parametrize("text", ["", "\n", "   \t\n"])
def test_empty_input(capsys, text):
    code, out, err = run_cli(capsys, [], text)
    assert code == 1
    assert out == ""
    assert err == "No input provided\n"


def test_read_error(capsys):
    code = main([], stdin=BrokenStream())
    _, err = capsys.readouterr()
    assert code == 1
    assert err.startswith("Error reading input: stream closed")


def test_read_input_kinds():
    assert read_input(io.StringIO("")).kind is ErrorKind.EmptyInput
    assert read_input(BrokenStream()).kind is ErrorKind.StdinReadError
    assert read_input(io.StringIO(" abc \n")).data == "abc"


@pytest.mark.parametrize("flag", ["--version", "-V"])
def test_version(capsys, flag):
    with pytest.raises(SystemExit) as exc_info:
        main([flag])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out == f"bech32m {VERSION}\n"


@pytest.mark.parametrize("flag", ["--help", "-h"])
def test_help_lists_examples(capsys, flag):
    with pytest.raises(SystemExit) as exc_info:
        main([flag])
    assert exc_info.value.code == 0
    out = capsys.readouterr().out
    assert "PREFIX" in out
    assert "Supported encoding formats: Base16, Bech32m & Base58." in out
    assert "base16_1wpshgct5v5kgt2jd" in out
