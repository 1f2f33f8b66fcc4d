import pytest

from hillcipher.__main__ import BANNER, main

from .conftest import TEXTBOOK_KEY


def test_encrypt_command(clean_env, capsys):
    assert main(["-q", "encrypt", "--block-size", "3", "--key", TEXTBOOK_KEY, "ACT"]) == 0
    assert capsys.readouterr().out.strip() == "POH"


def test_decrypt_command(clean_env, capsys):
    assert main(["-q", "decrypt", "--block-size", "3", "--key", TEXTBOOK_KEY, "POH"]) == 0
    assert capsys.readouterr().out.strip() == "ACT"


def test_banner_printed_by_default(clean_env, capsys):
    main(["encrypt", "--block-size", "3", "--key", TEXTBOOK_KEY, "ACT"])
    out = capsys.readouterr().out.splitlines()
    assert out == [BANNER, "POH"]


def test_environment_configuration(clean_env, capsys):
    clean_env.setenv("HILLCIPHER_BLOCK_SIZE", "3")
    clean_env.setenv("HILLCIPHER_KEY", TEXTBOOK_KEY)
    assert main(["-q", "encrypt", "ACT"]) == 0
    assert capsys.readouterr().out.strip() == "POH"


def test_custom_scheme(clean_env, capsys):
    args = ["-q", "encrypt", "--scheme", "ABCDEFGHIJKLMNOPQRSTUVWXYZ .?",
            "--block-size", "3", "--key", TEXTBOOK_KEY, "HELLO"]
    assert main(args) == 0
    ciphertext = capsys.readouterr().out.rstrip("\n")
    assert len(ciphertext) == 6


def test_matrix_command(clean_env, capsys):
    assert main(["-q", "matrix", "--block-size", "3", "--key", TEXTBOOK_KEY]) == 0
    out = capsys.readouterr().out
    assert "Determinant: 441" in out
    assert "   8    5   10" in out


def test_invalid_key_reports_error(clean_env, capsys):
    assert main(["-q", "encrypt", "--block-size", "3", "--key", "GYBNQ", "ACT"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error:")


def test_missing_key_reports_error(clean_env, capsys):
    assert main(["-q", "decrypt", "--block-size", "3", "POH"]) == 1
    assert "not set a key" in capsys.readouterr().err


def test_command_required(clean_env):
    with pytest.raises(SystemExit):
        main([])


def test_environment_key_with_command_line_block_size(clean_env, capsys):
    clean_env.setenv("HILLCIPHER_KEY", TEXTBOOK_KEY)
    assert main(["-q", "encrypt", "--block-size", "3", "ACT"]) == 0
    assert capsys.readouterr().out.strip() == "POH"


def test_command_line_scheme_overrides_environment(clean_env, capsys):
    clean_env.setenv("HILLCIPHER_SCHEME", "ABC")
    clean_env.setenv("HILLCIPHER_BLOCK_SIZE", "3")
    clean_env.setenv("HILLCIPHER_KEY", TEXTBOOK_KEY)
    args = ["-q", "decrypt", "--scheme", "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "POH"]
    assert main(args) == 0
    assert capsys.readouterr().out.strip() == "ACT"


def test_command_line_key_overrides_environment(clean_env, capsys):
    clean_env.setenv("HILLCIPHER_BLOCK_SIZE", "2")
    clean_env.setenv("HILLCIPHER_KEY", "BBBB")
    assert main(["-q", "encrypt", "--key", "DDCF", "HELP"]) == 0
    assert capsys.readouterr().out.strip() == "HIAT"
