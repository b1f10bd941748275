import io
import os

from hshell.environment import Environment
from hshell.history import History
from hshell.shell import Shell, main


def make_shell(text, entries=(), interactive=False):
    out = io.StringIO()
    err = io.StringIO()
    shell = Shell(
        "hsh",
        Environment(list(entries)),
        History(),
        io.StringIO(text),
        out,
        err,
        interactive,
    )
    return shell, out, err


def write_script(directory, name, body, mode=0o755):
    path = directory / name
    path.write_text("#!/bin/sh\n" + body)
    os.chmod(path, mode)
    return path


def test_setenv_then_env():
    shell, out, _ = make_shell("setenv FOO bar\nenv\n")
    assert shell.run() == 0
    assert out.getvalue() == "FOO=bar\n"


def test_setenv_wrong_argument_count():
    shell, _, err = make_shell("setenv ONLY\n")
    shell.run()
    assert err.getvalue() == "Incorrect number of arguements\n"


def test_unsetenv_removes_and_needs_arguments():
    shell, out, err = make_shell("unsetenv A\nunsetenv\nenv\n", ["A=1", "B=2"])
    shell.run()
    assert out.getvalue() == "B=2\n"
    assert err.getvalue() == "Too few arguements.\n"


def test_alias_define_list_and_use():
    shell, out, _ = make_shell("alias e=env\nalias\ne\n", ["K=v"])
    shell.run()
    assert out.getvalue() == "e='env'\nK=v\n"


def test_history_builtin_and_comment_stripping():
    shell, out, _ = make_shell("env # note\nhistory\n")
    shell.run()
    assert out.getvalue() == "0: env \n1: history\n"
    assert shell.history.lines() == ["env ", "history"]


def test_not_found_sets_127_and_counts_lines(tmp_path):
    shell, _, err = make_shell("nosuch\nnosuch\n", [f"PATH={tmp_path}"])
    assert shell.run() == 127
    assert err.getvalue() == "hsh: 1: nosuch: not found\nhsh: 2: nosuch: not found\n"


def test_status_expansion_after_failure(tmp_path):
    shell, out, _ = make_shell("nosuch\nsetenv S $?\nenv\n", [f"PATH={tmp_path}"])
    shell.run()
    assert "S=127\n" in out.getvalue()


def test_and_skips_after_failure(tmp_path):
    shell, out, _ = make_shell("nosuch && setenv A b\nenv\n", [f"PATH={tmp_path}"])
    shell.run()
    assert "A=b" not in out.getvalue()


def test_or_runs_after_failure(tmp_path):
    shell, out, _ = make_shell("nosuch || setenv A b\nenv\n", [f"PATH={tmp_path}"])
    shell.run()
    assert "A=b\n" in out.getvalue()


def test_semicolon_runs_all():
    shell, out, _ = make_shell("setenv A 1; setenv B 2\nenv\n")
    shell.run()
    assert out.getvalue() == "A=1\nB=2\n"


def test_external_exit_status(tmp_path):
    write_script(tmp_path, "fail3", "exit 3\n")
    shell, _, _ = make_shell("fail3\n", [f"PATH={tmp_path}"])
    assert shell.run() == 3


def test_external_output_is_captured(tmp_path):
    write_script(tmp_path, "greet", "echo hi\n")
    shell, out, _ = make_shell("greet\n", [f"PATH={tmp_path}"])
    assert shell.run() == 0
    assert out.getvalue() == "hi\n"


def test_permission_denied(tmp_path):
    write_script(tmp_path, "noexec", "exit 0\n", mode=0o644)
    shell, _, err = make_shell("noexec\n", [f"PATH={tmp_path}"])
    assert shell.run() == 126
    assert err.getvalue() == "hsh: 1: noexec: Permission denied\n"


def test_interactive_prompt_and_zero_exit(tmp_path):
    shell, out, _ = make_shell("nosuch\n", [f"PATH={tmp_path}"], interactive=True)
    assert shell.run() == 0
    assert out.getvalue() == "$ $ \n"


def test_run_builtin_returns_none_for_unknown():
    shell, _, _ = make_shell("")
    assert shell.run_builtin(["nosuch"]) is None
    assert shell.line_count == 0


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert main(["hsh", str(missing)]) == 127
    assert capsys.readouterr().err == f"hsh: 0: Can't open {missing}\n"


def test_main_runs_script_and_saves_history(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("HOME", str(tmp_path))
    script = tmp_path / "script.hsh"
    script.write_text("setenv X y\nhistory\n")
    assert main(["hsh", str(script)]) == 0
    assert capsys.readouterr().out == "0: setenv X y\n1: history\n"
    saved = (tmp_path / ".simple_shell_history").read_text()
    assert saved == "setenv X y\nhistory\n"