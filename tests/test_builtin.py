import os

import pytest

from djsh.builtin import execute_builtin
from djsh.errors import ExecutionError, ParseError
from djsh.parser import parse_command


def run(session, line):
    return execute_builtin(session, parse_command(line))


def test_unknown_name_falls_through(session):
    assert run(session, "ls -l") is False


class TestExit:
    def test_exit_stops_session(self, session):
        assert run(session, "exit")
        assert not session.running
        assert session.exit_code == 0

    def test_exit_with_argument_is_error(self, session):
        with pytest.raises(ParseError):
            run(session, "exit now")
        assert session.running

    def test_exit_with_dropped_arguments_is_error(self, session):
        with pytest.raises(ParseError):
            run(session, "exit a b c d e f")
        assert session.running

    def test_exit_with_only_redirection(self, session, workdir):
        run(session, "exit > out.txt")
        assert not session.running


class TestCd:
    def test_changes_directory(self, session, workdir):
        (workdir / "sub").mkdir()
        run(session, "cd sub")
        assert os.getcwd() == str(workdir / "sub")

    def test_missing_directory_leaves_cwd(self, session, workdir):
        with pytest.raises(ExecutionError):
            run(session, "cd /does/not/exist")
        assert os.getcwd() == str(workdir)

    @pytest.mark.parametrize("line", ["cd", "cd a b", "cd a b c d e f"])
    def test_wrong_argument_count(self, session, workdir, line):
        (workdir / "a").mkdir()
        with pytest.raises(ParseError):
            run(session, line)
        assert os.getcwd() == str(workdir)


class TestPath:
    def test_unset_prints_nothing(self, session, capfd):
        run(session, "path")
        assert capfd.readouterr().out == ""

    def test_set_then_print(self, session, capfd):
        run(session, "path /bin:/usr/bin")
        run(session, "path")
        assert capfd.readouterr().out == "/bin:/usr/bin\n"
        assert session.path.directories == ["/bin", "/usr/bin"]

    def test_replaces_previous(self, session):
        run(session, "path /a:/b")
        run(session, "path /c")
        assert session.path.get() == "/c"


class TestHistory:
    @pytest.fixture
    def filled(self, session):
        for line in ["one", "two", "three"]:
            session.history.record(line)
        return session

    def test_prints_everything(self, filled, capfd):
        run(filled, "history")
        assert capfd.readouterr().out == "one\ntwo\nthree\n"

    def test_prints_recent_window(self, filled, capfd):
        run(filled, "history 2")
        assert capfd.readouterr().out == "two\nthree\n"

    def test_larger_than_size(self, filled, capfd):
        run(filled, "history 50")
        assert capfd.readouterr().out == "one\ntwo\nthree\n"

    def test_zero(self, filled, capfd):
        run(filled, "history 0")
        assert capfd.readouterr().out == ""

    @pytest.mark.parametrize("arg", ["51", "-1", "abc", "2x", "1_0", ""])
    def test_bad_count_prints_nothing(self, filled, capfd, arg):
        cmd = parse_command("history")
        cmd.args.append(arg)
        with pytest.raises(ParseError):
            execute_builtin(filled, cmd)
        assert capfd.readouterr().out == ""
        assert len(filled.history) == 3
