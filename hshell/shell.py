"""The shell: reading lines, running builtins and starting programs."""

from __future__ import annotations

import os
import subprocess
import sys

from .aliases import AliasTable
from .chain import expand_variables, should_run, split_chain
from .environment import Environment
from .history import History, history_file
from .pathsearch import find_path, is_command
from .text import remove_comments, split_words

PROMPT = "$ "
_WORD_DELIMITERS = " \t"


def _fileno(stream):
    try:
        return stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None


def _isatty(stream):
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


class Shell:
    """A small command interpreter with aliases, history and chaining."""

    def __init__(self, program_name="hsh", env=None, history=None, stdin=None,
                 stdout=None, stderr=None, interactive=None):
        self.program_name = program_name
        self.env = env if env is not None else Environment()
        self.history = history if history is not None else History()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.interactive = _isatty(self.stdin) if interactive is None else interactive
        self.aliases = AliasTable()
        self.status = 0
        self.line_count = 0
        self._line_pending = False
        self._builtins = {
            "env": self._builtin_env,
            "history": self._builtin_history,
            "setenv": self._builtin_setenv,
            "unsetenv": self._builtin_unsetenv,
            "alias": self._builtin_alias,
        }

    def run(self):
        """Read and run lines until end of input; return the exit code."""
        while True:
            if self.interactive:
                self.stdout.write(PROMPT)
            self._flush()
            line = self._read_line()
            if line is None:
                if self.interactive:
                    self.stdout.write("\n")
                break
            self.execute_line(line)
        try:
            self.history.save()
        except OSError:
            pass
        self._flush()
        return 0 if self.interactive else self.status

    def execute_line(self, line):
        """Run one input line: record it, then run its chained commands."""
        line = remove_comments(line)
        self.history.add(line)
        self._line_pending = True
        for command in split_chain(line):
            if not should_run(command.op, self.status):
                break
            self._run_command(command.text)
        return self.status

    def run_builtin(self, argv):
        """Run ``argv`` as a builtin; return its result, or None if it is not one."""
        handler = self._builtins.get(argv[0])
        if handler is None:
            return None
        self.line_count += 1
        return handler(argv)

    def run_external(self, argv, line):
        """Look ``argv[0]`` up and start it; return the resulting status."""
        if self._line_pending:
            self.line_count += 1
            self._line_pending = False
        if not line.strip(" \t\n"):
            return self.status
        path_var = self.env.get("PATH")
        path = find_path(path_var, argv[0])
        if path is None:
            if ((self.interactive or path_var is not None or argv[0].startswith("/"))
                    and is_command(argv[0])):
                path = argv[0]
            else:
                if not line.startswith("\n"):
                    self.status = 127
                    self.print_error(argv, "not found")
                return self.status
        self._spawn(path, argv)
        return self.status

    def print_error(self, argv, message):
        """Write ``program: line: command: message`` to the error stream."""
        self.stderr.write(f"{self.program_name}: {self.line_count}: {argv[0]}: {message}\n")

    def _run_command(self, text):
        argv = split_words(text, _WORD_DELIMITERS) or [text]
        argv[0] = self.aliases.expand(argv[0])
        argv = expand_variables(argv, self.env, self.status, os.getpid())
        if self.run_builtin(argv) is None:
            self.run_external(argv, text)

    def _spawn(self, path, argv):
        self._flush()
        out_fd = _fileno(self.stdout)
        err_fd = _fileno(self.stderr)
        try:
            proc = subprocess.run(
                argv,
                executable=path,
                env=self.env.to_mapping(),
                stdout=out_fd if out_fd is not None else subprocess.PIPE,
                stderr=err_fd if err_fd is not None else subprocess.PIPE,
                check=False,
            )
        except PermissionError:
            self.status = 126
            self.print_error(argv, "Permission denied")
            return
        except OSError:
            self.status = 1
            return
        if proc.stdout:
            self.stdout.write(proc.stdout.decode("utf-8", "replace"))
        if proc.stderr:
            self.stderr.write(proc.stderr.decode("utf-8", "replace"))
        code = proc.returncode
        # A child killed by a signal leaves the signal number as the status.
        self.status = -code if code < 0 else code
        if self.status == 126:
            self.print_error(argv, "Permission denied")

    def _read_line(self):
        while True:
            try:
                line = self.stdin.readline()
            except KeyboardInterrupt:
                self.stdout.write("\n" + PROMPT)
                self._flush()
                continue
            break
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line

    def _flush(self):
        for stream in (self.stdout, self.stderr):
            try:
                stream.flush()
            except (AttributeError, OSError, ValueError):
                pass

    def _builtin_env(self, argv):
        self.stdout.write("".join(entry + "\n" for entry in self.env.entries()))
        return 0

    def _builtin_history(self, argv):
        self.stdout.write(self.history.format())
        return 0

    def _builtin_setenv(self, argv):
        if len(argv) != 3:
            self.stderr.write("Incorrect number of arguements\n")
            return 1
        self.env.set(argv[1], argv[2])
        return 0

    def _builtin_unsetenv(self, argv):
        if len(argv) == 1:
            self.stderr.write("Too few arguements.\n")
            return 1
        for name in argv[1:]:
            self.env.unset(name)
        return 0

    def _builtin_alias(self, argv):
        if len(argv) == 1:
            self.stdout.write(self.aliases.format_all())
            return 0
        for word in argv[1:]:
            if "=" in word:
                self.aliases.define(word)
            else:
                text = self.aliases.format(word)
                if text is not None:
                    self.stdout.write(text)
        return 0


def main(argv=None):
    """Run the shell on a script file, when one is given, or on standard input."""
    args = list(sys.argv if argv is None else argv)
    program = args[0] if args else "hsh"
    script = None
    interactive = None
    if len(args) == 2:
        try:
            script = open(args[1], encoding="utf-8", errors="surrogateescape")
        except PermissionError:
            return 126
        except FileNotFoundError:
            sys.stderr.write(f"{program}: 0: Can't open {args[1]}\n")
            sys.stderr.flush()
            return 127
        except OSError:
            return 1
        interactive = False
    env = Environment.from_mapping(os.environ)
    history = History(history_file(env.get("HOME")))
    history.load()
    try:
        shell = Shell(
            program,
            env,
            history,
            script if script is not None else sys.stdin,
            sys.stdout,
            sys.stderr,
            interactive,
        )
        return shell.run()
    finally:
        if script is not None:
            script.close()