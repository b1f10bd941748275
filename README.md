# hshell

A small command shell. It reads command lines from the terminal, from a pipe
or from a script file. It finds programs on `PATH` and runs them. It also has
a few builtins, aliases, `$` expansion, command chaining and a history that
is kept between sessions.

## Installing

```
pip install .
```

## Running

Start an interactive session. The prompt is `$ `:

```
hsh
```

Run the commands in a script file:

```
hsh script.sh
```

Pipe commands in:

```
echo "ls -l /tmp" | hsh
```

The session ends at end of input. When input is not a terminal, or when a
script file is given, the shell's exit code is the status of the last
command. An interactive session exits with 0. Pressing Ctrl-C while the
shell waits for input prints a fresh prompt.

If the script file does not exist, the shell prints
`<program>: 0: Can't open <file>` and exits with 127. If the file cannot be
opened because of its permissions, the shell exits with 126. Any other open
error makes it exit with 1.

## Command lines

- Words are separated by spaces and tabs. There is no quoting.
- A `#` at the start of a line, or right after a space, starts a comment that
  runs to the end of the line.
- `a ; b` runs both commands. With `a && b`, `b` runs only if the status is 0.
  With `a || b`, `b` runs only if the status is not 0. Once a command is
  skipped, the rest of the line is dropped.
- A word that is exactly `$?` becomes the last status. A word that is exactly
  `$$` becomes the shell's process id. `$NAME` becomes the value of that
  environment variable, or an empty word if the variable is not set. A lone
  `$` is left as it is.
- The first word is replaced by its alias, if it has one. Aliases of aliases
  are followed up to ten levels.
- Programs are looked up in each `PATH` directory in turn. An empty `PATH`
  entry means the current directory. A `./name` that exists is run as given.
  A program that is not found is reported as
  `<program>: <line>: <name>: not found`, and the status becomes 127.
- A program gets the shell's own environment, including changes made with
  `setenv` and `unsetenv`.

## Builtins

| Command                  | Effect                                                    |
|--------------------------|-----------------------------------------------------------|
| `env`                    | print the environment, one `NAME=value` per line          |
| `setenv NAME VALUE`      | set or change a variable                                  |
| `unsetenv NAME...`       | remove variables                                          |
| `history`                | list earlier lines as `N: line`, numbered from 0          |
| `alias`                  | list all aliases as `name='value'`                        |
| `alias name=value...`    | define aliases; `alias name=` removes one                 |
| `alias name...`          | print the named aliases                                   |

`setenv` with the wrong number of arguments, and `unsetenv` with none, print
a message on standard error and change nothing.

## History

Every line read is added to the history. When input ends, the history is
written to `$HOME/.simple_shell_history`. It is read back when the shell
starts. If 4096 or more lines are held after reading it, only the newest 4095
are kept. Nothing is read or written when `HOME` is not set.

## What it does not do

There is no `exit`, `cd` or `help` builtin. End the session with end of
input (Ctrl-D). To run a command in another directory, start the shell there.
There are no pipes, redirections, quoting, globbing, job control or
expansion of `$` in the middle of a word.

## Using it from Python

```python
import io
from hshell.environment import Environment
from hshell.shell import Shell

out = io.StringIO()
shell = Shell(
    program_name="hsh",
    env=Environment.from_mapping({"PATH": "/bin:/usr/bin"}),
    stdin=io.StringIO("alias ll=ls\nalias\nsetenv GREETING hello\nenv\n"),
    stdout=out,
    stderr=io.StringIO(),
    interactive=False,
)
status = shell.run()
print(out.getvalue())
```

`Shell.execute_line(line)` runs a single line and returns the status.

The other modules can also be used on their own:

- `hshell.text`: `split_words`, `starts_with`, `loose_atoi`, `parse_status`,
  `format_number`, `remove_comments`
- `hshell.chain`: `split_chain`, `should_run`, `expand_variables`, `ChainOp`,
  `Command`
- `hshell.aliases`: `AliasTable`
- `hshell.environment`: `Environment`
- `hshell.history`: `History`, `history_file`
- `hshell.pathsearch`: `find_path`, `is_command`