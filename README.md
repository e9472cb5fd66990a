# regsort

regsort keeps a directory tidy. It watches a source directory and moves every
file that appears in it into a target directory. Which target a file goes to
is decided by a list of rules, each a regular expression matched against the
file name.

A watcher first sorts the files that are already in the source directory,
including its subdirectories. After that it keeps running and sorts each new
file as soon as it is created.

## Installation

```
pip install .
```

## Configuration

regsort reads a TOML file with a `[config]` table and a list of `[[rules]]`:

```toml
[config]
source_dir = "/home/me/Downloads"
log = true
dry_run = false

[[rules]]
pattern = '.*\.txt$'
target = "/home/me/Documents/text"

[[rules]]
pattern = '.*\.csv$'
target = "/home/me/Documents/data"
```

- `source_dir` is the directory to watch. It must already exist.
- `log` is meant to choose the log level: pass it to
  `regsort.logsetup.init_logger`, where `True` shows debug output and `False`
  shows only warnings and errors.
- `dry_run` makes regsort log what it would move without moving anything.
- Rules are tried in order, and the first rule whose `pattern` matches
  anywhere in the file name wins. A file that no rule matches stays where it
  is, and a warning is logged.

A target directory is created if it does not exist. If the target already
holds a file with the same name, regsort adds a number to the new name, so
`report.txt` becomes `report(1).txt`, then `report(2).txt`, and so on.

## Usage

```python
from regsort.config import Config
from regsort.logsetup import init_logger
from regsort.watcher import SourceWatcher

config = Config.from_file("config.toml")
init_logger(config.config.log)
SourceWatcher(config).watch()
```

`SourceWatcher.watch` runs `run_initial_clean_up` and then
`subscribe_to_source`, which blocks until interrupted. Either can be called on
its own.

`Config.from_file` raises `ConfigError` when the file cannot be read or
parsed, when a pattern is not a valid regular expression, or when the source
directory does not exist.

Lower-level pieces are available too:

- `regsort.executor.TaskExecutor(dry_run, rules)` sorts one file with
  `execute(path)`, returning the chosen destination or `None` when no rule
  matches. `find_matching_rule(file_name)` returns the first matching rule.
- `regsort.task.Task(full_path, file_name, target_dir, dry_run)` moves one
  file with `execute()`; `find_target_path()` returns the first free
  destination, and `extend_file(file_name, index)` builds the numbered name.

## What it does not do

The package installs no command. To run it, write a short script like the one
above; reading the configuration path from the command line or from an
environment variable is left to that script.