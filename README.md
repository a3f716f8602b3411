# puhpkit

A small toolkit with two halves:

* **Data structures** – a doubly linked list with cursors, a queue, a stack,
  and a separate-chaining hash table with a mid-square hash.
* **Timing and process helpers** – a stopwatch `Timer`, a `Complexity`
  checker that compares timings against constant, linear or polynomial
  predictions, a list formatter, and a `Process` runner that captures exit
  code and output.

No third-party dependencies; Python 3.10 or newer.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

### Doubly linked list (`puhpkit.linked_list`)

```python
from puhpkit.linked_list import DoublyLinkedList

items = DoublyLinkedList([1, 2, 3])
items.push_back(4)
items.push_front(0)
print(list(items))        # [0, 1, 2, 3, 4]
print(len(items))         # 5
print(items.at(2))        # 2

items.reverse()
print(items.front(), items.back())   # 4 0
```

`begin()`, `last()` and `end()` return `Cursor` objects. A cursor moves with
`advance(steps)` and `retreat(steps)` (negative steps move the other way),
stops at the end going forward and at the head going back, and reads its
value with `element()`. Cursors are passed to `insert_after()` (which appends
when given the end cursor) and `erase()` (which returns a cursor to the
following node).

Other operations:

* `insert_after_index(index, value)` – inserts after the element at `index`;
  an index equal to the length appends, a larger one inserts nothing and
  returns the end cursor.
* `assign(count, value)` – replaces the contents with `count` copies of
  `value`.
* `assign_range(first, last)` – replaces the contents with the elements from
  `first` up to, but not including, `last` (or to the end of the source list).
* `pop_front()`, `pop_back()`, `clear()`, `is_empty()`, `head()`, `tail()`.
* `copy()` – an independent list with the same values; `copy.copy` and
  `copy.deepcopy` work too.
* Lists compare equal when they hold equal values in the same order.

`front()`, `back()`, `pop_front()` and `pop_back()` on an empty list, `at()`
with an index out of range, and `element()` on the end cursor raise
`IndexError`; `erase()` with the end cursor raises `ValueError`.

### Queue and stack (`puhpkit.containers`)

```python
from puhpkit.containers import Queue, Stack

q = Queue()
q.enqueue("a")
q.enqueue("b")
print(q.front())     # a
print(q.dequeue())   # a
print(len(q))        # 1

s = Stack()
s.push(1)
s.push(2)
print(s.top())       # 2
print(s.pop())       # 2
print(s.is_empty())  # False
```

`dequeue()` and `pop()` return the item they remove. Removing from or peeking
at an empty queue or stack raises `IndexError`; `clear()` empties either.

### Hash table (`puhpkit.hash_table`)

```python
from puhpkit.hash_table import HashTable

table = HashTable(1024)
table.add("alice", 1)
table.add("bob", 2)
print("alice" in table)      # True
print(table.get("bob"))      # 2
print(table.keys(True))      # ['alice', 'bob']
print(table.n_collisions())  # collisions counted so far
table.remove("alice")
```

The default capacity is 1024 buckets. Keys are placed with a modified
mid-square hash (`mid_square_hash`, also reached through `hash`); a key whose
squared value is too short to have middle digits, such as the empty string,
raises `ValueError`. Four alternative hash functions, `custom_hash_1` through
`custom_hash_4`, are available for experiments.

Adding a key twice, or getting or removing a key that is absent, raises
`KeyError`. A collision is counted whenever a key lands in a bucket that is
already occupied. `set_capacity()` rehashes every entry into a table of the
new size (resetting and recounting collisions), `clear()` empties the table,
and `copy()` returns an independent table with the same buckets and counters.

## Timing and process helpers

* `puhpkit.timer.Timer` – starts on creation; `stop()` fixes the elapsed time,
  read back with `microseconds()`, `milliseconds()` or `seconds()` (zero until
  the first stop). `elapsed()` gives seconds so far while running. It can be
  used as a context manager, which restarts it on entry and stops it on exit.
* `puhpkit.complexity.Complexity` – `check_constant_time()`,
  `check_linear()` and `check_polynomial()` take two timers with their input
  sizes and compare a measured time against a prediction through
  `check_prediction(actual, predicted)`, which passes when the relative error
  is within the tolerance (20 % by default) and always fails when the actual
  time is zero. A message is printed for failed checks, or for every check
  when `verbose` is set; the linear and polynomial checks also print a
  warning that they are untested.
* `puhpkit.utility.format_list` – renders items as `{a, b, c}`.
* `puhpkit.process.Process` – `execute(args, stdin="")` runs a command
  (program name first), feeds it standard input and returns an
  `ExecutionResult` with `code`, `stdout` and `stderr`. An empty argument list
  raises `ValueError`; a program that cannot be started yields exit code 127
  with an explanation in `stderr`. `program_exists(name)` checks whether a
  program is on the path.

## Command line

```
puhpkit-leak-check
```

Prints a greeting and runs a fixed workout of the linked list – pushes and
pops at both ends, erasing, bulk assignment and copying – which is handy as a
smoke test of the list implementation. The same workout is available from
Python as `puhpkit.leak_check.exercise_list()`, which returns the final list.

## What it does not do

The package has no assertion or scoring framework, no log collection, no
results file output and no memory-leak detection: `Process` can start a tool
such as a compiler or a leak checker, but interpreting its output is left to
the caller. There is also no postal address record.