# euiccutil

Small building blocks for eUICC profile assistant tooling: a descriptor for
APDU and HTTP backend drivers, helpers for environment variables, JSON output
and monotonic timing, and a circular doubly linked list with whole-list
operations.

## Modules

### `euiccutil.driver`

- `DriverType`: `APDU` or `HTTP`.
- `Driver`: a frozen dataclass with `type`, `name` and optional `init`,
  `main` and `fini` callables.
  `Driver.run(interface, argv)` calls `init(interface)`, then
  `main(interface, argv)` and returns its exit code (0 when there is no
  `main`), and calls `fini(interface)` afterwards even if `main` raised.
  If `init` raises, neither `main` nor `fini` is called.

### `euiccutil.utils`

- Variable names: `http_env_name`, `apdu_env_name`, `custom_env_name`.
  For example, `apdu_env_name("PCSC", "DRV_IFID")` gives `LPAC_APDU_PCSC_DRV_IFID`
  and `custom_env_name("ISD_R_AID")` gives `LPAC_CUSTOM_ISD_R_AID`.
- Reading variables, where an unset or empty variable gives the default:
  - `getenv_str_or_default(name, default_value)`
  - `getenv_bool_or_default(name, default_value)`: an unrecognised value
    prints a warning to stderr and gives the default.
  - `getenv_int_or_default(name, default_value)`: parses the leading decimal
    digits; a set value without any gives 0.
  - `getenv_or_default(name, default_value)` picks one of the above from the
    type of the default (`bool`, `int` or `str`) and raises `TypeError` for
    any other type.
- `set_deprecated_env_name(name, deprecated_name)`: when `name` is unset and
  `deprecated_name` is set, copies the value across and prints a warning to
  stderr.
- `str_to_bool(value)`: `True` for `1/y/on/yes/true`, `False` for
  `0/n/off/no/false`, in any case; `None` for anything else.
- `json_print(kind, payload, stream=None)`: writes
  `{"type": kind, "payload": payload}` as one compact JSON line to `stream`
  (stdout by default) and flushes it. A `None` payload raises `ValueError`.
- `ends_with(text, suffix)`, `remove_suffix(text, suffix)` (returns `None`
  when the suffix is absent), `merge_string_lists(left, right)` and
  `path_concat(a, b)` (joins with `/`, `None` if either part is `None`).
- Timing with `Timespec(sec, nsec)` values: `get_current_clock()` reads the
  monotonic clock, `get_duration(t0, t1)` gives the span between two
  readings and `get_wall_time(start)` the span since `start`.

### `euiccutil.linkedlist`

- `LinkedList(values=())`: a circular doubly linked list around a sentinel.
  `push_front` and `push_back` return the new `ListNode`. It also offers
  `first`, `last` (both raise `IndexError` when empty), `first_or_none`,
  `remove`, `move_to_front`, `move_to_back` (which take a node from any
  list), `is_first`, `is_last`, `is_singular`, `next_circular`,
  `prev_circular` and `nodes()`, which yields nodes and allows removing the
  current one. It supports `len()`, truth testing, iteration over values and
  `reversed()`.
- `ListNode`: holds `value`; `owner` and `linked` tell where it is.
  `replace(new)` puts a detached node in its place, and `swap(other)`
  exchanges two nodes' positions, even across lists.

### `euiccutil.listops`

- `bulk_move_to_back(lst, first, last)`: moves the run `first`..`last` to the back.
- `rotate_left(lst)` and `rotate_to_front(lst, node)`.
- `cut_position(lst, node)` and `cut_before(lst, node)`: split off the front
  of a list (up to and including, or up to but excluding, `node`) into a new
  list that is returned.
- `splice(lst, other)` and `splice_tail(lst, other)`: move all of `other`'s
  nodes to the front or back of `lst`, leaving `other` empty.

Operations given a node that is not in the list raise `ValueError`.

## Example

```python
import sys
from euiccutil.utils import getenv_or_default, json_print
from euiccutil.linkedlist import LinkedList
from euiccutil.listops import rotate_left

timeout = getenv_or_default("LPAC_CUSTOM_TIMEOUT", 30)
json_print("lpa", {"code": 0, "timeout": timeout}, sys.stdout)

items = LinkedList(["a", "b", "c"])
rotate_left(items)
print(list(items))  # ['b', 'c', 'a']
```

## What this package does not do

It has no command-line program and no drivers of its own: it does not talk
to a card reader, modem or eUICC, and makes no HTTP requests. `Driver` only
describes a backend and runs the callables it is given.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```