# darkframe

darkframe is a small core object framework for Python. It has no
dependencies beyond the standard library.

## Modules

- `darkframe.objects` provides these helpers:
  - `Range(start, length)` is a frozen span of positions. A `length` of `None`
    means "to the end". `resolve(size)` returns a concrete range, or raises
    `ValueError` if the range does not fit. `RANGE_ALL` covers everything.
  - `Box(value, kind, owned)` holds a value together with a 32-bit type tag.
    `release()` drops the value, and if the box owns it, closes it first.
  - `RefPool` is a context manager that collects objects and releases them
    on `drain()` or on exit. Pools nest, and `current_pool()` returns the
    innermost one. `autorelease(obj)` adds an object to that pool.
  - Generic protocols: `class_name`, `is_instance` (exact class only),
    `objects_equal` (values of different classes never match),
    `object_hash` (a 32-bit unsigned hash) and `copy_object`.
- `darkframe.strings` contains `String`, a mutable piece of text with
  `set`, `append`, `has_prefix`, `has_suffix`, a ranged `find` (which
  returns -1 when nothing is found) and `copy`. The module also has
  `join(*args)` and `strnlen(text, limit)`.
- `darkframe.array` contains `Array`, an ordered growable collection. It
  offers `get` (returns `None` when out of range), `set`, `push`, `pop`,
  `last` and `clear`. For lookup there are `contains`/`find`, which go by
  value, and `contains_identity`/`find_identity`, which go by identity.
- `darkframe.hashmap` contains `Map`, a key/value map whose keys compare with
  `objects_equal`. A key is copied when it is first inserted. Setting a
  value of `None` removes the key. It also has `remove`, `items`,
  `for_each` and `copy`.
- `darkframe.stream` contains the `Stream` base class. It gives buffered
  `read`, `read_line` (which splits on newline or NUL and drops a trailing
  carriage return), `write`, `write_string`, `write_line`, `at_end` and
  `close`, and it works as a context manager. Two streams build on it:
  `FileStream(path, mode)`, which takes fopen-style modes through
  `parse_mode`, and `TCPSocket`, which has `connect(host, port)`.
  `STDIN`, `STDOUT` and `STDERR` wrap the standard file descriptors.
- `darkframe.fs` has these functions:
  - `get_root` returns the working directory.
  - `get_path`, `path_relative_root` and `path_relative_binary` are path
    helpers.
  - `read_text_file` returns a file's text up to its first NUL. If the file
    cannot be opened, it prints a message and returns `""`.
- `darkframe.mtrandom` contains `MersenneTwister` (MT19937). You can seed it
  with an integer or with `from_array(key)`. It provides `next_int32`,
  `next_int31`, `next_real1`, `next_real2`, `next_real3` and `next_res53`.
  The module-level `next_long()` and `next_double()` use a shared generator
  seeded from the clock.
- `darkframe.guid` contains `Uuid`:
  - `Uuid.generate(rng=None)` makes a random version-4 identifier.
  - `to_string(fmt)` formats it as `N`, `D` (the default), `B`, `P` or `X`.
  - `format_pattern(fmt)` returns the pattern for a format letter.
- `darkframe.bitvector` contains `BitVector`, a growable set of bits stored
  in 32-bit words. It offers `set`, `get`, `clear` (give `None` or -1 to
  clear everything), `next_set_bit`, `intersects` and `is_empty`. The
  module also has `number_of_trailing_zeros`.
- `darkframe.game` contains these pieces:
  - `Rect` is an integer rectangle.
  - `Game` is a loop that runs updates on a fixed or variable timestep.
  - `GameHooks` holds the lifecycle callbacks.
  - `get_ticks()` returns the wall-clock time in 100 ns ticks.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from darkframe.strings import String
from darkframe.objects import Range
from darkframe.hashmap import Map
from darkframe.mtrandom import MersenneTwister
from darkframe.guid import Uuid
from darkframe.bitvector import BitVector

s = String("hello world")
s.append(String("!"))
print(s.find(String("world"), Range(0, len(s))))   # 6

m = Map()
m.set(String("answer"), 42)
print(m.get(String("answer")))                     # 42

rng = MersenneTwister.from_array([0x123, 0x234, 0x345, 0x456])
print(rng.next_int32())

print(Uuid.generate(rng).to_string("B"))

bits = BitVector()
bits.set(40, True)
print(bits.next_set_bit(0))                        # 40
```

### Game loop

```python
from darkframe.game import Game, GameHooks

def update(game):
    if game.total_game_time > 10_000_000:   # one second in ticks
        game.should_exit = True

game = Game("demo", 800, 600, hooks=GameHooks(update=update))
game.run()
```

`run()` does the following, in order:

1. Calls `initialize()`, then `load_content()`, then `start()`.
2. Calls `run_loop()` repeatedly while `is_running` is true. Each pass
   calls `handle_events()` and then `tick()`.

A `tick()` does the following:

1. Sleeps until at least one timestep has passed.
2. Runs as many fixed `update()` steps as are due, or a single variable
   step when `is_fixed_time_step` is false.
3. Calls `draw()`, unless `suppress_draw` was set.

The loop stops once `should_exit` or `close_requested` becomes true. You can
also override the four lifecycle methods in a subclass instead of passing
hooks. To test or replay a game, pass `clock=` and `sleep=` in place of the
real clock.

## What it does not do

`Game` does not open a window, draw anything on screen, or read a real
keyboard or mouse. Your `draw` hook decides what "drawing" means. Key state
is fed in through `key_event(key, pressed)`. Pressing `KEY_ESCAPE` asks the
game to close.