# draughtscan

Building blocks for a draughts engine playing international (10x10) or
Brazilian (8x8) draughts, in pure Python with no third-party dependencies.

## What is inside

- `draughtscan.pos`: `Geometry`, the square layout of a variant's board, with
  squares numbered 1..50 (international) or 1..32 (Brazilian) in text and a
  padded internal numbering for bitboards; the `Side`, `Piece` and
  `Direction` enums and the `piece_*` helpers; and `Pos`, an immutable
  bitboard position built directly or with `Pos.from_bits`. `Pos.do_move`
  returns the position after a move, promoting men that reach their last row
  and removing captured pieces.
- `draughtscan.move`: integer move encoding (`move_make`, `move_from`,
  `move_to`, `move_captured`, `move_index`, `move_is_capture`,
  `move_is_man`, `move_is_promotion`, `move_is_conversion`) and the full text
  notation (`move_to_hub`, `move_from_hub`), e.g. `32-28` or `28x19x23`,
  which lists every captured square.
- `draughtscan.score`: score constants (`INF`, `BB_INF`, `EVAL_INF`, `NONE`)
  and helpers `loss`, `to_trans`, `from_trans`, `clamp`, `add`, `is_eval`.
- `draughtscan.trans`: `TranspositionTable`, a power-of-two sized table in
  clusters of four entries with dated replacement; `store` records a result
  and `probe` returns a `ProbeResult` or `None`. Flag helpers `is_upper`,
  `is_lower`, `is_exact`.
- `draughtscan.tuple_index`: combinatorial indexing of piece sets within a
  set of squares (`tuple_size`, `tuple_index`, `tuple_index_rev`), for up to
  6 pieces on up to 50 squares.
- `draughtscan.config`: `Config`, a store of named string settings with the
  engine defaults, typed getters that raise `ConfigError`, `load` for files
  of `name = value` triples, and `update`, which derives a frozen `Options`
  (including the `Variant`).
- `draughtscan.input_listener`: `InputListener`, which reads lines from a
  stream (standard input by default) on a background thread and hands them
  over one at a time; `get_line` and `peek_line` return `None` at end of
  input.
- `draughtscan.util`: `NumberScanner`, `Timer`, `string_is_nat`,
  `load_file`, and the `BadInput` / `BadOutput` exceptions.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from draughtscan.config import Variant
from draughtscan.pos import Geometry
from draughtscan.move import move_from_hub, move_to_hub

geometry = Geometry(Variant.INTERNATIONAL)
mv = move_from_hub("32-28", geometry)
assert move_to_hub(mv, geometry) == "32-28"
```

Settings:

```python
from draughtscan.config import Config

config = Config()
config.set("threads", "4")
options = config.update()
assert options.smp and options.smp_threads == 4
```

## What it does not do

This package holds the core data structures only. It does not generate
legal moves, search or evaluate positions, read or write FEN, or use an
opening book or endgame bitbases. It has no network transport for playing
against other engines and no command-line program.