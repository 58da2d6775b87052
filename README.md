# highfleet

Python types that model data structures from the game Highfleet. The
package uses only the standard library.

## Modules

### `highfleet.escadra_string`

`EscadraString` is the game's null-terminated, variable-length string.

- `EscadraString(value="")` creates a string. Text of up to 15 bytes
  (UTF-8) is held in a fixed 16-byte inline buffer.
- `set_string(string)` stores new text. Longer text moves to a separate
  buffer. That buffer's capacity doubles until the text and its
  terminator fit. Once a string has left the inline buffer, it never
  moves back.
- `str(s)` returns the text. `len(s)` and `s.length` give its length in
  bytes.
- `s.max_length` is the largest length the current buffer can hold (15
  while inline).
- `s.is_inline` tells whether the string is in the inline buffer.
- `s.raw` returns the whole buffer, terminator included.
- Instances compare, order and hash by their text. Copies are
  independent strings with the same text.

### `highfleet.tll`

`TLL` is an element of a triply linked list. The game uses these for
aircraft loadouts and keyboard input.

- A node has the links `a`, `b` and `c`, each another `TLL` or `None`.
- It also has the fields `end`, `flag`, `padding_1ah`, `index`, `string`
  (an `EscadraString`), `unknown_40h`, `padding_44h`, `data1`, `data2`
  and `data3`.
- Nodes compare and hash by identity, because links may form cycles.
- `TLL.explore()` walks every node reachable from this one, depth first.
  It returns a dict that maps each node to a `TLLRef` holding its `a`,
  `b` and `c` links.
- `TLL.print(file=None)` writes an indented dump of this node and every
  reachable node, each exactly once, to `file` or to standard output.

### `highfleet.ammo_v1_151` and `highfleet.ammo_v1_163`

`Ammo` is the ammunition record for game version 1.151 or 1.163. The
1.163 record adds `shell_enemy`, `ttl`, `shop_rarity`, `shop_ammount` and
`fire_delay`.

- String fields are `EscadraString`. A plain `str` passed to the
  constructor is converted.
- `to_dict()` returns every field in record order, with strings as
  `str`. `to_json()` returns the same data as compact JSON.
- `Ammo.from_dict(data)` and `Ammo.from_json(text)` build a record.
  - Every field is required, and unknown keys are ignored.
  - Integer fields must be integers within their signed or unsigned
    32-bit range. Booleans are rejected.
  - Any problem, including malformed JSON, raises `AmmoFormatError`
    (a `ValueError`).
- The 1.163 record also reads the older names `unknown_16ch`,
  `unknown_174h`, `unknown_178h` and `unknown_17ch`. It takes them as
  `ttl`, `shop_rarity`, `shop_ammount` and `fire_delay`. Giving both
  names for one field is an error.

## Installing

```
pip install .
```

The tests use pytest. Install it with the `test` extra: `pip install .[test]`.

## Example

```python
from highfleet.escadra_string import EscadraString
from highfleet.ammo_v1_163 import Ammo

name = EscadraString("Banana")
name.set_string("Banana Banana Banana Banana")
print(str(name), name.max_length)   # Banana Banana Banana Banana 31

ammo = Ammo(item_name="AMMO_57MM", milimeterage="57mm", caliber=100, speed=1200.0)
text = ammo.to_json()
assert Ammo.from_json(text) == ammo
```

## What this package does not do

These are plain Python objects. The package does not attach to a running
game, read or write process memory, or lay records out in the game's
binary format. `TLL` nodes are built and linked in Python, and the
addresses that `TLL.print` shows are Python object identities.