# ripplecore

Building blocks for working with ledger data: an exact amount type and
its 8-byte wire form, a length-limited byte reader, transaction result
codes, ledger time, and command and stream-message types for the
websocket API.

The package has no dependencies beyond the standard library. Its tests
use pytest; install them with the `test` extra.

## Amounts: `ripplecore.value`

`Value` holds either a native amount (a whole number of drops, shown as
XRP) or a non-native amount (a 16-digit mantissa with an exponent
between -96 and 80).

```python
from ripplecore.value import Value, new_value, native_value, non_native_value

a = new_value("1000", False)
b = new_value("-2", False)
print(a.multiply(b))                                        # -2000
print(new_value("1", False).divide(new_value("2", False)))  # 0.5

print(native_value(400_000_000))                            # 400

wire = a.to_bytes()                                         # 8 bytes, big-endian
print(Value.from_bytes(wire).equals(a))                     # True
```

- `new_value(s, native)` parses a decimal string. For a native value, a
  string with a decimal point is read as XRP and one without as drops.
- `native_value(n)` gives `n` drops; `non_native_value(n, offset)` gives
  `n * 10**offset`; `Value.canonical(native, negative, num, offset)`
  builds a value in canonical form.
- Arithmetic: `add`, `subtract`, `multiply`, `divide`, and `ratio`
  (which reads native values as XRP and always returns a non-native
  value). Comparison: `compare` (-1, 0 or 1), `less`, `equals`. Numeric
  equality is `equals`; `==` compares the stored representation.
- Other helpers: `native`, `non_native`, `clone`, `zero_clone`, `abs`,
  `negate`, `is_native`, `is_negative`, `is_zero`, `rat` (an exact
  `fractions.Fraction`, native values in drops) and `float` (native
  values in XRP).
- Wire form: `to_bytes`, `from_bytes`, `read(stream)` and
  `write(stream)`.

Bad input, overflow, mixing native and non-native values in `add`, and
division by zero raise `ValueError_`, a subclass of `ValueError`.

## Length-limited reads: `ripplecore.reader`

`LimitedReader(stream, limit)` wraps a binary stream and lets at most
`limit` bytes be read from it. `read(size)` returns fewer bytes (or
`b""`) once the limit is reached, `read_byte()` raises `EOFError`, and
`len()` gives the bytes still allowed.

## Transaction results: `ripplecore.result`

`TransactionResult` is an `int` subclass, and every known code is
available as a module constant (`tesSUCCESS`, `tecPATH_DRY`, ...).

```python
from ripplecore.result import TransactionResult

r = TransactionResult.from_token("tecPATH_DRY")
print(r.token(), r.human(), r.symbol())   # tecPATH_DRY Path could not send partial amount. ½
print(TransactionResult(0).success())     # True
```

`queued()` is true for `terQUEUED`. `to_bytes()` gives the one-byte
wire form and raises `ValueError` for codes outside 0..255;
`read(stream)` reads one back. Unknown tokens in `from_token` raise
`ValueError`.

## Ledger time: `ripplecore.rippletime`

`RippleTime` counts whole seconds since 2000-01-01 00:00 UTC, kept as an
unsigned 32-bit number, and prints as `2014-May-30 13:11:50 UTC`.

```python
from ripplecore.rippletime import RippleTime

t = RippleTime.parse("2014-May-30 13:11:50 UTC")
print(int(t), t.short())    # 454763510 13:11:50
print(t.to_datetime())
```

`RippleTime.from_datetime` accepts aware or naive (taken as UTC)
datetimes; `RippleTime.now()` gives the current time.

## Websocket messages: `ripplecore.messages`

- `new_command(name)` creates a `Command` with the next free id.
  Request fields go in `params`; `to_json()` gives the mapping to send.
  The side that receives the response sets `result` and calls `done()`,
  or calls `fail(message)`; `wait(timeout)` blocks until then and
  returns the result, raising the `CommandError` or `TimeoutError`.
  `increment_id()` gives a command a fresh id.
- `CommandError` carries `name`, `code` and `message`.
- `LedgerStreamMsg` and `ServerStreamMsg` are built from decoded JSON
  with `from_json`; `ServerStreamMsg.transaction_cost()` scales the base
  fee by the load factor.
- `parse_stream_message(obj)` returns the matching message for
  `ledgerClosed` and `serverStatus` messages and `None` for anything
  else.

## What this package does not do

- It opens no connections: there is no websocket client. Sending
  commands and feeding responses back into them is left to the caller.
- It has no account, currency, issued-amount, path or transaction
  types, and no signing; transaction stream messages are not decoded.
- It provides no command-line tools.