# taifex_replay

Read TAIFEX market data messages back out of PCAP-like capture log files.

A capture log is expected to hold a global file header (24 bytes by default)
followed by packet records. Each record starts with a packet header (16 bytes
by default) whose 4-byte captured length, at offset 8 in native byte order,
says how many data bytes follow. Inside the captured data the TAIFEX message
begins at the first ESC byte (`0x1B`); everything from there to the end of the
record is returned as the message, as `bytes`.

## Installation

```
pip install .
```

## Usage

`LogFilePacketSimulator` is a context manager and an iterable. Iterating
opens the file if it is not open yet and yields every non-empty message:

```python
from taifex_replay.packet_simulator import LogFilePacketSimulator

with LogFilePacketSimulator("capture.pcaplike") as simulator:
    for message in simulator:
        print(message.hex())
```

Or drive it step by step:

```python
from taifex_replay.errors import LogIOError
from taifex_replay.packet_simulator import LogFilePacketSimulator

simulator = LogFilePacketSimulator("capture.pcaplike", 24, 16)
try:
    simulator.open()
except LogIOError as exc:
    print(exc)
else:
    while simulator.has_next_packet():
        message = simulator.get_next_taifex_packet()
        if message:
            ...
    simulator.close()
```

- `open()` skips the global header. It raises `LogIOError` when the file
  cannot be opened or is shorter than the global header. Calling it on an
  already open simulator only logs a warning.
- `is_open()` tells whether the file is open; `close()` closes it and may be
  called at any time.
- `has_next_packet()` is true while bytes remain and no read has come up short.
- `get_next_taifex_packet()` returns empty bytes for a record that holds no
  ESC byte, has a zero captured length, or is cut short by the end of the
  file. A record whose captured length exceeds 70000 bytes is taken as
  corruption and closes the file.

Progress and problems are reported through the standard `logging` module under
the logger `taifex_replay.packet_simulator`.

## Errors

`taifex_replay.errors` defines the exception hierarchy: `CoreUtilsError`
(a `RuntimeError`) as the base, with `InvalidArgumentError`, `ParsingError`,
`ConfigurationError` and `LogIOError` derived from it.

## What this package does not do

It only extracts raw message bytes from capture files. It does not check
message checksums, decode message headers or bodies, keep order books, or
receive live data from the network; there is no command-line tool.

## Running the tests

```
pip install .[test]
pytest
```