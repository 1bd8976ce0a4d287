# sigtalk

sigtalk sends text from one process to another using only two POSIX signals.
Each byte goes out as eight signals, most significant bit first. `SIGUSR1`
carries a 1 and `SIGUSR2` carries a 0. After every bit the server sends back a
`SIGUSR1` acknowledgement, and the client does not send the next bit until that
acknowledgement has arrived. Each message is sent as its UTF-8 bytes followed
by a newline and a NUL byte. When the server receives the NUL byte, it writes
the whole message, newline included, to standard output.

The client needs a POSIX system, because it uses `SIGUSR1` and `SIGUSR2`. The
server also waits for signals with `signal.sigwaitinfo`, which Python provides
on Linux but not on macOS.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its PID and then waits for messages until it is
interrupted with Ctrl-C:

```
sigtalk-server
```

```
Server started. PID: 4242
Messages received: 
```

From another terminal, send a message to that PID:

```
sigtalk-client 4242 "hello there"
```

The server prints `hello there` followed by a newline.

The client checks its arguments before it sends anything. It prints a message
and exits with status 1 in these cases:

- it is not given exactly two arguments. It prints
  `Usage: ./client PID MESSAGE_TO_SEND`.
- the PID is empty or contains anything other than digits. It prints
  `PID must be a number.`
- the message is empty. It prints `Message cannot be empty.`

If the target process cannot be signalled, for example because no process has
that PID, the client prints `Cannot signal process PID: reason` and exits with
status 1.

### Delivery receipts

The bonus variants add a receipt for each message. After the bonus server has
written a whole message, it also sends `SIGUSR2` to the client. The bonus
client prints `ACK` when that receipt arrives.

```
sigtalk-server-bonus
sigtalk-client-bonus 4242 "hello there"
```

## As a library

The framing can be used without signals:

```python
from sigtalk.protocol import BitDecoder, byte_to_bits, frame_message

frame = frame_message("hi")        # b"hi\n\x00"
decoder = BitDecoder()
for value in frame:
    for bit in byte_to_bits(value):
        message = decoder.feed(bit)
# after the last bit of the NUL byte, message == b"hi\n"
```

`BitDecoder.feed` returns `None` until a bit completes a NUL byte; it then
returns the bytes received before the NUL. `BitDecoder.reset` drops any partly
received byte and message.

`sigtalk.client.Client(pid, bonus=False, kill=None, poll_interval=50e-6,
ack_timeout=None)` sends with `send(message)` or `send_byte(value)`. With
`ack_timeout` set, a missing acknowledgement raises `TimeoutError`. In bonus
mode, `receipts` counts the `SIGUSR2` receipts received. `check_args(argv)`
validates `[PID, MESSAGE]` and raises `UsageError`.

`sigtalk.server.Server(bonus=False, kill=None, out=None)` handles one bit with
`receive(signum, sender_pid)`, which returns the message bytes when that bit
completes one. It writes messages to `out`, or to standard output when `out` is
not given. `serve_forever()` blocks `SIGUSR1` and `SIGUSR2` and handles them as
they arrive. Both classes accept a `kill` callable in place of `os.kill`.

The package also has small helpers:

- `sigtalk.ascii`: ASCII classification and case mapping (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`).
- `sigtalk.memory`: operations on byte buffers (`memset`, `bzero`, `calloc`,
  `memcpy`, `memmove`, `memchr`, `memcmp`).
- `sigtalk.strings`: string functions with C-string rules (`atoi`, `itoa`,
  `strchr`, `strrchr`, `strncmp`, `strnstr`, `substr`, `strjoin`, `strtrim`,
  `split`, `strmapi`, `striteri`, `strlcpy`, `strlcat`).
- `sigtalk.output`: `format_printf` and `printf` for the conversions
  `%c %s %p %d %i %u %x %X %%`, and `putchar_fd`, `putstr_fd`, `putendl_fd`,
  `putnbr_fd` for writing to file descriptors.

## Limitations

The server keeps a single decoder for all senders. If two clients send at the
same time their bits interleave and the messages are garbled. Messages are not
encrypted or authenticated: any process allowed to signal the server can send
it bits.

## Running the tests

```
pip install ".[test]"
pytest
```