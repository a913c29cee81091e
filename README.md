# rabbitui

A terminal client for the RabbitMQ Management API. It shows live charts
of message counts and disk rates, lists exchanges and queues, and lets
you publish, pop and purge messages without leaving the terminal.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Usage

The management plugin must be enabled on the broker. Then run:

```
rabbitui --addr http://localhost:15672 --user guest --pass guest
```

| Option         | Default                  | Meaning                                        |
|----------------|--------------------------|------------------------------------------------|
| `-a`, `--addr` | `http://localhost:15672` | HTTP(S) address of the API, no trailing slash  |
| `-u`, `--user` | `guest`                  | Username for API authentication                |
| `-p`, `--pass` | `guest`                  | Password for API authentication                |

Before opening the interface, rabbitui requests `/api/overview`. If that
fails, it prints a message and exits without opening the interface.

While running, overview, exchange and queue data are fetched in the
background every two seconds. If a background fetch fails, refreshing
stops and the tabs keep showing the last data they received.

## Tabs

The interface has three tabs: **Overview**, **Exchanges** and **Queues**.

### Keys available everywhere

- `h` / `l`: previous / next tab
- `?`: show or hide help for the current tab
- `q`: quit

### Overview

Charts of total, ready and unacknowledged messages, and of disk read
and write rates, over the last 100 samples. The latest value of each
series is listed beside its chart.

### Exchanges

- `j` / `k`: next / previous row
- `Enter`: open or close the bindings of the selected exchange

### Queues

- `j` / `k`: next / previous row
- `p`: publish the clipboard contents to the selected queue
- `Ctrl+p`: pop a message from the selected queue onto the clipboard
- `d`: purge the selected queue (asks for confirmation; "No" is selected first)
- `f`: open or close the file explorer, which starts in your home directory
  and hides dot files; `Enter` on a directory opens it, `Enter` on a file
  publishes its contents to the selected queue, and `Backspace` goes to
  the parent directory

The clipboard is reached through Tk (`rabbitui.clipboard.TkClipboard`),
so the Queues tab needs `tkinter` and a display to copy and paste.

## Library use

The HTTP client can be used on its own:

```python
from rabbitui.client import Client

password = "password"
client = Client("http://localhost:15672", "user", password)
for queue in client.get_queues_info():
    print(queue.to_row())
```

`Client` also offers `get_overview`, `get_exchange_overview`,
`get_exchange_bindings`, `post_queue_payload`, `pop_queue_item`,
`purge_queue` and `ping`. Messages are popped with
`reject_requeue_true`, so they stay in the queue.

## Limitations

- Publishing a message (`post_queue_payload`) always authenticates as
  `guest`, whatever user was given, and publishes through the default
  exchange.
- Publish and purge requests do not report failures; the interface shows
  its notice either way.
- The refresh interval is fixed at two seconds; there is no option or
  configuration file to change it.
- Only RabbitMQ monitoring and the actions above are offered: queues,
  exchanges and bindings cannot be created or deleted.