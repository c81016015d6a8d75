# littleengine

littleengine gives a game the core of an engine:

- a frame clock that measures delta time, elapsed time and frames per second
- tagged, coloured console logging
- an abstract game interface to implement
- a window backed by pygame's display
- a rendering device that brings up the display back end
- an application object that runs the game loop

## Installation

```
pip install .
```

To install with the test tools as well:

```
pip install ".[test]"
```

## Writing a game

Subclass `Game` from `littleengine.game` and implement its four methods: `init`, `update`, `render` and `shutdown`.

```python
from littleengine.app import App
from littleengine.game import Game
from littleengine.log import log_info


class MyGame(Game):
    def init(self):
        log_info("MyGame", "Starting up")

    def update(self, delta_time):
        log_info("MyGame", "Frame took {:.3f}s", delta_time)

    def render(self):
        pass

    def shutdown(self):
        log_info("MyGame", "Bye")


app = App()
app.init(MyGame())
app.run()
app.shutdown()
```

The three `App` calls do the following:

- `App.init(game)` opens an 800×600 window titled "App" and initialises a `Device`. It then calls the game's `init`.
- `App.run()` starts the shared clock and logs "Start running.". Each frame, it processes the window's events, ticks the clock and passes the delta time to the game's `update`. The loop ends when the window receives a quit event.
- `App.shutdown()` calls the game's `shutdown` and closes the window.

`run` and `shutdown` raise `RuntimeError` if `init` has not been called.

## Timing

`littleengine.timing.Time` is the frame clock. `Time.instance()` returns the process-wide shared clock. You can also build a separate `Time(clock=...)` with any function that returns seconds. The default is `time.perf_counter`.

- Call `start()` once to set time zero.
- Call `tick()` once per frame. Calling it before `start()` raises `RuntimeError`.
- After each tick, read the `delta_time`, `elapsed_time` and `fps` properties. `fps` is `inf` when the delta is zero.

`current_time_formatted()` returns the local wall-clock time as `HH:MM:SS`.

## Logging

`littleengine.log` provides `log_info`, `log_warning` and `log_error`. Each takes a tag and a message. If extra positional or keyword arguments are given, the message is treated as a `str.format` pattern. Each call prints one line to standard output:

```
[12:34:56][Tag]: message
```

When standard output is a terminal, the line is coloured and the colour is reset at the end of the line:

- info lines are white
- warning lines are yellow
- error lines are red

`hresult_to_string(code)` describes a Windows HRESULT code, given in signed or unsigned form. It knows a fixed set of common codes, such as `0x80004005` ("Unspecified error"). For any other code it returns `Unknown message code: <code>`, with the code shown as a signed 32-bit number.

## Window

`littleengine.window.Window(width, height, title)` opens a pygame display of that size and caption. It can be used as a context manager, which closes it on exit.

- `process_messages()` drains pending events. It returns `False` once a quit event arrives or the window is closed.
- `handle` is a property that gives the underlying display surface. It raises `RuntimeError` after the window is closed.
- `close()` closes the window and shuts down the display. Calling it more than once is safe.

## Device

`littleengine.device.Device().init()` initialises pygame's display back end. It logs the outcome under the tag "Render Device" and returns whether initialisation succeeded.

## What it does not do

The engine does not draw anything:

- `Device` only brings up the display back end. It offers no drawing calls.
- `App.run` never calls the game's `render` method. Any drawing is up to the game itself.
- There is no command-line program. The package is used as a library.