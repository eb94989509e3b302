# escterminal

This package is a fullscreen "locked computer" prop for escape rooms, built on
pygame. The terminal starts at a login screen. Any password the players type
shows as asterisks. Clicking **Log-in** never lets them in. It opens a pop-up
that says login is disabled during the emergency protocol.

The terminal checks a USB mount point once a second for a file named
`secret.hack`. If that file's content matches `assets/secret.hack` exactly, a
"Hack in progress!" pop-up opens. When the hack is complete, the desktop
unlocks. A "Hack completed!" pop-up appears and the document list window opens.

## Installation

```
pip install .
```

The only runtime dependency is `pygame`. By default the terminal starts
`udiskie -a` so that USB sticks are mounted automatically. It stops that
process when it exits. Pass `--no-automount` to skip this.

## Assets

The terminal reads its images and the reference hack file from an assets
directory:

```
assets/
  logo.png            # required, drawn in the middle of the desktop
  secret.hack         # required, the content the USB file must match
  documents/          # required; one image per document, keyed by the
    <name>.png        #   part of the file name before the first dot
  minimize.png        # minimize button in window title bars
  close.png           # close button on pop-ups
  document_icon.png   # dock icon for document windows
  warning.png         # dock icon for pop-ups
  minigame.png
```

The icon files are loaded if they are present. Windows that draw a minimize
or close button raise `RuntimeError` if that icon is missing. A window whose
icon is missing gets no entry in the dock.

## Running

```
escterminal --usb-path /media/usb
```

Options:

- `--assets DIR`: the assets directory. The default is `assets`.
- `--usb-path PATH`: the mount point to watch. The default is taken from the
  `ESC_USB_PATH` environment variable. One of the two must be given.
- `--windowed`: run in a 1280×800 window instead of full screen.
- `--no-automount`: do not start `udiskie -a`.

Close the window to quit.

## Controls

- Press the left mouse button on a window's title bar and drag to move the
  window.
- Scroll the mouse wheel over a document window to scroll through it.
- Click the minimize button in a title bar to hide the window. Click its icon
  in the dock to show or hide it again.
- Click the close button on a pop-up to dismiss it.
- Press the Home key to skip straight to the unlocked desktop. This is useful
  when setting up the room.

## Using it from Python

`escterminal.system.EscOS` is the whole desktop. Call `tick(surface, events)`
once per frame, with a pygame surface and the events for that frame.
`check_hack_file()` and `on_hack_completed()` can also be called directly.
`EscOS` is a context manager. When the block exits, it calls `close()`, which
stops the automounter if one was started.

```python
from escterminal.system import EscOS

with EscOS("assets", "/media/usb", (1920, 1080), False) as desktop:
    ...  # desktop.tick(surface, events) once per frame
```

The windows live in their own modules:

- `escterminal.login.LoginWindow`
- `escterminal.popup.PopUp`
- `escterminal.document.DocumentWindow`
- `escterminal.document_list.DocumentList`

They all implement `escterminal.windows.Window`. A `DocumentWindow` shows the
document with the given name. If there is no document by that name, it shows
a blank page. To add one to a running desktop, append it to
`desktop.windows`.

## What it does not do

- **No minigame.** When the matching USB file is found, the hack status moves
  from "USB opened" to "minigame" after about two seconds. No minigame window
  is shown, and nothing completes the hack by itself. The desktop unlocks only
  when the Home key is pressed or `on_hack_completed()` is called.
- **Empty document list.** The "Document List" window has no entries.
  Documents cannot be opened from it, and the desktop gives no way to open a
  `DocumentWindow`. One can only be created from Python, as shown above.
- **The password is never checked.** The login window cannot unlock the
  terminal.