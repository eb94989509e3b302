"""Command-line entry point that runs the terminal full screen."""

from __future__ import annotations

import argparse
import os

import pygame

from .system import EscOS

WINDOW_TITLE = "ESC Terminal"
WINDOWED_SIZE = (1280, 800)
FRAME_RATE = 60


def parse_args(argv=None) -> argparse.Namespace:
    """Parse the command line; the USB path may come from ``ESC_USB_PATH``."""
    parser = argparse.ArgumentParser(prog="esc-terminal", description="Run the ESC terminal.")
    parser.add_argument("--assets", default="assets", help="directory holding the assets")
    parser.add_argument(
        "--usb-path",
        default=os.environ.get("ESC_USB_PATH"),
        help="mount point of the USB stick (default: $ESC_USB_PATH)",
    )
    parser.add_argument("--windowed", action="store_true", help="run in a window")
    parser.add_argument(
        "--no-automount",
        dest="automount",
        action="store_false",
        help="do not start the automounter",
    )
    args = parser.parse_args(argv)
    if not args.usb_path:
        parser.error("the USB path must be given with --usb-path or ESC_USB_PATH")
    return args


def main(argv=None) -> int:
    """Run the terminal until the window is closed."""
    args = parse_args(argv)
    pygame.init()
    try:
        if args.windowed:
            screen = pygame.display.set_mode(WINDOWED_SIZE)
        else:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        with EscOS(args.assets, args.usb_path, screen.get_size(), args.automount) as esc:
            while True:
                events = pygame.event.get()
                if any(event.type == pygame.QUIT for event in events):
                    break
                esc.tick(screen, events)
                pygame.display.flip()
                clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0