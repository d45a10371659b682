# LICENSE: AGPLv3. See LICENSE at root of repo

import curses
import logging

from steamfolders.errors import LaunchError
from steamfolders.opener import open_folder
from steamfolders.state import AppState
from steamfolders.view import render

log = logging.getLogger(__name__)

KEYS_ENTER = (curses.KEY_ENTER, ord("\n"), ord("\r"))
KEYS_BACKSPACE = (curses.KEY_BACKSPACE, 127, 8)
KEY_ESCAPE = 27


class App:
    """
    The interactive list. `run` is the event loop, `handle_key` is one step of it.
    """

    def __init__(self, games, opener=open_folder):
        self.state = AppState(games)
        self.opener = opener
        self.running = True
        self.offset = 0

    def open_selected(self):
        game = self.state.current()
        if game is None:
            return
        try:
            self.opener(game.target_path)
        except LaunchError as e:
            log.warning("Failed to open `%s` for %s: %s", game.target_path, game.name, e)
            self.state.status_message = str(e)
            return
        if game.is_non_steam:
            self.state.status_message = "Opened prefix folder."
        else:
            self.state.status_message = "Opened game folder."

    def handle_key(self, key):
        """Apply one key press. Returns False once the user asked to quit.

        key is what get_wch() returns: a str for typed characters, an int
        for function keys like curses.KEY_UP.
        """
        state = self.state
        if isinstance(key, int) and 32 <= key < 127:
            key = chr(key)
        elif isinstance(key, str) and not key.isprintable():
            # Enter, Esc, Backspace and friends arrive as control characters
            key = ord(key)
        if key == curses.KEY_UP:
            state.move_selection(-1)
        elif key == curses.KEY_DOWN:
            state.move_selection(+1)
        elif state.in_search_mode:
            if key in KEYS_ENTER:
                state.exit_search_mode(keep_filter=True)
            elif key == KEY_ESCAPE:
                state.exit_search_mode()
            elif key in KEYS_BACKSPACE:
                state.pop_query()
            elif isinstance(key, str):
                state.append_query(key)
        elif key in KEYS_ENTER:
            self.open_selected()
        elif key == "q":
            self.running = False
        elif key == "/":
            state.enter_search_mode()
        return self.running

    def run(self, screen):
        try:
            curses.curs_set(0)
        except curses.error:
            # Some terminals can't hide the cursor, that's fine
            pass
        try:
            curses.set_escdelay(25)
        except curses.error:
            pass
        screen.keypad(True)

        self.offset = render(self.state, screen, self.offset)
        while self.running:
            key = screen.get_wch()
            self.handle_key(key)
            self.offset = render(self.state, screen, self.offset)


def run_interactive(games, opener=open_folder):
    """
    Show the list until the user quits. curses.wrapper restores the terminal
    on every way out of here, exceptions and Ctrl+C included.
    """
    app = App(games, opener)
    curses.wrapper(app.run)
    return app
