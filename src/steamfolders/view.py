# LICENSE: AGPLv3. See LICENSE at root of repo

import curses

HIGHLIGHT_SYMBOL = ">> "
EMPTY_MESSAGE = "No games found."

# header: search title, search text, list title. footer: status line
LIST_TOP = 3
FOOTER_ROWS = 1


def _put(screen, y, text, attr=curses.A_NORMAL):
    height, width = screen.getmaxyx()
    # Never touch the bottom right cell, curses raises when the cursor
    # would have to move past it
    if y < 0 or y >= height or width < 2:
        return
    screen.addnstr(y, 0, text, width - 1, attr)


def list_rows(screen):
    """How many games fit on screen at once"""
    height, _ = screen.getmaxyx()
    return max(0, height - LIST_TOP - FOOTER_ROWS)


def scroll_offset(selected_index, rows, previous=0):
    """Index of the first visible game.

    Keeps the previous offset while the selection is still on screen, and
    scrolls just far enough to bring it back otherwise.
    """
    if selected_index is None or rows <= 0:
        return 0
    if selected_index < previous:
        return selected_index
    if selected_index >= previous + rows:
        return selected_index - rows + 1
    return previous


def render(state, screen, offset=0):
    """Draw the whole UI for state, starting the list near offset.

    Depends on nothing but its arguments and the window size. Returns the
    offset actually used so the caller can pass it back next time.
    """
    screen.erase()
    height, _ = screen.getmaxyx()

    if state.in_search_mode:
        search_title = "Search (type to search, Enter to exit)"
    else:
        search_title = "Search (press '/' to enter search mode)"
    if not state.search_query and not state.in_search_mode:
        search_text = "No search query"
    else:
        search_text = state.search_query
    _put(screen, 0, search_title, curses.A_BOLD)
    _put(screen, 1, f"  {search_text}")

    list_title = f"Games ({len(state.visible)}/{len(state.games)}, ↑/↓ to navigate, Enter to open, q to quit)"
    _put(screen, 2, list_title, curses.A_BOLD)

    rows = list_rows(screen)
    if not state.visible:
        offset = 0
        if rows:
            _put(screen, LIST_TOP, EMPTY_MESSAGE)
    else:
        offset = scroll_offset(state.selected_index, rows, offset)
        for y, i in enumerate(range(offset, min(offset + rows, len(state.visible)))):
            text = state.visible[i].display_text()
            if i == state.selected_index:
                _put(screen, LIST_TOP + y, HIGHLIGHT_SYMBOL + text, curses.A_REVERSE)
            else:
                _put(screen, LIST_TOP + y, " " * len(HIGHLIGHT_SYMBOL) + text)

    _put(screen, height - 1, state.status_message, curses.A_DIM)
    screen.refresh()
    return offset
