# LICENSE: AGPLv3. See LICENSE at root of repo

DEFAULT_STATUS = "Use '/' to search, 'q' to exit."


class AppState:
    """
    The games being listed and what the user is doing with them.

    `games` never changes after construction. `visible` is the part of it
    matching the search query, and `selected_index` points into `visible`
    (None when nothing is visible).
    """

    def __init__(self, games):
        self.games = tuple(games)
        self.visible = self.games
        self.search_query = ""
        self.in_search_mode = False
        self.status_message = DEFAULT_STATUS
        self.selected_index = 0 if self.visible else None

    def move_selection(self, delta):
        if not self.visible:
            return
        new_index = self.selected_index + delta
        self.selected_index = max(0, min(new_index, len(self.visible) - 1))

    def current(self):
        if self.selected_index is None:
            return None
        return self.visible[self.selected_index]

    def enter_search_mode(self):
        self.in_search_mode = True

    def exit_search_mode(self, keep_filter=False):
        self.in_search_mode = False
        if not keep_filter:
            self.search_query = ""
            self.update_filter()

    def append_query(self, char):
        self.search_query += char
        self.update_filter()

    def pop_query(self):
        self.search_query = self.search_query[:-1]
        self.update_filter()

    def update_filter(self):
        query = self.search_query.lower()
        self.visible = tuple(g for g in self.games if query in g.name.lower())
        # Reset selection if out of bounds
        if not self.visible:
            self.selected_index = None
        elif self.selected_index is None or self.selected_index >= len(self.visible):
            self.selected_index = 0
