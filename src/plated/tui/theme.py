from __future__ import annotations

APP_CSS = """
Screen {
    background: $background;
    color: $text;
}

Header, Footer {
    background: $panel;
    color: $text;
}

.screen-shell {
    width: 1fr;
    height: 1fr;
    padding: 1 2;
}

.screen-title {
    text-style: bold;
    padding: 0 0 1 0;
}

.empty-state {
    color: $text-muted;
    padding: 1 0;
}

#search {
    margin: 0 0 1 0;
}

ListView {
    height: 1fr;
    border: round $panel;
}

#recipe-body {
    height: 1fr;
    border: round $panel;
    padding: 1 2;
}
"""
