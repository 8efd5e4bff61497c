# This file stores copy blocks for headings, banners, and empty-state messages.
# It exists so wording stays consistent between the table, the pagination footer, and the app shell.

from __future__ import annotations

APP_TITLE = "User Directory"
APP_SUBTITLE = "Manage and view user records fetched from the Random User API."

SEARCH_LABEL = "Search by name, email, gender or age"
SEARCH_PLACEHOLDER = "Search by name, email, gender or age..."
LOADING_MESSAGE = "Loading users..."
EMPTY_RESULTS = "No matching users found."
PREVIOUS_LABEL = "Previous"
NEXT_LABEL = "Next"
