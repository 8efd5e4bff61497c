# This package contains the user directory: a searchable, sortable, paginated table over fetched users.
# It exists so the table engine, the record source, and the Streamlit presentation live in one place.
# The table_engine subpackage is pure state and transformation logic with no UI dependencies.

__all__ = ["common", "dashboard", "table_engine"]
