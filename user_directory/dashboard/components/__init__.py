# This package groups the Streamlit components used by the directory page.
# It exists to keep table and pagination rendering out of the app entrypoint.

__all__ = ["pagination", "tables"]
