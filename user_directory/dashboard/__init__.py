# This package contains the Streamlit user directory and its record source client.
# It exists so presentation and transport stay outside the pure table engine.
# The modules separate configuration, the HTTP client, UI components, and the app entrypoint.

__all__ = ["app"]
