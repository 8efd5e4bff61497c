# This package holds cross-cutting helpers shared by the engine and the dashboard.
# It exists so settings and logging are configured the same way everywhere.

__all__ = ["logging", "settings"]
