"""Pure date/time helpers (month grid, time range reconciliation)."""
