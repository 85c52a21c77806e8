"""ANSI-aware layout engine and dashboard widgets for fixed-width terminals."""
