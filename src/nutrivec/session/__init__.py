"""Selection state helpers for interactive front ends."""
