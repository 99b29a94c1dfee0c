"""Domain layer: records, errors and JSON parsing for LeetCode payloads."""
