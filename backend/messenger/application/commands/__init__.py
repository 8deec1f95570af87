"""Commands - operations that may write."""
