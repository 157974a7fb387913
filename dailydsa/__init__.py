"""Classic array, string and greedy/dynamic-programming algorithms."""

__version__ = "0.1.0"
__all__ = ["arrays", "profits", "text", "scheduling"]