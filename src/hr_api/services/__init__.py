"""Application services package. Each public coroutine is one use-case."""
