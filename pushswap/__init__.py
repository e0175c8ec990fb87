"""Sort integers with two stacks, check push-swap operation sequences, and the text helpers behind them."""

__version__ = "1.0.0"