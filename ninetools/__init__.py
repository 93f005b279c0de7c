"""Exchange-rate lookup, RPN evaluation and merge-insertion sorting tools."""

__version__ = "0.1.0"
__all__ = ["exchange", "rpn", "pmergeme"]