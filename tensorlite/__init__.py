"""Fixed-rank tensors with element-wise arithmetic, mapping and 3x3 two-dimensional convolution."""

__version__ = "0.1.0"
__all__ = ["shape", "functor", "tensor", "filter"]