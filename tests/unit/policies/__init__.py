"""Test package for quantization policies."""
