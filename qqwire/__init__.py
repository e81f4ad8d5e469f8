"""Wire-level primitives for the QQ mobile protocol: TEA, binary packets, codecs and JCE."""

__version__ = "0.1.0"