"""JCE (Tars) serialization: encoder, decoder and protocol structures."""

__all__ = ["encoder", "decoder", "structs", "social"]