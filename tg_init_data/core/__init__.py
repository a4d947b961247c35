"""Core building blocks: query decoding, signatures, freshness, config and logging."""
