"""HTTP surface for WER scoring and transcript cleanup."""
