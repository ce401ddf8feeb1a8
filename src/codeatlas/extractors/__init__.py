"""Per-language analyzers that turn one source file into a FileReport."""
