"""Platform adapters: logging, filesystem, codecs and tag I/O."""
