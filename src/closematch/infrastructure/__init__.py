"""Infrastructure helpers: normalization, scoring primitives, file loading."""
