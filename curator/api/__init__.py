"""HTTP surface for the resource curator."""
