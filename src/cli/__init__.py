"""Pass-through command line for the asset verifier."""
