"""objtasks command-line interface."""
