"""Console-side collaborators: rendering and the REPL."""
