"""Output layer: Rich console, renderers, and format dispatch."""
